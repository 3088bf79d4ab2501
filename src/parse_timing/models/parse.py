"""Data models for a single timed parse.

The models are frozen: a buffer is created once per run and handed to the
parser untouched, and the configuration never changes between runs.

Key features:
- SourceBuffer keeps raw bytes so the parser does its own encoding detection
- ParserConfig documents which fields the parser actually reads
- ParseOutcome is a tagged union discriminated on ``kind``
"""

import __future__
import ast
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

PLACEHOLDER_FILENAME = "<parse-module>"

# Bits compile() accepts on top of PyCF_ONLY_AST
KNOWN_EXTENSION_FLAGS = ast.PyCF_TYPE_COMMENTS | ast.PyCF_ALLOW_TOP_LEVEL_AWAIT
for _feature in __future__.all_feature_names:
    KNOWN_EXTENSION_FLAGS |= getattr(__future__, _feature).compiler_flag


class SourceBuffer(BaseModel):
    """Full contents of the input file plus the path it was read from.

    Attributes:
        name: Path of the file the contents came from.
        contents: Raw bytes of the file.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    contents: bytes

    @property
    def size(self) -> int:
        """Return the buffer length in bytes."""
        return len(self.contents)


class ParserConfig(BaseModel):
    """Configuration handed to the module parser.

    Only ``extension_flags`` and ``filename`` reach the parser. The other two
    fields are carried so the configuration is complete, and are ignored for
    this harness.

    Attributes:
        warning_flags: Warning categories to enable. Ignored for this harness.
        unit_id: Identity of the compilation unit. Ignored for this harness.
        extension_flags: Feature bitmask OR'ed into ``compile()`` flags.
        filename: Name the parser reports in diagnostics.

    Example:
        >>> ParserConfig.default().extension_flags
        0
    """

    model_config = ConfigDict(frozen=True)

    warning_flags: frozenset[str] = Field(default_factory=frozenset)
    unit_id: str | None = Field(default=None)
    extension_flags: int = Field(default=0, ge=0)
    filename: str = Field(default=PLACEHOLDER_FILENAME, min_length=1)

    @field_validator("extension_flags")
    @classmethod
    def validate_extension_flags(cls, v: int) -> int:
        """Reject bits the parser does not recognise."""
        unknown = v & ~KNOWN_EXTENSION_FLAGS
        if unknown:
            raise ValueError(f"Unknown extension flag bits: {unknown:#x}")
        return v

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Keep the placeholder form so diagnostics never carry the real path."""
        if not (v.startswith("<") and v.endswith(">")):
            raise ValueError(f"Filename must be a placeholder like '<name>', got '{v}'")
        return v

    @classmethod
    def default(cls) -> "ParserConfig":
        """Return the configuration used for every timed run: no extensions."""
        return cls()


class Parsed(BaseModel):
    """Successful parse. ``tree`` is the module AST."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["parsed"] = "parsed"
    tree: Any = Field(default=None, exclude=True, repr=False)

    @property
    def succeeded(self) -> bool:
        return True


class Failed(BaseModel):
    """Failed parse. ``error`` is the exception the parser raised.

    The error is kept raw; ``diagnostic`` renders it on demand, outside the
    timed section.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["failed"] = "failed"
    error: Any = Field(default=None, exclude=True, repr=False)

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def diagnostic(self) -> str:
        """Return ``file:line:offset: message`` for syntax errors, else the message."""
        error = self.error
        if error is None:
            return ""
        if isinstance(error, SyntaxError) and error.lineno is not None:
            return f"{error.filename}:{error.lineno}:{error.offset}: {error.msg}"
        return str(error) or type(error).__name__


ParseOutcome = Annotated[Union[Parsed, Failed], Field(discriminator="kind")]
