"""Module parser backed by the interpreter's own grammar."""

import ast

from parse_timing.models import Failed, Parsed, ParserConfig, ParseOutcome, SourceBuffer
from parse_timing.parsers.base import BaseParser


class ModuleParser(BaseParser):
    """Parses a buffer as a Python module with ``compile(..., PyCF_ONLY_AST)``.

    The call is a single whole-module parse starting at line 1, column 1, under
    the config's placeholder filename. Bytecode is never generated and the
    caller's ``__future__`` imports are not inherited.

    Attributes:
        name: Parser identifier used in benchmarks and logging.
    """

    @property
    def name(self) -> str:
        return "cpython-ast"

    def parse_module(self, config: ParserConfig, buffer: SourceBuffer) -> ParseOutcome:
        flags = ast.PyCF_ONLY_AST | config.extension_flags
        try:
            tree = compile(buffer.contents, config.filename, "exec", flags=flags, dont_inherit=True)
        except (SyntaxError, ValueError, RecursionError, MemoryError) as e:
            # ValueError: null bytes in source before 3.12
            # RecursionError, MemoryError: nesting too deep for the parser or AST builder
            return Failed(error=e)
        return Parsed(tree=tree)
