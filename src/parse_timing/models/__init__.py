"""Data models for parse inputs, configuration and outcomes.

This module provides Pydantic models for:
- SourceBuffer: The in-memory contents of the file being parsed
- ParserConfig: The fixed configuration handed to the parser
- ParseOutcome: Parsed or Failed verdict of a single parse
"""

from .parse import SourceBuffer, ParserConfig, Parsed, Failed, ParseOutcome, PLACEHOLDER_FILENAME

__all__ = [
    "SourceBuffer",
    "ParserConfig",
    "Parsed",
    "Failed",
    "ParseOutcome",
    "PLACEHOLDER_FILENAME",
]
