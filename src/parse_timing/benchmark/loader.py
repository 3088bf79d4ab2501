"""Reads the input file into a SourceBuffer."""

import logging
from pathlib import Path

from parse_timing.errors import BufferLoadError
from parse_timing.models import SourceBuffer

logger = logging.getLogger(__name__)


def load_buffer(path: str | Path) -> SourceBuffer:
    """Read a file fully into memory.

    Args:
        path: File to read.

    Returns:
        SourceBuffer holding the file's bytes.

    Raises:
        BufferLoadError: If the file does not exist or cannot be read.
    """
    path = Path(path)
    try:
        contents = path.read_bytes()
    except OSError as e:
        raise BufferLoadError(str(path), e) from e

    logger.debug("Loaded %s (%d bytes)", path, len(contents))
    return SourceBuffer(name=str(path), contents=contents)
