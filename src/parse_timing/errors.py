"""Fault classes raised by the harness.

Each class carries the process exit code the CLI uses when it aborts on it.
"""


class ParseTimingError(Exception):
    """Base class for faults that abort a run."""

    exit_code: int = 1


class BufferLoadError(ParseTimingError):
    """The input file is missing or could not be read."""

    exit_code = 3

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        self.missing = isinstance(cause, FileNotFoundError)
        reason = "no such file" if self.missing else (cause.strerror or str(cause))
        super().__init__(f"cannot load '{path}': {reason}")


class MeasurementError(ParseTimingError):
    """The clock went backwards between two samples."""

    exit_code = 4

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(
            f"clock is not monotonic: end sample {end} precedes start sample {start}"
        )


class FormatterInvariantError(AssertionError):
    """Digit grouping ran out of step with its own group sizes.

    Signals a bug in the formatter, never bad input.
    """

    exit_code = 5
