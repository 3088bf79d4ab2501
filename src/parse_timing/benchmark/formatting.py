"""Digit grouping for durations.

``1234567`` renders as ``1,234,567``: groups of three counted from the least
significant digit, with a leading group of one to three digits.
"""

from parse_timing.errors import FormatterInvariantError

GROUP_SIZE = 3
SEPARATOR = ","


def group_digits(digits: str) -> str:
    """Insert a comma between every group of three digits.

    Args:
        digits: Decimal digit string of a nonnegative integer.

    Returns:
        The grouped string.

    Raises:
        ValueError: If ``digits`` is empty or contains a non-digit.
        FormatterInvariantError: If the grouping loses track of the digits.
    """
    if not digits:
        raise ValueError("Digit string cannot be empty")
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"Not a digit string: '{digits}'")

    leading = len(digits) % GROUP_SIZE or GROUP_SIZE

    out: list[str] = []
    pos = 0
    pending = leading
    while True:
        remaining = len(digits) - pos
        if pending == 0:
            if remaining == 0:
                break
            out.append(SEPARATOR)
            pending = GROUP_SIZE
            continue
        if remaining == 0:
            raise FormatterInvariantError(
                f"Bug in digit grouping: digits='{digits[pos:]}', pending={pending}"
            )
        out.append(digits[pos])
        pos += 1
        pending -= 1

    return "".join(out)


def format_duration(duration: int) -> str:
    """Group the decimal digits of a nonnegative integer.

    Raises:
        ValueError: If ``duration`` is negative.
    """
    if duration < 0:
        raise ValueError(f"Duration cannot be negative: {duration}")
    return group_digits(str(duration))


def format_duration_line(duration: int, unit: str) -> str:
    """Render ``duration`` as ``"<grouped> <unit>"``."""
    return f"{format_duration(duration)} {unit}"
