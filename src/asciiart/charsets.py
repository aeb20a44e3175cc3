# Printable ASCII range the glyph table is guaranteed to cover
MIN_CHAR = " "
MAX_CHAR = "~"

ASCII_PRINTABLE = "".join(chr(i) for i in range(ord(MIN_CHAR), ord(MAX_CHAR) + 1))

DIGITS = "0123456789"

DEFAULT_CHARS = DIGITS


def is_supported(char: str) -> bool:
    return len(char) == 1 and MIN_CHAR <= char <= MAX_CHAR


def char_range(start: str, end: str) -> str:
    """Inclusive range of characters; the order of the bounds does not matter."""
    lo, hi = sorted((ord(start), ord(end)))
    return "".join(chr(i) for i in range(lo, hi + 1))
