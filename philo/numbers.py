"""Integer parsing and small arithmetic helpers."""

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


class IntParseError(ValueError):
    """Raised when text is not a strict 32-bit integer."""

    def __init__(self, text, reason):
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


def _leading_digits(text: str, start: int) -> int:
    """Return the index just past the run of digits beginning at ``start``."""
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def parse_int_strict(text: str) -> int:
    """Parse an optionally signed decimal integer that must fit in 32 bits.

    The number may be followed only by the end of the text, a space or a
    newline. Anything else raises :class:`IntParseError`.
    """
    if text is None or not text or text[0] not in _DIGITS + "+-":
        raise IntParseError(text, "not a number")
    start = 1 if text[0] in "+-" else 0
    end = _leading_digits(text, start)
    if end == start:
        raise IntParseError(text, "no digits")
    value = int(text[start:end])
    if text[0] == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise IntParseError(text, "out of range")
    if end < len(text) and text[end] not in " \n":
        raise IntParseError(text, "trailing characters")
    return value


def parse_int_lenient(text: str) -> int:
    """Parse an integer loosely.

    Leading whitespace is skipped, then any run of ``+`` and ``-`` signs
    (each ``-`` flips the sign), then digits up to the first non-digit.
    Text without digits yields 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    while pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            negative = not negative
        pos += 1
    end = _leading_digits(text, pos)
    value = int(text[pos:end]) if end > pos else 0
    return -value if negative else value


def int_abs(num: int) -> int:
    """Absolute value clamped to the 32-bit range."""
    if num == INT_MIN:
        return INT_MAX
    return -num if num < 0 else num