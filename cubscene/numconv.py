"""Conversion between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits gives 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(ch)
    return sign * value


def itoa(n: int) -> str:
    """Render an integer as decimal text, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    digits = []
    magnitude = -n if n < 0 else n
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(_DIGITS[digit])
        if not magnitude:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))