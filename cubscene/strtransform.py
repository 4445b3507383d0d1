"""String helpers that build new strings: slicing, joining, trimming,
splitting and per-character mapping.

As elsewhere in the package, a string ends at its first NUL character.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence

from cubscene.strtools import strlen

_NUL = "\0"


def _cstr(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s[: strlen(s)]


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at index start.

    A start at or past the end of the string gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(a: str, b: str) -> str:
    """The concatenation of a and b."""
    return _cstr(a) + _cstr(b)


def strtrim(s: str, chars: str) -> str:
    """s with every leading and trailing character found in chars removed."""
    text = _cstr(s)
    trim_set = _cstr(chars)
    if not trim_set:
        return text
    return text.strip(trim_set)


def split(s: str, sep: str) -> List[str]:
    """The non-empty pieces of s separated by the character sep.

    Runs of separators produce no empty pieces. Splitting on the NUL
    character yields the whole string, or nothing when it is empty.
    """
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = _cstr(s)
    return [piece for piece in text.split(sep) if piece]


def striteri(s: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of s in place with func(index, character).

    s is a mutable sequence of one-character strings; processing stops at
    the first NUL character.
    """
    for index, ch in enumerate(s):
        if ch == _NUL:
            break
        s[index] = func(index, ch)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of func(index, character) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(s)))