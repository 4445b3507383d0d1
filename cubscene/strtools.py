"""String helpers with C string semantics.

A string ends at its first NUL character, if it holds one; everything after
it is ignored. Searches return indices instead of pointers.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterable, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _cstr(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _first_difference(pairs: Iterable[Tuple[str, str]]) -> int:
    for x, y in pairs:
        if x != y:
            return ord(x) - ord(y)
        if x == _NUL:
            break
    return 0


def _padded(a: str, b: str) -> Iterable[Tuple[str, str]]:
    # The terminator takes part in the comparison, as in C.
    return zip_longest(_cstr(a) + _NUL, _cstr(b) + _NUL, fillvalue=_NUL)


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_cstr(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    text = _cstr(src)
    copied = text[: size - 1] if size else ""
    return copied, len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting text and the length the full result would have;
    when size does not exceed dest's length, dest is unchanged and the
    returned length is size plus the length of src.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    head = _cstr(dest)
    tail = _cstr(src)
    if size <= len(head):
        return head, size + len(tail)
    return head + tail[: size - len(head) - 1], len(head) + len(tail)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    Searching for the terminator gives the string's length.
    """
    text = _cstr(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c, or None.

    Searching for the terminator gives the string's length.
    """
    text = _cstr(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; the difference of the first mismatch, or 0."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return _first_difference(islice(_padded(a, b), n))


def strcmp(a: Optional[str], b: Optional[str]) -> int:
    """Compare two strings; the difference of the first mismatch, or 0.

    A missing string on either side compares as -1.
    """
    if a is None or b is None:
        return -1
    return _first_difference(_padded(a, b))


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of needle within the first n characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    wanted = _cstr(needle)
    if not wanted:
        return 0
    index = _cstr(haystack)[:n].find(wanted)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of the string up to its terminator."""
    return _cstr(s)


def strcpy(src: str) -> str:
    """The text a destination buffer holds after copying src into it."""
    return _cstr(src)


def strcat(dest: str, src: Optional[str]) -> str:
    """dest with src appended; a missing src leaves dest unchanged."""
    head = _cstr(dest)
    if src is None:
        return head
    return head + _cstr(src)