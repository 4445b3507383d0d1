"""Small helpers for scanning scene file lines."""

from __future__ import annotations

from typing import Optional

_BLANKS = " \t"


def skip_space(text: str) -> str:
    """text without its leading spaces and tabs."""
    return text.lstrip(_BLANKS)


def is_empty_line(text: str) -> bool:
    """True when text holds nothing but spaces, tabs and newlines."""
    return all(ch in " \t\n" for ch in text)


def trim_newline(text: Optional[str]) -> Optional[str]:
    """text with one trailing newline removed, if it has one."""
    if text is None:
        return None
    return text[:-1] if text.endswith("\n") else text