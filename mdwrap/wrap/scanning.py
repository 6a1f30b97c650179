# mdwrap/wrap/scanning.py
"""
Cursor helpers shared by the inline tokenizers.

Positions are string indices (code points). None of these helpers keep state
beyond the index they are given.
"""
from typing import Callable

BACKSLASH = "\\"


def scan_while(text: str, start: int, cond: Callable[[str], bool]) -> int:
    """Advance from `start` while `cond` holds; return the first failing index."""
    idx = start
    end = len(text)
    while idx < end and cond(text[idx]):
        idx += 1
    return idx


def collect_range(text: str, start: int, end: int) -> str:
    return text[start:end]


def has_odd_backslash_escape(text: str, idx: int) -> bool:
    """True when the character at `idx` is preceded by an odd run of backslashes."""
    count = 0
    while idx > 0:
        idx -= 1
        if text[idx] != BACKSLASH:
            break
        count += 1
    return count % 2 == 1


def bracket_follows_escaped_bang(text: str, idx: int) -> bool:
    """True when the `[` at `idx` directly follows an escaped `!` (as in `\\![`)."""
    if idx == 0 or text[idx - 1] != "!":
        return False
    return has_odd_backslash_escape(text, idx - 1)
