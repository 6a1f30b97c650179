# mdwrap/wrap/fence.py
"""Fenced code block detection."""
from __future__ import annotations

import re
from typing import Optional, Tuple

# indent, marker run (3+ backticks or tildes), and the full info string
FENCE_RE = re.compile(r"^(\s*)(`{3,}|~{3,})([^\r\n]*)\Z")


def is_fence(line: str) -> Optional[Tuple[str, str, str]]:
    """
    Return `(indent, marker, info)` when `line` is a fence marker line.

    >>> is_fence("``` rust")
    ('', '```', ' rust')
    >>> is_fence("not a fence") is None
    True
    """
    m = FENCE_RE.match(line)
    if not m:
        return None
    return m.group(1), m.group(2), m.group(3)


class FenceTracker:
    """
    Tracks whether a sequence of lines is currently inside a fenced block.

    A block opened with marker character `c` and length `n` only closes on a
    marker line using the same character with length >= `n`. Other marker
    lines seen inside the block are content: they neither close it nor open
    a nested one. This lets a four-backtick fence carry literal ``` lines.
    """

    def __init__(self) -> None:
        self._state: Optional[Tuple[str, int]] = None

    def observe(self, line: str) -> bool:
        """Feed one line; return True if it is a fence marker line."""
        parts = is_fence(line)
        if parts is None:
            return False
        marker = parts[1]
        marker_ch, marker_len = marker[0], len(marker)
        if self._state is None:
            self._state = (marker_ch, marker_len)
        else:
            open_ch, open_len = self._state
            if marker_ch == open_ch and marker_len >= open_len:
                self._state = None
        return True

    def in_fence(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> Optional[Tuple[str, int]]:
        """The `(marker_char, marker_len)` of the open fence, or None."""
        return self._state
