# mdwrap/wrap/line_buffer.py
"""
State of the output line being assembled by `wrap_preserving_code`.

`LineBuffer` is immutable: every transition returns the next buffer plus the
lines it completed, so each step can be exercised on its own.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..utils.width import display_width


@dataclass(frozen=True)
class LineBuffer:
    text: str = ""
    width: int = 0
    # Index in `text` just past the most recent whitespace span.
    last_split: Optional[int] = None

    def is_empty(self) -> bool:
        return not self.text

    def push(self, segments: Sequence[str], width: int, *, split_after: bool = False) -> "LineBuffer":
        """Append a span of `width` columns; `split_after` marks a break opportunity after it."""
        text = self.text + "".join(segments)
        last_split = len(text) if split_after else self.last_split
        return LineBuffer(text, self.width + width, last_split)

    def flush(self) -> Tuple["LineBuffer", List[str]]:
        """Complete the current line, trimmed of trailing whitespace."""
        line = self.text.rstrip()
        return LineBuffer(), [line] if line else []

    def split_with(self, segments: Sequence[str], limit: int) -> Tuple["LineBuffer", List[str]]:
        """
        Break at the last split point and carry the tail onto a new line with `segments`.

        The head (trimmed) becomes a finished line. If the new line is already
        wider than `limit` it is finished immediately as well.
        """
        assert self.last_split is not None, "split_with requires a recorded split point"
        done: List[str] = []
        head = self.text[: self.last_split].rstrip()
        if head:
            done.append(head)

        text = self.text[self.last_split :].lstrip() + "".join(segments)
        if not text.strip():
            return LineBuffer(), done

        split_after = segments[-1].isspace()
        seeded = LineBuffer(text, display_width(text), len(text) if split_after else None)
        if seeded.width > limit:
            seeded, flushed = seeded.flush()
            done.extend(flushed)
        return seeded, done
