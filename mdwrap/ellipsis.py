# mdwrap/ellipsis.py
"""Replace runs of three dots with the ellipsis character outside code."""
import re
from typing import List, Sequence

from .models.tokens import Code, Fence, Newline, Text
from .wrap.tokenize import tokenize_markdown

DOT_RE = re.compile(r"\.{3,}")


def _ellipsize(match: "re.Match[str]") -> str:
    run = len(match.group(0))
    return "…" * (run // 3) + "." * (run % 3)


def replace_ellipsis(lines: Sequence[str]) -> List[str]:
    """
    Turn `...` into `…` in prose, leaving code spans and fenced blocks alone.

    Longer runs are consumed three dots at a time from the left; leftover
    dots stay as they are, so `.....` becomes `….`.

    >>> replace_ellipsis(["wait...", "`keep...`"])
    ['wait…', '`keep...`']
    """
    if not lines:
        return []
    parts: List[str] = []
    for token in tokenize_markdown("\n".join(lines)):
        if isinstance(token, Text):
            parts.append(DOT_RE.sub(_ellipsize, token.text))
        elif isinstance(token, Code):
            parts.append(token.raw)
        elif isinstance(token, Fence):
            parts.append(token.line)
        elif isinstance(token, Newline):
            parts.append("\n")
    return "".join(parts).split("\n")
