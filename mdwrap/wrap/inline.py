# mdwrap/wrap/inline.py
"""
Width-bounded line breaking over inline segments.

Segments from `segment_inline` are grouped into spans that must stay on one
line (a code span or link with the punctuation after it), then packed
greedily. When a span does not fit, the line is cut at the last whitespace
boundary and the tail moves down with the span.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..utils.width import display_width
from .line_buffer import LineBuffer
from .tokenize import segment_inline

# ASCII closers plus common Unicode closers and word-final punctuation.
SPAN_PUNCTUATION = frozenset(".,;:!?)]\"'…—–»›）］】》」』、。，：；！？”’")

# Single characters that may be pulled back onto a line ending in a code span.
ATTACHABLE_PUNCTUATION = frozenset(".?!,:;")


class SpanKind(enum.Enum):
    GENERAL = "general"
    CODE = "code"
    LINK = "link"


@dataclass(frozen=True)
class Span:
    """Segments `start:end` that are placed on a line together."""

    start: int
    end: int
    width: int
    kind: SpanKind = SpanKind.GENERAL


def is_whitespace_token(token: str) -> bool:
    return token.isspace()


def is_punctuation_token(token: str) -> bool:
    return bool(token) and all(ch in SPAN_PUNCTUATION for ch in token)


def is_inline_code_token(token: str) -> bool:
    return token.startswith("`") and token.endswith("`")


def looks_like_link(token: str) -> bool:
    return (
        (token.startswith("[") or token.startswith("!["))
        and "](" in token
        and token.endswith(")")
    )


def _extend_punctuation(tokens: Sequence[str], j: int) -> int:
    while j < len(tokens) and is_punctuation_token(tokens[j]):
        j += 1
    return j


def _merge_lone_backtick(tokens: Sequence[str], i: int) -> int:
    """End of the group opened by an unmatched "`": up to and including the next one."""
    j = i + 1
    while j < len(tokens) and tokens[j] != "`":
        j += 1
    if j < len(tokens):
        j = _extend_punctuation(tokens, j + 1)
    return j


def _width_of(tokens: Sequence[str], start: int, end: int) -> int:
    return sum(display_width(t) for t in tokens[start:end])


def determine_token_span(tokens: Sequence[str], start: int, limit: Optional[int] = None) -> Span:
    """
    Group the segments starting at `start` into one unbreakable span.

    A code span or link absorbs the punctuation that follows it, and the
    whitespace before another code span, link or punctuation run, so
    `` `a` `b`. `` stays together. Any other segment is a span on its own.

    An unmatched single backtick pulls in everything up to the next lone
    backtick so a dangling code span is not split. When `limit` is given and
    that group is wider than it, the backtick stands alone instead.
    """
    first = tokens[start]
    kind = SpanKind.GENERAL
    end = start + 1

    if first == "`":
        merged = _merge_lone_backtick(tokens, start)
        if limit is None or _width_of(tokens, start, merged) <= limit:
            kind = SpanKind.CODE
            end = merged
    elif is_inline_code_token(first):
        kind = SpanKind.CODE
        end = _extend_punctuation(tokens, end)
    elif looks_like_link(first):
        kind = SpanKind.LINK
        end = _extend_punctuation(tokens, end)

    if kind is not SpanKind.GENERAL:
        while end < len(tokens):
            token = tokens[end]
            if is_whitespace_token(token):
                nxt = tokens[end + 1] if end + 1 < len(tokens) else None
                if nxt is not None and (
                    looks_like_link(nxt) or is_inline_code_token(nxt) or is_punctuation_token(nxt)
                ):
                    end += 1
                    continue
                break
            if is_punctuation_token(token):
                end += 1
                continue
            if (kind is SpanKind.LINK and looks_like_link(token)) or (
                kind is SpanKind.CODE and is_inline_code_token(token)
            ):
                end = _extend_punctuation(tokens, end + 1)
                continue
            break

    return Span(start, end, _width_of(tokens, start, end), kind)


def attach_punctuation_to_previous_line(lines: List[str], buffer: LineBuffer, token: str) -> bool:
    """
    Append a lone `.?!,:;` to the previous line when it ends in a code span.

    Only applies when the punctuation would otherwise open an empty line.
    """
    if not buffer.is_empty() or len(token) != 1 or token not in ATTACHABLE_PUNCTUATION:
        return False
    if not lines or not lines[-1].rstrip().endswith("`"):
        return False
    lines[-1] += token
    return True


def wrap_preserving_code(text: str, width: int) -> List[str]:
    """
    Wrap `text` to `width` display columns without splitting code spans or links.

    Returned lines carry no leading or trailing whitespace. A span wider than
    `width` is placed on a line of its own and left to overflow.
    """
    tokens = segment_inline(text)
    lines: List[str] = []
    buffer = LineBuffer()
    i = 0
    while i < len(tokens):
        span = determine_token_span(tokens, i, width)
        group = tokens[span.start : span.end]
        i = span.end

        if span.end - span.start == 1 and attach_punctuation_to_previous_line(lines, buffer, group[0]):
            continue

        whitespace = all(is_whitespace_token(t) for t in group)
        if whitespace and buffer.is_empty():
            # Whitespace is never carried onto the next line: a run that would
            # open a line is dropped outright, so wrapped lines never start
            # with whitespace.
            continue

        if buffer.width + span.width <= width:
            buffer = buffer.push(group, span.width, split_after=whitespace)
        elif buffer.last_split is not None:
            buffer, done = buffer.split_with(group, width)
            lines.extend(done)
        else:
            buffer, done = buffer.flush()
            lines.extend(done)
            if not whitespace:
                buffer = buffer.push(group, span.width)

    buffer, done = buffer.flush()
    lines.extend(done)
    return lines
