# mdwrap/wrap/paragraph.py
"""
Paragraph orchestration: decides which lines are wrapped, which are copied
through, and how list, footnote and blockquote prefixes carry over.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..errors.width import check_width
from ..models.blocks import BlockKind
from ..utils.width import display_width
from .block import (
    LINK_DEFINITION_RE,
    THEMATIC_BREAK_RE,
    BlockPrefix,
    classify_block,
    indent_columns,
    is_table_row,
    split_prefix,
)
from .fence import FenceTracker
from .inline import wrap_preserving_code

BR_SUFFIXES = ("<br />", "<br/>", "<br>")

INDENTED_CODE_COLUMNS = 4

_PREFIXED_KINDS = (BlockKind.BULLET, BlockKind.FOOTNOTE_DEFINITION, BlockKind.BLOCKQUOTE)
_VERBATIM_KINDS = (BlockKind.HEADING, BlockKind.MARKDOWNLINT_DIRECTIVE)


def _strip_br(text: str) -> str:
    lowered = text.lower()
    for suffix in BR_SUFFIXES:
        if lowered.endswith(suffix):
            return text[: -len(suffix)]
    return text


def has_hard_break(line: str) -> bool:
    """True if `line` forces a line break after it."""
    if line.endswith("  "):
        return True
    stripped = line.rstrip()
    if _strip_br(stripped) != stripped:
        return True
    backslashes = len(stripped) - len(stripped.rstrip("\\"))
    return backslashes % 2 == 1


def _clean(line: str) -> str:
    # Break markers other than the backslash are dropped from the output.
    return _strip_br(line.rstrip()).strip().rstrip(" ")


class _ParagraphBuffer:
    """Lines of the plain paragraph being accumulated, plus its indent."""

    def __init__(self, width: int) -> None:
        self.width = width
        self.indent: Optional[str] = None
        self.segment: List[str] = []

    def is_empty(self) -> bool:
        return self.indent is None

    def add(self, line: str, out: List[str]) -> None:
        if self.indent is None:
            self.indent = line[: len(line) - len(line.lstrip())]
        text = _clean(line)
        if text:
            self.segment.append(text)
        if has_hard_break(line):
            self._emit(out)

    def _emit(self, out: List[str]) -> None:
        if not self.segment:
            return
        indent = self.indent or ""
        text = " ".join(self.segment)
        self.segment = []
        available = max(1, self.width - display_width(indent))
        out.extend(indent + line for line in wrap_preserving_code(text, available))

    def flush(self, out: List[str]) -> None:
        self._emit(out)
        self.indent = None


def append_wrapped_with_prefix(out: List[str], prefix: BlockPrefix, width: int) -> None:
    """
    Wrap `prefix.body` beside `prefix.prefix` and append the lines to `out`.

    The first line carries the prefix. Continuation lines repeat it when
    `prefix.repeat` is set (blockquotes) and are otherwise padded with spaces
    to the prefix's width, keeping its leading whitespace as written.
    """
    prefix_width = display_width(prefix.prefix)
    available = max(1, width - prefix_width)
    if prefix.repeat:
        continuation = prefix.prefix
    else:
        indent = prefix.prefix[: len(prefix.prefix) - len(prefix.prefix.lstrip())]
        continuation = indent + " " * max(0, prefix_width - display_width(indent))

    lines = wrap_preserving_code(prefix.body, available)
    if not lines:
        out.append(prefix.prefix)
        return
    out.append(prefix.prefix + lines[0])
    out.extend(continuation + line for line in lines[1:])


def _is_indented_code(line: str, kind: Optional[BlockKind], previous: Optional[str], in_code: bool) -> bool:
    if indent_columns(line) < INDENTED_CODE_COLUMNS:
        return False
    if kind not in (None, BlockKind.DIGIT_PREFIX):
        return False
    return previous is None or not previous.strip() or in_code


def wrap_text(lines: Sequence[str], width: int) -> List[str]:
    """
    Wrap Markdown `lines` to `width` display columns.

    Consecutive paragraph lines are joined and re-wrapped; hard breaks end a
    segment early. Bullets, footnote definitions and blockquotes are wrapped
    one line at a time behind their prefix. Fences and their contents, table
    rows, headings, blank lines, markdownlint directives, thematic breaks,
    link reference definitions and indented code are copied verbatim.

    >>> wrap_text(["A word that is very-long-word indeed"], 20)
    ['A word that is', 'very-long-word', 'indeed']
    """
    width = check_width(width)
    out: List[str] = []
    paragraph = _ParagraphBuffer(width)
    fences = FenceTracker()
    previous: Optional[str] = None
    in_code = False

    for line in lines:
        code_line = False
        if fences.observe(line) or fences.in_fence():
            paragraph.flush(out)
            out.append(line)
        elif not line.strip():
            paragraph.flush(out)
            out.append(line)
            code_line = in_code
        elif is_table_row(line) or THEMATIC_BREAK_RE.match(line):
            paragraph.flush(out)
            out.append(line)
        else:
            kind = classify_block(line)
            if paragraph.is_empty() and _is_indented_code(line, kind, previous, in_code):
                out.append(line)
                code_line = True
            elif kind in _VERBATIM_KINDS:
                paragraph.flush(out)
                out.append(line)
            elif kind in _PREFIXED_KINDS:
                paragraph.flush(out)
                prefix = split_prefix(kind, line)
                assert prefix is not None, "prefixed kinds always split"
                append_wrapped_with_prefix(out, prefix, width)
            elif LINK_DEFINITION_RE.match(line):
                paragraph.flush(out)
                out.append(line)
            else:
                paragraph.add(line, out)
        in_code = code_line
        previous = line

    paragraph.flush(out)
    return out


wrap_paragraph = wrap_text
