# mdwrap/wrap/block.py
"""
Block-level prefix classification shared by wrapping and table detection.

The patterns are compiled once at import and never mutated afterwards.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

from ..models.blocks import BlockKind

# marker (-, *, +, N. or N)), its spacing, and an optional task checkbox
BULLET_RE = re.compile(r"^(\s*(?:[-*+]|\d+[.)])\s+(?:\[\s*(?:[xX]|\s)\s*\]\s*)?)(.*)")

FOOTNOTE_RE = re.compile(r"^(\s*)(\[\^[^\]]+\]:\s*)(.*)$")

BLOCKQUOTE_RE = re.compile(r"^(\s*(?:>\s*)+)(.*)$")

# <!-- markdownlint-disable -->, <!-- markdownlint-enable MD013 -->,
# <!-- markdownlint-disable-next-line MD001 plugin/rule-name -->, ...
MARKDOWNLINT_DIRECTIVE_RE = re.compile(
    r"^\s*<!--\s*markdownlint-(?:disable|enable|disable-line|disable-next-line)"
    r"(?:\s+[A-Za-z0-9_\-/]+)*\s*-->\s*$",
    re.IGNORECASE,
)

# Table separator rows such as `|---|:--:|`, matched against the stripped line.
TABLE_SEP_RE = re.compile(r"^[\s|:-]+$")

# Thematic breaks and setext underlines: ---, ***, ___, ===, - - -
THEMATIC_BREAK_RE = re.compile(r"^ {0,3}([-*_=])(?:[ \t]*\1){2,}[ \t]*$")

# Link reference definitions: [id]: https://example.com "Title"
LINK_DEFINITION_RE = re.compile(r"^ {0,3}\[(?!\^)[^\]]+\]:\s+\S")

HEADING_MAX_INDENT = 4


class BlockPrefix(NamedTuple):
    """Structural prefix split off a line, and how continuation lines reuse it."""

    prefix: str
    body: str
    repeat: bool  # True: repeat the prefix verbatim; False: pad with spaces


def indent_columns(line: str) -> int:
    """Columns of leading whitespace, with tabs stopping every four columns."""
    lead = line[: len(line) - len(line.lstrip())]
    return len(lead.expandtabs(4))


def is_markdownlint_directive(line: str) -> bool:
    return MARKDOWNLINT_DIRECTIVE_RE.match(line) is not None


def is_table_row(line: str) -> bool:
    stripped = line.strip()
    return line.lstrip().startswith("|") or bool(stripped and TABLE_SEP_RE.match(stripped))


def classify_block(line: str) -> Optional[BlockKind]:
    """
    Classify the block prefix of `line`.

    Precedence is heading, bullet, blockquote, footnote definition,
    markdownlint directive, digit prefix, so `# 1` stays a heading. Headings
    indented by four or more columns are indented code and are not reported.

    >>> classify_block("> quote")
    <BlockKind.BLOCKQUOTE: 'blockquote'>
    >>> classify_block("| cell |") is None
    True
    """
    trimmed = line.lstrip()
    if indent_columns(line) < HEADING_MAX_INDENT and trimmed.startswith("#"):
        return BlockKind.HEADING
    if BULLET_RE.match(line):
        return BlockKind.BULLET
    if BLOCKQUOTE_RE.match(line):
        return BlockKind.BLOCKQUOTE
    if FOOTNOTE_RE.match(line):
        return BlockKind.FOOTNOTE_DEFINITION
    if is_markdownlint_directive(line):
        return BlockKind.MARKDOWNLINT_DIRECTIVE
    if trimmed[:1].isdigit() and trimmed[:1].isascii():
        return BlockKind.DIGIT_PREFIX
    return None


def split_prefix(kind: Optional[BlockKind], line: str) -> Optional[BlockPrefix]:
    """
    Separate the structural prefix from the wrappable body of a prefixed line.

    Only bullets, footnote definitions and blockquotes carry a prefix; every
    other kind returns None.
    """
    if kind is BlockKind.BULLET:
        m = BULLET_RE.match(line)
        assert m is not None, "bullet classification implies a bullet match"
        return BlockPrefix(m.group(1), m.group(2), repeat=False)
    if kind is BlockKind.FOOTNOTE_DEFINITION:
        m = FOOTNOTE_RE.match(line)
        assert m is not None, "footnote classification implies a footnote match"
        return BlockPrefix(m.group(1) + m.group(2), m.group(3), repeat=False)
    if kind is BlockKind.BLOCKQUOTE:
        m = BLOCKQUOTE_RE.match(line)
        assert m is not None, "blockquote classification implies a blockquote match"
        return BlockPrefix(m.group(1), m.group(2), repeat=True)
    return None
