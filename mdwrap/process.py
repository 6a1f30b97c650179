# mdwrap/process.py
"""
Whole-document pipeline: front matter, fences and tables pass through, the
remaining prose is wrapped and optionally gets ellipsis substitution.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ._logging import resolve_logger
from .ellipsis import replace_ellipsis
from .errors.width import check_width
from .wrap.block import TABLE_SEP_RE
from .wrap.fence import FenceTracker
from .wrap.paragraph import wrap_text
from .wrap.tokenize import split_lines

# Column width used when no width is configured.
WRAP_COLS = 80


@dataclass(frozen=True)
class Options:
    """Switches for `process_stream`; the CLI maps its flags onto these one-to-one."""

    wrap: bool = True
    width: int = WRAP_COLS
    ellipsis: bool = False


def frontmatter_len(lines: Sequence[str]) -> int:
    """Number of leading lines forming a YAML front matter block, or 0."""
    if not lines or lines[0].strip() != "---":
        return 0
    for idx in range(1, len(lines)):
        if lines[idx].strip() == "---":
            return idx + 1
    return 0


def _continues_table(line: str) -> bool:
    return "|" in line or bool(TABLE_SEP_RE.match(line.strip()))


def _wrap_chunks(body: Sequence[str], width: int) -> List[str]:
    """Wrap prose between tables; table blocks are spliced back verbatim."""
    out: List[str] = []
    prose: List[str] = []
    table: List[str] = []
    fences = FenceTracker()

    def flush_prose() -> None:
        if prose:
            out.extend(wrap_text(prose, width))
            prose.clear()

    def flush_table() -> None:
        out.extend(table)
        table.clear()

    for line in body:
        if fences.observe(line) or fences.in_fence():
            flush_table()
            prose.append(line)
            continue
        if line.lstrip().startswith("|") or (table and line.strip() and _continues_table(line)):
            if not table:
                flush_prose()
            table.append(line)
            continue
        flush_table()
        prose.append(line)

    flush_table()
    flush_prose()
    return out


def process_stream(
    lines: Sequence[str],
    options: Optional[Options] = None,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[str]:
    """
    Process a Markdown document given as lines without their newlines.

    Stages run in a fixed order: YAML front matter is set aside, the body is
    wrapped (tables and fenced blocks untouched), then `...` runs are
    replaced. Front matter is re-attached unchanged.
    """
    opts = options or Options()
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)

    fm_len = frontmatter_len(lines)
    frontmatter, body = list(lines[:fm_len]), list(lines[fm_len:])
    if fm_len:
        lg.debug("front matter: %d lines kept verbatim", fm_len)

    if opts.wrap:
        width = check_width(opts.width)
        out = _wrap_chunks(body, width)
        lg.debug("wrapped %d lines into %d at width %d", len(body), len(out), width)
    else:
        out = body

    if opts.ellipsis:
        out = replace_ellipsis(out)
        lg.debug("ellipsis substitution applied")

    return frontmatter + out


def process_text(text: str, options: Optional[Options] = None, **kwargs) -> str:
    """
    Process a whole document held in one string.

    Lines are split on `\\n` only, with a `\\r` before it dropped, so form
    feeds and Unicode line separators stay inside their line. The result
    ends with a newline unless it is empty.
    """
    if not text:
        return ""
    lines, _ = split_lines(text)
    out = process_stream(lines, options, **kwargs)
    return "\n".join(out) + "\n" if out else ""


def process_stream_no_wrap(
    lines: Sequence[str],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[str]:
    """`process_stream` with wrapping turned off."""
    return process_stream(lines, Options(wrap=False), logger=logger, log=log)
