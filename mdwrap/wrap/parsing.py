# mdwrap/wrap/parsing.py
"""Parsers for the inline constructs the wrapper must keep whole."""
from __future__ import annotations

from .scanning import collect_range, has_odd_backslash_escape, scan_while

# Closers that stick to a preceding link literal.
LINK_TRAILING_PUNCTUATION = frozenset(".,;:!?)]\"'")


def is_trailing_punctuation(ch: str) -> bool:
    return ch in LINK_TRAILING_PUNCTUATION


def looks_like_image_start(text: str, idx: int) -> bool:
    """True when `text[idx:]` starts with `![`."""
    return text.startswith("![", idx)


def _single_char(text: str, start: int) -> tuple[str, int]:
    return collect_range(text, start, start + 1), start + 1


def parse_link_or_image(text: str, idx: int) -> tuple[str, int]:
    """
    Parse a `[label](url)` or `![alt](url)` literal starting at `idx`.

    Parentheses inside the URL nest (`(path(a(b)c))`); escaped parentheses do
    not count. Returns the literal and the index after its closing `)`. When
    the construct is incomplete only the opening character is returned so the
    caller can resume scanning right after it.
    """
    start = idx
    if text.startswith("!", idx):
        idx += 1
    if not text.startswith("[", idx):
        return _single_char(text, start)

    idx += 1
    while idx < len(text):
        if text[idx] == "]" and not has_odd_backslash_escape(text, idx):
            break
        idx += 1
    else:
        return _single_char(text, start)

    idx += 1
    if not text.startswith("(", idx):
        return _single_char(text, start)

    idx += 1
    depth = 1
    while idx < len(text):
        ch = text[idx]
        if ch in "()" and has_odd_backslash_escape(text, idx):
            idx += 1
            continue
        idx += 1
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return collect_range(text, start, idx), idx
    return _single_char(text, start)


def scan_link_punctuation(text: str, idx: int) -> int:
    """Return the end of the closer run at `idx`, stopping before an image opener."""
    end = idx
    while end < len(text) and is_trailing_punctuation(text[end]):
        if looks_like_image_start(text, end):
            break
        end += 1
    return end


def handle_backtick_fence(text: str, start: int) -> tuple[str, int]:
    """
    Match an inline code span opened by the backtick run at `start`.

    The span closes at the next unescaped run of exactly the same length;
    shorter or longer runs are skipped whole. Without a closer the opening run
    alone is returned as literal text.
    """
    fence_end = scan_while(text, start, _is_backtick)
    fence_len = fence_end - start
    pos = fence_end
    while pos < len(text):
        if text[pos] != "`":
            pos += 1
            continue
        run_end = scan_while(text, pos, _is_backtick)
        if run_end - pos == fence_len and not has_odd_backslash_escape(text, pos):
            return collect_range(text, start, run_end), run_end
        pos = run_end
    return collect_range(text, start, fence_end), fence_end


def _is_backtick(ch: str) -> bool:
    return ch == "`"
