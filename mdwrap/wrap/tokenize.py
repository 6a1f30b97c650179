# mdwrap/wrap/tokenize.py
"""
Tokenizers used by the wrapper and by the post-wrap passes.

`segment_inline` cuts one line into string segments the line breaker can
treat as atoms. `tokenize_markdown` works on a whole document and yields
`Fence` / `Code` / `Text` / `Newline` tokens so later passes (ellipsis
substitution, for one) can rewrite prose without touching code.
"""
from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Tuple

from ..models.tokens import Code, Fence, Newline, Text, Token
from .fence import FenceTracker
from .parsing import (
    handle_backtick_fence,
    looks_like_image_start,
    parse_link_or_image,
    scan_link_punctuation,
)
from .scanning import (
    bracket_follows_escaped_bang,
    collect_range,
    has_odd_backslash_escape,
    scan_while,
)


def _is_space(ch: str) -> bool:
    return ch.isspace()


def _scan_word(text: str, start: int) -> int:
    """End of a plain word fragment starting at `start`."""
    i = start
    while i < len(text):
        ch = text[i]
        if ch.isspace() or ch == "`":
            break
        escaped = has_odd_backslash_escape(text, i)
        if ch == "[":
            if not escaped and not bracket_follows_escaped_bang(text, i):
                break
        elif looks_like_image_start(text, i) and not escaped:
            break
        i += 1
    # A fragment always consumes at least one character.
    return i if i > start else start + 1


def segment_inline(text: str) -> List[str]:
    """
    Break one line of text into wrap segments.

    Whitespace runs, code spans, link and image literals, punctuation trailing
    a link, and plain word fragments each become one segment. Joining the
    segments gives back `text` exactly. Unterminated constructs degrade to
    literal text.

    >>> segment_inline("see [link](url) and `code`")
    ['see', ' ', '[link](url)', ' ', 'and', ' ', '`code`']
    >>> segment_inline("foo  bar\\tbaz")
    ['foo', '  ', 'bar', '\\t', 'baz']
    """
    tokens: List[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace():
            end = scan_while(text, i, _is_space)
            tokens.append(collect_range(text, i, end))
            i = end
            continue

        if ch == "`":
            if has_odd_backslash_escape(text, i):
                # An escaped backtick is literal; glue it to the preceding fragment.
                if tokens:
                    tokens[-1] += ch
                else:
                    tokens.append(ch)
                i += 1
                continue
            token, i = handle_backtick_fence(text, i)
            tokens.append(token)
            continue

        if (ch == "[" or looks_like_image_start(text, i)) and not has_odd_backslash_escape(text, i):
            token, i = parse_link_or_image(text, i)
            tokens.append(token)
            if len(token) > 1:
                punct_end = scan_link_punctuation(text, i)
                if punct_end > i:
                    tokens.append(collect_range(text, i, punct_end))
                    i = punct_end
            continue

        end = _scan_word(text, i)
        tokens.append(collect_range(text, i, end))
        i = end
    return tokens


def _next_token(line: str, offset: int) -> Optional[Tuple[Token, int]]:
    """Next `Text` or `Code` token of `line` at `offset`, with its length."""
    rest = line[offset:]
    if not rest:
        return None

    delim_len = scan_while(rest, 0, lambda c: c == "`")
    if delim_len == 0:
        search = 0
        while True:
            pos = rest.find("`", search)
            if pos == -1:
                return Text(rest), len(rest)
            if has_odd_backslash_escape(line, offset + pos):
                search = pos + 1
                continue
            return Text(rest[:pos]), pos

    if has_odd_backslash_escape(line, offset):
        return Text(rest[:1]), 1

    fence = rest[:delim_len]
    search = delim_len
    while True:
        pos = rest.find(fence, search)
        if pos == -1:
            break
        run_end = scan_while(rest, pos, lambda c: c == "`")
        if run_end - pos == delim_len and not has_odd_backslash_escape(line, offset + pos):
            return Code(raw=rest[:run_end], fence=fence, code=rest[delim_len:pos]), run_end
        search = run_end
    return Text(fence), delim_len


def tokenize_inline(line: str, emit: Callable[[Token], None]) -> None:
    """Emit `Text` and `Code` tokens for one line outside fenced blocks."""
    offset = 0
    while offset < len(line):
        found = _next_token(line, offset)
        if found is None:
            break
        token, used = found
        emit(token)
        offset += used


def split_lines(source: str) -> Tuple[List[str], bool]:
    """Split on `\\n` (dropping a `\\r` before it); report a trailing newline."""
    had_trailing_newline = source.endswith("\n")
    parts = source.split("\n")
    if had_trailing_newline:
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts], had_trailing_newline


def iter_markdown_tokens(source: str) -> Iterator[Token]:
    lines, had_trailing_newline = split_lines(source)
    tracker = FenceTracker()
    pending: List[Token] = []
    for idx, line in enumerate(lines):
        if tracker.observe(line) or tracker.in_fence():
            yield Fence(line)
        else:
            tokenize_inline(line, pending.append)
            yield from pending
            pending.clear()
        if idx + 1 < len(lines) or had_trailing_newline:
            yield Newline()


def tokenize_markdown(source: str) -> List[Token]:
    """
    Tokenize a Markdown document into fence, code, text and newline tokens.

    Lines inside fenced blocks (markers included) come out verbatim as
    `Fence`. Elsewhere, matched backtick runs become `Code` and everything
    else `Text`; an unmatched run is left as `Text`. A `Newline` separates
    lines and follows the last one only if the source ended with a newline.

    >>> tokenize_markdown("Example with `code`")
    [Text(text='Example with '), Code(raw='`code`', fence='`', code='code')]
    """
    if not source:
        return []
    return list(iter_markdown_tokens(source))
