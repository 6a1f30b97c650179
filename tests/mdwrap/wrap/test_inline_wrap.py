import pytest

from mdwrap.utils.width import display_width
from mdwrap.wrap import LineBuffer, Span, SpanKind, determine_token_span, segment_inline, wrap_preserving_code
from mdwrap.wrap.inline import attach_punctuation_to_previous_line


def test_plain_token_is_its_own_span():
    tokens = ["word", " ", "next"]
    assert determine_token_span(tokens, 0) == Span(0, 1, 4, SpanKind.GENERAL)


def test_code_span_absorbs_trailing_punctuation():
    tokens = segment_inline("`a`, then")
    assert tokens == ["`a`", ",", " ", "then"]
    span = determine_token_span(tokens, 0)
    assert (span.end, span.kind) == (2, SpanKind.CODE)


def test_code_spans_chain_across_whitespace():
    tokens = segment_inline("`a` `b`. done")
    span = determine_token_span(tokens, 0)
    assert "".join(tokens[span.start : span.end]) == "`a` `b`."
    assert span.width == 8


def test_link_absorbs_punctuation():
    tokens = segment_inline("[x](y)). more")
    span = determine_token_span(tokens, 0)
    assert span.kind is SpanKind.LINK
    assert "".join(tokens[: span.end]) == "[x](y))."


def test_unicode_closers_count_as_punctuation():
    tokens = ["`a`", "…", " ", "b"]
    assert determine_token_span(tokens, 0).end == 2


def test_lone_backtick_merges_to_next():
    tokens = ["`", "a", " ", "b", "`", ".", " ", "c"]
    assert determine_token_span(tokens, 0) == Span(0, 6, 6, SpanKind.CODE)


def test_lone_backtick_wider_than_limit_stands_alone():
    tokens = segment_inline("`dangling and a lot more words")
    assert determine_token_span(tokens, 0, 10) == Span(0, 1, 1, SpanKind.GENERAL)
    assert determine_token_span(tokens, 0).end == len(tokens)


def test_attach_punctuation_to_code_line():
    lines = ["ends with `code`"]
    assert attach_punctuation_to_previous_line(lines, LineBuffer(), ".")
    assert lines == ["ends with `code`."]


@pytest.mark.parametrize(
    "lines, buffer, token",
    [
        (["plain end"], LineBuffer(), "."),
        (["`code`"], LineBuffer("x", 1), "."),
        (["`code`"], LineBuffer(), ".."),
        (["`code`"], LineBuffer(), ")"),
        ([], LineBuffer(), "."),
    ],
)
def test_attach_punctuation_rejected(lines, buffer, token):
    before = list(lines)
    assert not attach_punctuation_to_previous_line(lines, buffer, token)
    assert lines == before


@pytest.mark.parametrize(
    "text, width, expected",
    [
        ("A word that is very-long-word indeed", 20, ["A word that is", "very-long-word", "indeed"]),
        ("Use `` `code` `` to quote backticks", 20, ["Use `` `code` `` to", "quote backticks"]),
        ("This has a `dangling code span.", 20, ["This has a", "`dangling code span."]),
        (
            "combine `foo bar` and `baz qux` in one line",
            25,
            ["combine `foo bar` and", "`baz qux` in one line"],
        ),
    ],
)
def test_wrap_preserving_code_scenarios(text, width, expected):
    assert wrap_preserving_code(text, width) == expected


def test_exact_width_fits():
    assert wrap_preserving_code("abcd efgh", 9) == ["abcd efgh"]
    assert wrap_preserving_code("abcd efgh", 8) == ["abcd", "efgh"]


def test_overlong_atom_gets_its_own_line():
    word = "a" * 30
    assert wrap_preserving_code(f"x {word} y", 10) == ["x", word, "y"]


def test_leading_and_trailing_whitespace_dropped():
    assert wrap_preserving_code("   padded text   ", 80) == ["padded text"]


def test_whitespace_only_text_yields_no_lines():
    assert wrap_preserving_code("    ", 10) == []
    assert wrap_preserving_code("", 10) == []


def test_wide_characters_use_display_width():
    lines = wrap_preserving_code("漢字漢字 漢字漢字 漢字", 10)
    assert lines == ["漢字漢字", "漢字漢字", "漢字"]
    assert all(display_width(line) <= 10 for line in lines)


def test_link_is_never_split():
    text = "Here is an image ![logo](https://example.com/logo.png) embedded in a sentence"
    lines = wrap_preserving_code(text, 30)
    assert any("![logo](https://example.com/logo.png)" in line for line in lines)


def test_rewrapping_is_idempotent():
    text = (
        "Idempotence means wrapping `already wrapped` text again changes nothing, "
        "even with [links](https://example.com) and trailing `code`."
    )
    once = wrap_preserving_code(text, 40)
    assert wrap_preserving_code(" ".join(once), 40) == once
