import pytest

from mdwrap.wrap.parsing import (
    handle_backtick_fence,
    looks_like_image_start,
    parse_link_or_image,
    scan_link_punctuation,
)


def test_parse_simple_link():
    text = "[docs](https://example.com) tail"
    assert parse_link_or_image(text, 0) == ("[docs](https://example.com)", 27)


def test_parse_image_with_nested_parens():
    text = "![alt](path(a(b)c))"
    token, end = parse_link_or_image(text, 0)
    assert token == text
    assert end == len(text)


def test_escaped_paren_does_not_nest():
    text = "[x](a\\(b)"
    token, end = parse_link_or_image(text, 0)
    assert token == text
    assert end == len(text)


@pytest.mark.parametrize(
    "text",
    [
        "[no close",
        "[label] (space)",
        "[label](unterminated",
        "![alt",
    ],
)
def test_incomplete_link_yields_single_char(text):
    token, end = parse_link_or_image(text, 0)
    assert token == text[0]
    assert end == 1


def test_escaped_closing_bracket_is_skipped():
    text = "[a\\]b](u)"
    assert parse_link_or_image(text, 0) == (text, len(text))


def test_looks_like_image_start():
    assert looks_like_image_start("x![a](b)", 1)
    assert not looks_like_image_start("x!a", 1)


def test_link_punctuation_stops_before_image():
    text = "[a](b).,![c](d)"
    assert scan_link_punctuation(text, 6) == 8
    assert scan_link_punctuation("[a](b)) x", 6) == 7
    assert scan_link_punctuation("[a](b) x", 6) == 6


def test_backtick_fence_matches_same_length_run():
    text = "``a ` b`` rest"
    assert handle_backtick_fence(text, 0) == ("``a ` b``", 9)


def test_backtick_fence_skips_longer_runs():
    text = "`a``b` c"
    assert handle_backtick_fence(text, 0) == ("`a``b`", 6)


def test_backtick_fence_without_closer_is_literal():
    assert handle_backtick_fence("``open code", 0) == ("``", 2)


def test_backtick_fence_ignores_escaped_closer():
    assert handle_backtick_fence("`a\\` b", 0) == ("`", 1)
