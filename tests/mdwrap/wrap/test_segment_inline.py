import pytest

from mdwrap.wrap import segment_inline


def test_unicode_words_and_code():
    assert segment_inline("ßß `λ` фин") == ["ßß", " ", "`λ`", " ", "фин"]


def test_link_keeps_trailing_period_separate():
    assert segment_inline("see [link](url).") == ["see", " ", "[link](url)", "."]


def test_image_with_nested_parens_is_one_segment():
    assert segment_inline("![alt](path(a(b)c))") == ["![alt](path(a(b)c))"]


def test_double_backtick_code_span():
    assert segment_inline("use ``cmd`` now") == ["use", " ", "``cmd``", " ", "now"]


def test_unmatched_backtick_is_literal():
    assert segment_inline("bad `code span") == ["bad", " ", "`", "code", " ", "span"]


def test_escaped_backticks_stay_literal():
    assert segment_inline(r"\`\`\`ignore") == [r"\`", r"\`", r"\`", "ignore"]


def test_escaped_backtick_glues_to_word():
    assert segment_inline(r"foo\`bar") == [r"foo\`", "bar"]


def test_word_followed_by_link():
    assert segment_inline("see:[a](b)") == ["see:", "[a](b)"]


def test_escaped_bracket_stays_in_word():
    assert segment_inline(r"a\[b] c") == [r"a\[b]", " ", "c"]


def test_whitespace_runs_are_kept_whole():
    assert segment_inline("a \t b") == ["a", " \t ", "b"]


@pytest.mark.parametrize(
    "line",
    [
        "",
        "plain words only",
        "mixed `code` and [links](http://x.y/(z)) and ![img](a.png)!",
        "unterminated [link](oops and `tick",
        r"escapes \` \[ \![ \\",
        "  leading and trailing  ",
        "全角文字と `コード` の混在",
    ],
)
def test_segments_concatenate_to_input(line):
    assert "".join(segment_inline(line)) == line
