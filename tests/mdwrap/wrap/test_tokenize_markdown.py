from mdwrap.models import Code, Fence, Newline, Text
from mdwrap.wrap import tokenize_markdown


def test_empty_source_has_no_tokens():
    assert tokenize_markdown("") == []


def test_trailing_newline_emits_newline_token():
    assert tokenize_markdown("foo\n") == [Text("foo"), Newline()]
    assert tokenize_markdown("foo") == [Text("foo")]


def test_crlf_is_normalised():
    assert tokenize_markdown("foo\r\nbar") == [Text("foo"), Newline(), Text("bar")]


def test_code_span_between_text():
    assert tokenize_markdown("a `b` c") == [
        Text("a "),
        Code(raw="`b`", fence="`", code="b"),
        Text(" c"),
    ]


def test_multi_backtick_span_keeps_inner_backticks():
    tokens = tokenize_markdown("x ``a`b`` y")
    assert tokens[1] == Code(raw="``a`b``", fence="``", code="a`b")


def test_unmatched_backticks_are_text():
    tokens = tokenize_markdown("open ``only")
    assert all(isinstance(t, Text) for t in tokens)
    assert "".join(t.text for t in tokens) == "open ``only"


def test_escaped_backticks_produce_single_text():
    assert tokenize_markdown(r"not \`code\` here") == [Text(r"not \`code\` here")]


def test_fenced_lines_are_fence_tokens():
    tokens = tokenize_markdown("before\n```\n`x` ...\n```\nafter")
    assert tokens == [
        Text("before"),
        Newline(),
        Fence("```"),
        Newline(),
        Fence("`x` ..."),
        Newline(),
        Fence("```"),
        Newline(),
        Text("after"),
    ]


def test_blank_lines_only_produce_newlines():
    assert tokenize_markdown("a\n\nb") == [Text("a"), Newline(), Newline(), Text("b")]
