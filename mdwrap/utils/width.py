# mdwrap/utils/width.py
from wcwidth import wcswidth, wcwidth


def display_width(text: str) -> int:
    """
    Rendered column width of `text` in a terminal or monospaced editor.

    East Asian wide characters count as two columns and combining marks as
    zero. Emoji ZWJ sequences and VS16 presentation selectors are measured as
    one glyph, so a family emoji or `❤️` is two columns. Control characters
    (TAB included) have no defined width and count as zero, so a prefix
    containing tabs measures the same with or without its leading indentation.
    """
    # wcswidth gives up with -1 on the first control character.
    printable = "".join(ch for ch in text if wcwidth(ch) >= 0)
    return max(wcswidth(printable), 0)
