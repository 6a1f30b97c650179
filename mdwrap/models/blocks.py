from enum import Enum


class BlockKind(Enum):
    """Leading block structure of a Markdown line, in classifier precedence order."""

    HEADING = "heading"
    BULLET = "bullet"
    BLOCKQUOTE = "blockquote"
    FOOTNOTE_DEFINITION = "footnote_definition"
    MARKDOWNLINT_DIRECTIVE = "markdownlint_directive"
    DIGIT_PREFIX = "digit_prefix"
