# mdwrap/wrap/__init__.py
from ..models.blocks import BlockKind
from .block import classify_block, split_prefix
from .fence import FenceTracker, is_fence
from .inline import Span, SpanKind, determine_token_span, wrap_preserving_code
from .line_buffer import LineBuffer
from .paragraph import wrap_paragraph, wrap_text
from .tokenize import segment_inline, tokenize_markdown

__all__ = [
    "BlockKind",
    "classify_block",
    "split_prefix",
    "FenceTracker",
    "is_fence",
    "LineBuffer",
    "Span",
    "SpanKind",
    "determine_token_span",
    "wrap_preserving_code",
    "segment_inline",
    "tokenize_markdown",
    "wrap_text",
    "wrap_paragraph",
]
