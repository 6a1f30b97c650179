from .ellipsis import replace_ellipsis
from .errors import InvalidWidthError, MdwrapError, RewriteError
from .io import iter_markdown_files, rewrite
from .models import BlockKind, Code, Fence, Newline, Text, Token
from .process import Options, process_stream, process_stream_no_wrap, process_text
from .utils.width import display_width
from .wrap import (
    FenceTracker,
    LineBuffer,
    classify_block,
    determine_token_span,
    is_fence,
    segment_inline,
    tokenize_markdown,
    wrap_paragraph,
    wrap_preserving_code,
    wrap_text,
)

__all__ = [
    "segment_inline",
    "tokenize_markdown",
    "FenceTracker",
    "is_fence",
    "classify_block",
    "LineBuffer",
    "determine_token_span",
    "wrap_preserving_code",
    "wrap_text",
    "wrap_paragraph",
    "display_width",
    "replace_ellipsis",
    "Options",
    "process_stream",
    "process_stream_no_wrap",
    "process_text",
    "rewrite",
    "iter_markdown_files",
    "BlockKind",
    "Code",
    "Fence",
    "Newline",
    "Text",
    "Token",
    "MdwrapError",
    "InvalidWidthError",
    "RewriteError",
]
