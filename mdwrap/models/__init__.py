from .blocks import BlockKind
from .tokens import Code, Fence, Newline, Text, Token

__all__ = ["BlockKind", "Code", "Fence", "Newline", "Text", "Token"]
