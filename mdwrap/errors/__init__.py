from .base import MdwrapError
from .rewrite import RewriteError
from .width import InvalidWidthError

__all__ = ["MdwrapError", "InvalidWidthError", "RewriteError"]
