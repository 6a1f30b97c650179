# mdwrap/utils/__init__.py
from .gitignore import get_gitignore, is_ignored
from .width import display_width

__all__ = [
    "display_width",
    "get_gitignore",
    "is_ignored",
]
