from __future__ import annotations

import os

from .base import MdwrapError


class RewriteError(MdwrapError):
    """Raised when a Markdown file cannot be read or written back."""

    def __init__(self, path: str | os.PathLike, action: str, cause: OSError):
        self.path = os.fspath(path)
        self.action = action
        self.cause = cause
        super().__init__(f"{action} {self.path}: {cause.strerror or cause}")
