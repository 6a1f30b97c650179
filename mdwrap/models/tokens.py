from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Fence:
    """A line inside a fenced block, including the opening and closing markers."""

    line: str


@dataclass(frozen=True)
class Code:
    """An inline code span outside fenced blocks."""

    raw: str    # full span including both delimiter runs
    fence: str  # the opening backtick run
    code: str   # text between the delimiter runs, untouched


@dataclass(frozen=True)
class Text:
    """Plain text outside code regions."""

    text: str


@dataclass(frozen=True)
class Newline:
    """Line break separating tokens of consecutive lines."""


Token = Union[Fence, Code, Text, Newline]
