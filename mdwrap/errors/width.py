from .base import MdwrapError


class InvalidWidthError(MdwrapError, ValueError):
    """Raised when a wrap width is not a positive integer."""

    def __init__(self, width):
        self.width = width
        super().__init__(f"wrap width must be a positive integer, got {width!r}")


def check_width(width: int) -> int:
    # bool is an int subclass; reject it along with zero and negatives.
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise InvalidWidthError(width)
    return width
