class MdwrapError(Exception):
    """Base class for errors raised by mdwrap."""
