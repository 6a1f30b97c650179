"""
Opt-in logging for mdwrap.

The wrapping engine never logs: it is a pure text transform. The document
pipeline and file helpers take ``logger=`` / ``log=`` keywords and report
through whatever `resolve_logger` hands back:

    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    lg.debug("wrapped %d lines into %d at width %d", ...)

Everything lives under the ``mdwrap`` logger, so a single handler on it (see
`enable_cli_logging`) shows the whole run without touching the root logger.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LOGGER_NAME = "mdwrap"
CLI_FORMAT = "%(name)s: %(message)s"


class NoopLogger:
    """Stand-in returned when nobody asked for log output."""

    disabled = True

    def isEnabledFor(self, level: int) -> bool:
        return False

    def _discard(self, *args, **kwargs) -> None:
        return None

    debug = info = warning = error = exception = critical = log = _discard


class _CurrentStderrHandler(logging.StreamHandler):
    """Writes to ``sys.stderr`` as it is at emit time, not at setup time."""

    def __init__(self) -> None:
        super().__init__()

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    An explicit `logger` always wins. Otherwise `enabled` selects the named
    logger (``mdwrap`` by default) at `level`; records still propagate so
    pytest's caplog and `enable_cli_logging` both see them. With neither, a
    `NoopLogger` is returned.
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(name or LOGGER_NAME)
    lg.setLevel(level)
    lg.propagate = True
    return lg


def enable_cli_logging(stream: Optional[IO[str]] = None, level: int = logging.DEBUG) -> logging.Handler:
    """
    Attach the ``--verbose`` handler to the ``mdwrap`` logger.

    Records are written as ``<logger>: <message>`` to `stream`, or to the
    current ``sys.stderr`` when no stream is given. Calling this again
    replaces the previous handler instead of stacking a second one.
    """
    root = logging.getLogger(LOGGER_NAME)
    for old in [h for h in root.handlers if getattr(h, "mdwrap_cli", False)]:
        root.removeHandler(old)

    handler: logging.Handler = logging.StreamHandler(stream) if stream is not None else _CurrentStderrHandler()
    handler.setFormatter(logging.Formatter(CLI_FORMAT))
    handler.mdwrap_cli = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
    return handler
