# topmark:header:start
#
#   project      : AraReport
#   file         : logging.py
#   file_relpath : src/arareport/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Logging for AraReport: a TRACE level below DEBUG and click-colored records.

Every module obtains its logger with `get_logger(__name__)`. The renderer logs
what it resolves at DEBUG and per-line layout decisions at TRACE; neither is
ever written to the report sink.

Records go to stderr through `setup_logging`, which applications and the test
suite call once. The level defaults to CRITICAL (silent) unless passed in or
set through the ``ARAREPORT_LOG_LEVEL`` environment variable, which accepts a
level name (``"trace"``, ``"debug"``...) or a number.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Final, cast

import click

from arareport.constants import LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Highest threshold first; a record takes the style of the first threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, dict[str, Any]], ...]] = (
    (logging.CRITICAL, {"fg": "bright_red", "bold": True}),
    (logging.ERROR, {"fg": "red"}),
    (logging.WARNING, {"fg": "yellow"}),
    (logging.INFO, {"fg": "green"}),
    (logging.DEBUG, {"fg": "bright_black"}),
    (TRACE_LEVEL, {"fg": "blue", "dim": True}),
)


class AraReportLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(AraReportLogger)


class StyledFormatter(logging.Formatter):
    """Formatter coloring each record by its level with `click.style`."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, kwargs in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return click.style(message, **kwargs)
        return message


def resolve_env_log_level() -> int | None:
    """Return the level named by ``ARAREPORT_LOG_LEVEL``, or None if unset or unknown."""
    raw: str = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    if raw in ("WARN", "FATAL"):
        raw = {"WARN": "WARNING", "FATAL": "CRITICAL"}[raw]
    # getLevelName maps registered names back to their number
    level: object = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Route all records to a single colored stderr handler on the root logger.

    Args:
        level (int | None): Level to apply. When None, ``ARAREPORT_LOG_LEVEL``
            is consulted, falling back to CRITICAL.
    """
    if level is None:
        env_level: int | None = resolve_env_log_level()
        level = logging.CRITICAL if env_level is None else env_level

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StyledFormatter(DEBUG_LOG_FORMAT if level < logging.INFO else LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> AraReportLogger:
    """Return the `AraReportLogger` registered under ``name``."""
    return cast("AraReportLogger", logging.getLogger(name))
