# topmark:header:start
#
#   project      : AraReport
#   file         : color.py
#   file_relpath : src/arareport/rendering/color.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Decide whether ANSI colors are emitted to a sink."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from arareport.config.logging import get_logger
from arareport.config.model import ColorChoice
from arareport.constants import FORCE_COLOR_ENV, NO_COLOR_ENV

if TYPE_CHECKING:
    from typing import IO, Any

    from arareport.config.logging import AraReportLogger

logger: AraReportLogger = get_logger(__name__)


def stream_isatty(stream: IO[Any] | None) -> bool:
    """Return True when ``stream`` reports being a terminal; False on any failure."""
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        return False


def resolve_color_choice(choice: ColorChoice, stream: IO[Any] | None) -> bool:
    """Determine whether color output should be enabled for ``stream``.

    Decision precedence:
        1. **Explicit choice**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment** (``AUTO`` only):
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
        3. **Auto**: the stream's own ``isatty()``; in-memory sinks are never terminals.

    Args:
        choice (ColorChoice): The configured color policy.
        stream (IO[Any] | None): The sink to be written to, or None for an in-memory sink.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.

    Examples:
        >>> resolve_color_choice(ColorChoice.NEVER, None)
        False
        >>> resolve_color_choice(ColorChoice.ALWAYS, None)
        True
    """
    if choice is ColorChoice.ALWAYS:
        return True
    if choice is ColorChoice.NEVER:
        return False
    force_color: str | None = os.getenv(FORCE_COLOR_ENV)
    if force_color and force_color != "0":
        logger.trace("%s set: enabling color", FORCE_COLOR_ENV)
        return True
    if os.getenv(NO_COLOR_ENV) is not None:
        logger.trace("%s set: disabling color", NO_COLOR_ENV)
        return False
    return stream_isatty(stream)
