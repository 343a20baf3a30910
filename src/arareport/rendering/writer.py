# topmark:header:start
#
#   project      : AraReport
#   file         : writer.py
#   file_relpath : src/arareport/rendering/writer.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Output sinks for rendered reports.

This module separates *what* is rendered from *where* it goes. The emitter
produces styled segments and hands them to a `WriterLike`; the writer decides
whether the styles turn into ANSI escape codes.

Implementations:
    - `StreamWriter`: writes to a text or binary stream (stdout, stderr, an
      open file, a byte buffer) through `click.echo`, which strips ANSI codes
      when color is disabled. Binary streams receive UTF-8.
    - `StringWriter`: accumulates output in memory.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import click

from arareport.config.logging import get_logger
from arareport.config.model import ColorChoice
from arareport.errors import ReportIOError
from arareport.rendering.color import resolve_color_choice

if TYPE_CHECKING:
    from typing import IO, Any

    from arareport.config.logging import AraReportLogger
    from arareport.rendering.colored_enum import Colorizer

logger: AraReportLogger = get_logger(__name__)


@runtime_checkable
class WriterLike(Protocol):
    """Minimal interface of a sink accepting rendered report text.

    Implementations may write to a terminal, a file, or memory. Each call
    carries complete text; writers must not buffer across renders.
    """

    @property
    def supports_color(self) -> bool:
        """Whether styled segments are emitted with ANSI codes."""
        ...

    def write(self, text: str) -> None:
        """Write plain text."""
        ...

    def write_styled(self, text: str, colorizer: Colorizer) -> None:
        """Write text decorated by ``colorizer`` when color is supported."""
        ...


class StreamWriter:
    """Writer emitting to a stream via `click.echo`.

    Args:
        stream (IO[Any]): Destination stream, text or binary. Binary streams
            receive UTF-8 encoded text.
        colors (ColorChoice): Color policy, resolved once against ``stream``.

    Attributes:
        stream (IO[Any]): Destination stream.
    """

    stream: IO[Any]

    def __init__(self, stream: IO[Any], *, colors: ColorChoice = ColorChoice.AUTO) -> None:
        self.stream = stream
        self._enable_color: bool = resolve_color_choice(colors, stream)
        self._binary: bool = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))
        logger.trace(
            "StreamWriter(%r): color=%s", getattr(stream, "name", stream), self._enable_color
        )

    @property
    def supports_color(self) -> bool:
        return self._enable_color

    def write(self, text: str) -> None:
        """Write ``text`` to the stream.

        Raises:
            ReportIOError: If the stream rejects the write or is closed.
        """
        if self._binary and not self._enable_color:
            # click.echo leaves bytes untouched
            text = click.unstyle(text)
        message: str | bytes = text.encode("utf-8") if self._binary else text
        try:
            click.echo(message, file=self.stream, nl=False, color=self._enable_color)
        except (OSError, ValueError) as exc:
            logger.error("Failed to write report output: %s", exc)
            raise ReportIOError(str(exc)) from exc

    def write_styled(self, text: str, colorizer: Colorizer) -> None:
        self.write(colorizer(text) if self._enable_color else text)

    def flush(self) -> None:
        """Flush the underlying stream.

        Raises:
            ReportIOError: If flushing fails.
        """
        try:
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise ReportIOError(str(exc)) from exc


class StringWriter:
    """Writer accumulating output in memory.

    Args:
        colors (ColorChoice): Color policy. ``AUTO`` resolves to no color unless
            ``FORCE_COLOR`` is set, since memory is never a terminal.
    """

    def __init__(self, *, colors: ColorChoice = ColorChoice.NEVER) -> None:
        self._buffer = io.StringIO()
        self._enable_color: bool = resolve_color_choice(colors, None)

    @property
    def supports_color(self) -> bool:
        return self._enable_color

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def write_styled(self, text: str, colorizer: Colorizer) -> None:
        self._buffer.write(colorizer(text) if self._enable_color else text)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return self._buffer.getvalue()
