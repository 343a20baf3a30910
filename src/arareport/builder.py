# topmark:header:start
#
#   project      : AraReport
#   file         : builder.py
#   file_relpath : src/arareport/builder.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Render reports against a source map.

`ReportBuilder` is the entry point of the rendering engine: an immutable set
of options bound to a `SourceMap`, with one rendering routine (`write`) and
three convenience sinks (`print`, `eprint`, `as_string`).

Example:
    ```python
    source_map = SourceMap([Source("a.src", "x = 1\\ny = 2\\n")])
    report = Report.from_issue(Issue.error("E1", "bad", "a.src", 9, 10))

    ReportBuilder(source_map).with_colors(ColorChoice.NEVER).print(report)
    ```

Every output mode shares the same routine, so for the same inputs they differ
only in where the text goes and whether ANSI codes are kept.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from arareport.config.logging import get_logger
from arareport.config.model import CharSet, ColorChoice, DisplayStyle, RenderConfig
from arareport.constants import DEFAULT_CONTEXT_LINES, DEFAULT_TAB_WIDTH
from arareport.rendering.emitter import Emitter
from arareport.rendering.writer import StreamWriter, StringWriter, WriterLike
from arareport.report import to_reports

if TYPE_CHECKING:
    from typing import IO, Any

    from arareport.config.logging import AraReportLogger
    from arareport.report import Report, Reportable
    from arareport.source import SourceMap

logger: AraReportLogger = get_logger(__name__)


@dataclass(frozen=True)
class ReportBuilder:
    """Immutable rendering options bound to a `SourceMap`.

    Attributes:
        source_map (SourceMap): Sources every span is resolved against.
        colors (ColorChoice): Color policy. Defaults to ``AUTO``.
        charset (CharSet): Glyph set. Defaults to ``ASCII``.
        style (DisplayStyle): Output density. Defaults to ``DEFAULT``.
        context_lines (int): Context lines shown around annotated lines.
        tab_width (int): Number of spaces a tab expands to.
    """

    source_map: SourceMap
    colors: ColorChoice = ColorChoice.AUTO
    charset: CharSet = CharSet.ASCII
    style: DisplayStyle = DisplayStyle.DEFAULT
    context_lines: int = DEFAULT_CONTEXT_LINES
    tab_width: int = DEFAULT_TAB_WIDTH

    def __post_init__(self) -> None:
        if self.context_lines < 0:
            raise ValueError(f"context_lines must be >= 0, got {self.context_lines}")
        if self.tab_width < 1:
            raise ValueError(f"tab_width must be >= 1, got {self.tab_width}")

    @classmethod
    def from_config(cls, source_map: SourceMap, config: RenderConfig) -> ReportBuilder:
        """Create a builder from a `RenderConfig` snapshot."""
        return cls(
            source_map=source_map,
            colors=config.colors,
            charset=config.charset,
            style=config.style,
            context_lines=config.context_lines,
            tab_width=config.tab_width,
        )

    @property
    def config(self) -> RenderConfig:
        """The builder's options as a `RenderConfig`."""
        return RenderConfig(
            colors=self.colors,
            charset=self.charset,
            style=self.style,
            context_lines=self.context_lines,
            tab_width=self.tab_width,
        )

    def with_colors(self, colors: ColorChoice) -> ReportBuilder:
        return replace(self, colors=colors)

    def with_charset(self, charset: CharSet) -> ReportBuilder:
        return replace(self, charset=charset)

    def with_style(self, style: DisplayStyle) -> ReportBuilder:
        return replace(self, style=style)

    def with_context_lines(self, context_lines: int) -> ReportBuilder:
        return replace(self, context_lines=context_lines)

    def with_tab_width(self, tab_width: int) -> ReportBuilder:
        return replace(self, tab_width=tab_width)

    def emitter(self) -> Emitter:
        """Return an `Emitter` configured with this builder's layout options."""
        return Emitter(
            self.source_map,
            charset=self.charset,
            style=self.style,
            context_lines=self.context_lines,
            tab_width=self.tab_width,
        )

    def write(self, target: WriterLike | IO[Any], reportable: Reportable) -> None:
        """Render ``reportable`` to a writer or a text stream.

        Args:
            target (WriterLike | IO[Any]): A `WriterLike` sink, or a text or binary stream
                wrapped in a `StreamWriter` using this builder's color policy.
            reportable (Reportable): A report or a sequence of reports.

        Raises:
            ReportError: If a span cannot be resolved or the sink fails. Issues
                written before the failure stay written.
            TypeError: If ``reportable`` holds something other than reports.
        """
        reports: list[Report] = to_reports(reportable)
        writer: WriterLike = (
            target if isinstance(target, WriterLike) else StreamWriter(target, colors=self.colors)
        )
        logger.debug(
            "Writing %d report(s) with %s (color=%s)",
            len(reports),
            self.config.to_dict(),
            writer.supports_color,
        )
        self.emitter().emit(writer, reports)
        if isinstance(writer, StreamWriter):
            writer.flush()

    def print(self, reportable: Reportable) -> None:
        """Render ``reportable`` to standard output."""
        self.write(sys.stdout, reportable)

    def eprint(self, reportable: Reportable) -> None:
        """Render ``reportable`` to standard error."""
        self.write(sys.stderr, reportable)

    def as_string(self, reportable: Reportable) -> str:
        """Render ``reportable`` into a string.

        An in-memory sink is never a terminal: with ``AUTO`` colors the text is
        plain unless ``FORCE_COLOR`` is set.
        """
        writer = StringWriter(colors=self.colors)
        self.write(writer, reportable)
        return writer.getvalue()
