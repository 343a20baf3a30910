# topmark:header:start
#
#   project      : AraReport
#   file         : emitter.py
#   file_relpath : src/arareport/rendering/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Compose reports into styled text lines and write them to a sink.

Rendering happens in two phases per issue:

1. **Resolve**: every span of the issue is looked up in the `SourceMap` and
   mapped to line/column positions. Any failure (`FileMissingError`,
   `IndexTooLargeError`, `InvalidCharBoundaryError`...) aborts here.
2. **Write**: the composed lines are handed to the writer.

Because nothing is written before an issue is fully composed, a failing issue
never leaves a partial excerpt behind; issues written before it stay written.

Output of one issue in the default style (ASCII glyphs)::

    error[E1]: bad
     --> a.src:2:5
      |
    1 | x = 1
    2 | y = 2
      |     ^

Lines are lists of ``(text, colorizer)`` segments; a None colorizer marks
plain text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from arareport.config.logging import get_logger
from arareport.config.model import CharSet, DisplayStyle
from arareport.constants import DEFAULT_CONTEXT_LINES, DEFAULT_TAB_WIDTH
from arareport.errors import ReportError
from arareport.issue import IssueSeverity
from arareport.rendering import styles
from arareport.rendering.chars import glyphs_for
from arareport.rendering.excerpt import extract_excerpt
from arareport.rendering.layout import (
    LineMark,
    MultiLineMark,
    Piece,
    annotation_rows,
    assign_rails,
    rail_prefix,
    trim_row,
)
from arareport.rendering.position import display_width, expand_tabs, resolve_span

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from arareport.annotation import Annotation
    from arareport.config.logging import AraReportLogger
    from arareport.issue import Issue
    from arareport.rendering.chars import Glyphs
    from arareport.rendering.colored_enum import Colorizer
    from arareport.rendering.excerpt import ExcerptLine
    from arareport.rendering.layout import Row
    from arareport.rendering.position import Location, ResolvedSpan
    from arareport.rendering.writer import WriterLike
    from arareport.report import Report
    from arareport.source import Source, SourceMap

logger: AraReportLogger = get_logger(__name__)

Segment = tuple[str, "Colorizer | None"]
Line = list[Segment]


@dataclass(frozen=True)
class PlacedAnnotation:
    """An annotation together with its resolved span and insertion order."""

    annotation: Annotation
    span: ResolvedSpan
    order: int


@dataclass(frozen=True)
class ExcerptBlock:
    """Everything needed to draw the excerpt of one source.

    Attributes:
        source (Source): The source the block shows.
        location (Location): Position shown in the block's location line.
        lines (list[ExcerptLine]): Lines to display, with context.
        marks (dict[int, list[LineMark]]): Single-line marks keyed by line number.
        rails (list[MultiLineMark]): Multi-line marks in rail order.
    """

    source: Source
    location: Location
    lines: list[ExcerptLine]
    marks: dict[int, list[LineMark]]
    rails: list[MultiLineMark]

    def max_line_number(self) -> int:
        return max((line.number for line in self.lines), default=0)


def write_lines(writer: WriterLike, lines: Iterable[Line]) -> None:
    """Write composed lines to ``writer``, one newline after each."""
    for line in lines:
        for text, colorizer in line:
            if colorizer is None:
                writer.write(text)
            else:
                writer.write_styled(text, colorizer)
        writer.write("\n")


class Emitter:
    """Turns issues and footers into styled lines.

    Args:
        source_map (SourceMap): Sources the spans are resolved against.
        charset (CharSet): Glyph set.
        style (DisplayStyle): Output density.
        context_lines (int): Context lines around annotated lines.
        tab_width (int): Tab expansion width.
    """

    def __init__(
        self,
        source_map: SourceMap,
        *,
        charset: CharSet = CharSet.ASCII,
        style: DisplayStyle = DisplayStyle.DEFAULT,
        context_lines: int = DEFAULT_CONTEXT_LINES,
        tab_width: int = DEFAULT_TAB_WIDTH,
    ) -> None:
        self.source_map = source_map
        self.charset = charset
        self.style = style
        self.context_lines = context_lines
        self.tab_width = tab_width
        self.glyphs: Glyphs = glyphs_for(charset)

    # ---- public API ----

    def emit(self, writer: WriterLike, reports: Sequence[Report]) -> None:
        """Render ``reports`` in order to ``writer``.

        Raises:
            ReportError: On the first issue referencing an unknown source or an
                invalid offset, or when the writer fails. Issues composed before
                the failure remain written.
        """
        for report_index, report in enumerate(reports):
            logger.debug("Rendering report %d (%d issue(s))", report_index, len(report.issues))
            for issue in report.issues:
                try:
                    lines: list[Line] = self.issue_lines(issue)
                except ReportError as exc:
                    logger.debug("Aborting render at %s: %s", issue.header(), exc)
                    raise
                write_lines(writer, lines)
            if report.footer is not None:
                write_lines(writer, self.footer_lines(report))

    def issue_lines(self, issue: Issue) -> list[Line]:
        """Compose the complete output of one issue.

        Raises:
            FileMissingError: If a span references an unknown source.
            IndexTooLargeError: If an offset exceeds its source.
            InvalidCharBoundaryError: If an offset splits a multi-byte character.
        """
        placed: dict[str, list[PlacedAnnotation]] = self._resolve(issue)
        logger.trace("Composing %s across %d source(s)", issue.header(), len(placed))

        if self.style is DisplayStyle.COMPACT:
            return [self._located_header(issue, placed)]
        if self.style is DisplayStyle.COMFORTABLE:
            lines: list[Line] = [self._located_header(issue, placed)]
            for note in issue.notes:
                lines.extend(self._note_lines("note", note, indent=2))
            return lines

        blocks: list[ExcerptBlock] = [
            self._block(origin, items, issue) for origin, items in placed.items()
        ]
        width: int = max((len(str(block.max_line_number())) for block in blocks), default=1)

        lines = [self._header(issue.severity, issue.header_label(), issue.message)]
        for index, block in enumerate(blocks):
            lines.append(self._location_line(block, width, first=index == 0))
            lines.append(self._empty_border(width))
            lines.extend(self._block_lines(block, width, issue.severity))
        if issue.notes:
            if blocks:
                lines.append(self._empty_border(width))
            for note in issue.notes:
                lines.extend(self._note_lines("note", note, indent=width + 1))
        lines.append([])
        return lines

    def footer_lines(self, report: Report) -> list[Line]:
        """Compose the closing block of ``report``.

        The closing header uses the report's aggregate severity, or ``error``
        for a report without issues.
        """
        footer = report.footer
        if footer is None:
            return []
        severity: IssueSeverity = report.severity() or IssueSeverity.ERROR
        lines: list[Line] = [self._header(severity, str(severity), footer.message)]
        if self.style is not DisplayStyle.COMPACT:
            for note in footer.notes:
                lines.extend(self._note_lines("note", note, indent=2))
        if footer.summary:
            lines.extend(self._note_lines("summary", report.summary_text(), indent=2))
        if self.style is DisplayStyle.DEFAULT:
            lines.append([])
        return lines

    # ---- resolution ----

    def _resolve(self, issue: Issue) -> dict[str, list[PlacedAnnotation]]:
        placed: dict[str, list[PlacedAnnotation]] = {
            origin: [] for origin in issue.origins()
        }
        sources: dict[str, Source] = {
            origin: self.source_map.lookup(origin) for origin in placed
        }
        for order, annotation in enumerate(issue.all_annotations()):
            span: ResolvedSpan = resolve_span(
                sources[annotation.origin], annotation.from_, annotation.to
            )
            placed[annotation.origin].append(PlacedAnnotation(annotation, span, order))
        return placed

    @staticmethod
    def _anchor(issue: Issue, origin: str, items: Sequence[PlacedAnnotation]) -> PlacedAnnotation:
        """Pick the annotation whose start is shown as the location of ``origin``."""
        if issue.source is not None and issue.source[0] == origin:
            # The implicit primary annotation is always the last one placed.
            return items[-1]
        for item in items:
            if item.annotation.is_primary:
                return item
        return items[0]

    def _block(self, origin: str, items: list[PlacedAnnotation], issue: Issue) -> ExcerptBlock:
        source: Source = self.source_map.lookup(origin)
        requested: set[int] = set()
        marks: dict[int, list[LineMark]] = {}
        multi: list[MultiLineMark] = []
        for item in items:
            span: ResolvedSpan = item.span
            start_text: str = source.line_text(span.start.line - 1)
            start_cell: int = display_width(start_text[: span.start.column - 1], self.tab_width)
            if span.is_multiline:
                end_text: str = source.line_text(span.end.line - 1)
                last_char: int = max(span.end.column - 2, 0)
                multi.append(
                    MultiLineMark(
                        start_line=span.start.line,
                        start_cell=start_cell,
                        end_line=span.end.line,
                        end_cell=display_width(end_text[:last_char], self.tab_width),
                        kind=item.annotation.type,
                        label=item.annotation.message,
                        order=item.order,
                    )
                )
                requested.update((span.start.line, span.end.line))
            else:
                end_cell: int = display_width(start_text[: span.end.column - 1], self.tab_width)
                marks.setdefault(span.start.line, []).append(
                    LineMark(
                        start=start_cell,
                        end=end_cell,
                        kind=item.annotation.type,
                        label=item.annotation.message,
                        order=item.order,
                    )
                )
                requested.add(span.start.line)

        return ExcerptBlock(
            source=source,
            location=self._anchor(issue, origin, items).span.start,
            lines=extract_excerpt(source, requested, self.context_lines),
            marks=marks,
            rails=assign_rails(multi),
        )

    # ---- composition ----

    def _header(self, severity: IssueSeverity, label: str, message: str) -> Line:
        return [(label, severity.color), (f": {message}", styles.MESSAGE)]

    def _located_header(self, issue: Issue, placed: dict[str, list[PlacedAnnotation]]) -> Line:
        header: Line = self._header(issue.severity, issue.header_label(), issue.message)
        origin: str | None = issue.primary_origin()
        if origin is None:
            return header
        location: Location = self._anchor(issue, origin, placed[origin]).span.start
        return [(f"{origin}:{location}: ", styles.MESSAGE), *header]

    def _location_line(self, block: ExcerptBlock, width: int, *, first: bool) -> Line:
        where: str = f"{block.source.name}:{block.location}"
        if self.charset is CharSet.UNICODE:
            return [(" " * (width + 1), None), ("┌─", styles.BORDER), (f" {where}", None)]
        arrow: str = "-->" if first else ":::"
        return [(" " * width, None), (arrow, styles.BORDER), (f" {where}", None)]

    def _empty_border(self, width: int) -> Line:
        return [(" " * (width + 1), None), (self.glyphs.border, styles.BORDER)]

    def _gap_line(self, width: int) -> Line:
        if self.charset is CharSet.UNICODE:
            return [(" " * (width + 1), None), ("·", styles.BORDER)]
        return [("...", styles.BORDER)]

    def _pieces(self, row: Row, severity: IssueSeverity) -> Line:
        return [
            (piece.text, None if piece.kind is None else styles.mark(severity, piece.is_primary))
            for piece in row
        ]

    def _block_lines(self, block: ExcerptBlock, width: int, severity: IssueSeverity) -> list[Line]:
        lines: list[Line] = []
        for excerpt_line in block.lines:
            number: int = excerpt_line.number
            if excerpt_line.gap_before:
                lines.append(self._gap_line(width))

            body: Row = [
                *rail_prefix(block.rails, number, self.glyphs),
                Piece(expand_tabs(excerpt_line.text, self.tab_width)),
            ]
            if not excerpt_line.text:
                body = trim_row(body)
            source_row: Line = [
                (f"{number:>{width}} ", styles.LINE_NUMBER),
                (self.glyphs.border, styles.BORDER),
            ]
            if body:
                source_row.append((" ", None))
                source_row.extend(self._pieces(body, severity))
            lines.append(source_row)

            for row in annotation_rows(
                number, block.marks.get(number, []), block.rails, self.glyphs
            ):
                lines.append(
                    [
                        *self._empty_border(width),
                        (" ", None),
                        *self._pieces(row, severity),
                    ]
                )
        return lines

    def _note_lines(self, label: str, text: str, *, indent: int) -> list[Line]:
        first, *rest = text.split("\n")
        lead: str = f"{' ' * indent}{self.glyphs.note_bullet} "
        lines: list[Line] = [[(lead, None), (f"{label}:", styles.NOTE_LABEL), (f" {first}", None)]]
        continuation: str = " " * (len(lead) + len(label) + 2)
        lines.extend([[(f"{continuation}{part}", None)] for part in rest])
        return lines
