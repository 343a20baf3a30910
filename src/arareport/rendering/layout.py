# topmark:header:start
#
#   project      : AraReport
#   file         : layout.py
#   file_relpath : src/arareport/rendering/layout.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Place annotation markers and labels underneath excerpt lines.

Positions are expressed in **display cells** of the tab-expanded line text
(see `arareport.rendering.position.display_width`).

Single-line annotations:
    Marks are sorted by start cell (ties keep insertion order) and packed
    first-fit into rows: disjoint marks share a row, overlapping marks stack,
    and the earliest starting mark ends up in the row nearest the source line.
    In each row, the label of the rightmost mark is written inline after its
    markers; every other label hangs below, joined to its mark by a connector::

        |     ^^^^   ^^^^ label b
        |     |
        |     label a

Multi-line annotations:
    Each one owns a vertical rail to the left of the text, ordered by start
    line then start cell. A rail opens on its start line with a horizontal run
    to the first marked character and closes on its end line with a run to the
    last marked character, followed by its label::

        3 |   fn foo() {
          |  __________^
        4 | |     body
        5 | | }
          | |_^ label

The functions in this module return rows of `Piece` values. Colors are
applied by the emitter; a piece only records which kind of annotation drew it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from arareport.annotation import AnnotationType

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from arareport.rendering.chars import Glyphs


@dataclass(frozen=True)
class Piece:
    """A run of text drawn by one annotation kind, or plain text when ``kind`` is None."""

    text: str
    kind: AnnotationType | None = None

    @property
    def is_primary(self) -> bool:
        return self.kind is AnnotationType.PRIMARY


Row = list[Piece]


@dataclass(frozen=True)
class LineMark:
    """A single-line annotation projected onto one source line.

    Attributes:
        start (int): First marked display cell.
        end (int): Display cell just past the marked range; always ``> start``.
        kind (AnnotationType): Primary or secondary.
        label (str | None): Label text, if any.
        order (int): Insertion order within the issue; breaks ties between equal starts.
    """

    start: int
    end: int
    kind: AnnotationType
    label: str | None = None
    order: int = 0

    def __post_init__(self) -> None:
        if self.end <= self.start:
            object.__setattr__(self, "end", self.start + 1)

    @property
    def is_primary(self) -> bool:
        return self.kind is AnnotationType.PRIMARY


@dataclass(frozen=True)
class MultiLineMark:
    """A multi-line annotation drawn with a rail.

    Attributes:
        start_line (int): 1-based line where the range starts.
        start_cell (int): Display cell of the first marked character.
        end_line (int): 1-based line where the range ends; ``> start_line``.
        end_cell (int): Display cell of the last marked character.
        kind (AnnotationType): Primary or secondary.
        label (str | None): Label drawn after the closing marker.
        order (int): Insertion order within the issue.
    """

    start_line: int
    start_cell: int
    end_line: int
    end_cell: int
    kind: AnnotationType
    label: str | None = None
    order: int = 0

    @property
    def is_primary(self) -> bool:
        return self.kind is AnnotationType.PRIMARY

    def is_active(self, line: int) -> bool:
        """True when the rail runs alongside ``line`` (below its start row, up to its end)."""
        return self.start_line < line <= self.end_line


class _Canvas:
    """A single row of cells, each holding one glyph and the kind that drew it."""

    def __init__(self) -> None:
        self._cells: list[Piece] = []

    def put(self, cell: int, text: str, kind: AnnotationType | None) -> None:
        while len(self._cells) < cell:
            self._cells.append(Piece(" "))
        for offset, char in enumerate(text):
            index: int = cell + offset
            if index < len(self._cells):
                self._cells[index] = Piece(char, kind)
            else:
                self._cells.append(Piece(char, kind))

    def fill(self, start: int, end: int, char: str, kind: AnnotationType | None) -> None:
        if end > start:
            self.put(start, char * (end - start), kind)

    def pieces(self) -> Row:
        return merge_pieces(self._cells)


def merge_pieces(pieces: Iterable[Piece]) -> Row:
    """Merge consecutive pieces of the same kind into single pieces."""
    merged: Row = []
    for piece in pieces:
        if not piece.text:
            continue
        if merged and merged[-1].kind is piece.kind:
            merged[-1] = Piece(merged[-1].text + piece.text, piece.kind)
        else:
            merged.append(piece)
    return merged


def trim_row(row: Row) -> Row:
    """Strip trailing spaces drawn as plain text from a row."""
    trimmed: Row = list(row)
    while trimmed and trimmed[-1].kind is None:
        text: str = trimmed[-1].text.rstrip(" ")
        if text:
            trimmed[-1] = Piece(text)
            break
        trimmed.pop()
    return trimmed


def assign_rows(marks: Iterable[LineMark]) -> list[list[LineMark]]:
    """Pack single-line marks into rows.

    Args:
        marks (Iterable[LineMark]): The marks of one source line.

    Returns:
        list[list[LineMark]]: Rows, nearest to the source line first. Marks
        within a row are disjoint and sorted by start cell.
    """
    rows: list[list[LineMark]] = []
    for mark in sorted(marks, key=lambda m: (m.start, m.order)):
        for row in rows:
            # Rows are filled in start order, so only the last mark can overlap.
            if row[-1].end <= mark.start:
                row.append(mark)
                break
        else:
            rows.append([mark])
    return rows


def assign_rails(marks: Iterable[MultiLineMark]) -> list[MultiLineMark]:
    """Order multi-line marks into rails; a mark's rail index is its list position."""
    return sorted(marks, key=lambda m: (m.start_line, m.start_cell, m.order))


def mark_rows(row: Sequence[LineMark], glyphs: Glyphs) -> list[Row]:
    """Draw one packed row of marks, followed by the rows of its hanging labels."""
    rows: list[Row] = []

    markers = _Canvas()
    for mark in row:
        markers.fill(mark.start, mark.end, glyphs.caret(mark.is_primary), mark.kind)
    last: LineMark = row[-1]
    if last.label:
        markers.put(last.end + 1, last.label, last.kind)
    rows.append(markers.pieces())

    hanging: list[LineMark] = [mark for mark in row[:-1] if mark.label]
    if not hanging:
        return rows

    connectors = _Canvas()
    for mark in hanging:
        connectors.put(mark.start, glyphs.connector, mark.kind)
    rows.append(connectors.pieces())

    for index in range(len(hanging) - 1, -1, -1):
        labels = _Canvas()
        for mark in hanging[:index]:
            labels.put(mark.start, glyphs.connector, mark.kind)
        mark = hanging[index]
        labels.put(mark.start, mark.label or "", mark.kind)
        rows.append(labels.pieces())
    return rows


def rail_width(rails: Sequence[MultiLineMark]) -> int:
    """Return the width of the rail area: one cell per rail plus a separator."""
    return len(rails) + 1 if rails else 0


def rail_prefix(rails: Sequence[MultiLineMark], line: int, glyphs: Glyphs) -> Row:
    """Draw the rail area of a row that belongs to ``line`` without opening or closing a rail."""
    canvas = _Canvas()
    for index, rail in enumerate(rails):
        if rail.is_active(line):
            canvas.put(index, glyphs.rail_vertical, rail.kind)
    # pad to the full rail area
    canvas.put(rail_width(rails), "", None)
    return canvas.pieces()


def rail_start_row(rails: Sequence[MultiLineMark], index: int, glyphs: Glyphs) -> Row:
    """Draw the row opening rail ``index`` on its start line."""
    opening: MultiLineMark = rails[index]
    line: int = opening.start_line
    width: int = rail_width(rails)
    canvas = _Canvas()
    for other_index, rail in enumerate(rails[:index]):
        if rail.is_active(line) or rail.start_line == line:
            canvas.put(other_index, glyphs.rail_vertical, rail.kind)
    canvas.put(index, glyphs.rail_top, opening.kind)
    canvas.fill(index + 1, width + opening.start_cell, glyphs.rail_fill, opening.kind)
    canvas.put(width + opening.start_cell, glyphs.caret(opening.is_primary), opening.kind)
    return canvas.pieces()


def rail_end_row(rails: Sequence[MultiLineMark], index: int, glyphs: Glyphs) -> Row:
    """Draw the row closing rail ``index`` on its end line.

    Rails closing on the same line are drawn innermost (highest index) first.
    """
    closing: MultiLineMark = rails[index]
    line: int = closing.end_line
    width: int = rail_width(rails)
    canvas = _Canvas()
    for other_index, rail in enumerate(rails):
        if other_index == index:
            continue
        running: bool = rail.start_line <= line and (
            rail.end_line > line or (rail.end_line == line and other_index < index)
        )
        if running:
            canvas.put(other_index, glyphs.rail_vertical, rail.kind)
        elif other_index > index:
            canvas.put(other_index, glyphs.rail_fill, closing.kind)
    canvas.put(index, glyphs.rail_bottom, closing.kind)
    canvas.fill(len(rails), width + closing.end_cell, glyphs.rail_fill, closing.kind)
    canvas.put(width + closing.end_cell, glyphs.caret(closing.is_primary), closing.kind)
    if closing.label:
        canvas.put(width + closing.end_cell + 2, closing.label, closing.kind)
    return canvas.pieces()


def annotation_rows(
    line: int,
    marks: Sequence[LineMark],
    rails: Sequence[MultiLineMark],
    glyphs: Glyphs,
) -> list[Row]:
    """Return every row drawn underneath ``line``.

    Order: packed single-line rows, then rails opening on the line, then rails
    closing on it.

    Args:
        line (int): 1-based line number.
        marks (Sequence[LineMark]): Single-line marks on this line.
        rails (Sequence[MultiLineMark]): All rails of the excerpt block, in rail order.
        glyphs (Glyphs): Glyph set.

    Returns:
        list[Row]: Rows including their rail area, trailing plain spaces trimmed.
    """
    rows: list[Row] = []
    if marks:
        prefix: Row = rail_prefix(rails, line, glyphs)
        for packed in assign_rows(marks):
            for row in mark_rows(packed, glyphs):
                rows.append(trim_row(merge_pieces([*prefix, *row])))
    for index, rail in enumerate(rails):
        if rail.start_line == line:
            rows.append(trim_row(rail_start_row(rails, index, glyphs)))
    for index in range(len(rails) - 1, -1, -1):
        if rails[index].end_line == line:
            rows.append(trim_row(rail_end_row(rails, index, glyphs)))
    return rows
