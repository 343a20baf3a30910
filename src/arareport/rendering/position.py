# topmark:header:start
#
#   project      : AraReport
#   file         : position.py
#   file_relpath : src/arareport/rendering/position.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Map byte offsets within a source to line/column positions.

Counting rules:
    - Offsets are UTF-8 byte offsets in ``[0, len(source.data)]``.
    - Lines are 1-based; a line starts after every ``\\n``.
    - Columns are 1-based and counted in Unicode scalar values (code points),
      not bytes. The offset of a line terminator is the column one past the
      line's last character.
    - An offset strictly inside a multi-byte sequence is rejected with
      `InvalidCharBoundaryError`; it is never rounded to a neighbour.

Display rules (used to place markers under excerpt text):
    - Tabs expand to ``tab_width`` cells.
    - East Asian wide and fullwidth characters take two cells, combining marks none.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from arareport.errors import (
    ColumnTooLargeError,
    IndexTooLargeError,
    InvalidCharBoundaryError,
)
from arareport.source import Source


@dataclass(frozen=True)
class Location:
    """A 1-based line/column position."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class ResolvedSpan:
    """A byte range resolved against its source.

    Attributes:
        origin (str): Name of the source.
        start (Location): Position of the first byte.
        end (Location): Position just past the range. For a multi-line range
            ending at the very start of a line, this is the end of the previous line.
        from_ (int): Start byte offset.
        to (int): End byte offset.
        line_start (int): Byte offset where the first covered line starts.
        line_end (int): Byte offset where the last covered line ends (terminator excluded).
    """

    origin: str
    start: Location
    end: Location
    from_: int
    to: int
    line_start: int
    line_end: int

    @property
    def is_multiline(self) -> bool:
        """True when the range covers more than one line."""
        return self.end.line > self.start.line

    @property
    def line_numbers(self) -> range:
        """Every covered line number (1-based, inclusive)."""
        return range(self.start.line, self.end.line + 1)


def check_index(source: Source, byte_index: int) -> None:
    """Validate that ``byte_index`` is a usable offset into ``source``.

    Raises:
        IndexTooLargeError: If the offset lies past the end of the content.
        InvalidCharBoundaryError: If the offset splits a multi-byte character.
    """
    data: bytes = source.data
    if byte_index < 0 or byte_index > len(data):
        raise IndexTooLargeError(given=byte_index, max=len(data))
    # UTF-8 continuation bytes look like 0b10xxxxxx
    if byte_index < len(data) and data[byte_index] & 0xC0 == 0x80:
        raise InvalidCharBoundaryError(given=byte_index)


def _raw_line(source: Source, line_index: int) -> bytes:
    """Return the bytes of a line up to, but excluding, its ``\\n``."""
    starts: tuple[int, ...] = source.line_starts
    start: int = starts[line_index]
    end: int = starts[line_index + 1] - 1 if line_index + 1 < len(starts) else len(source.data)
    return source.data[start:end]


def _count_chars(data: bytes) -> int:
    return sum(1 for byte in data if byte & 0xC0 != 0x80)


def column_number(source: Source, line_index: int, byte_index: int) -> int:
    """Return the 1-based column of ``byte_index`` on the 0-based line ``line_index``."""
    start: int = source.line_starts[line_index]
    return _count_chars(source.data[start:byte_index]) + 1


def resolve_location(source: Source, byte_index: int) -> Location:
    """Resolve a byte offset to a line/column position.

    Args:
        source (Source): The source the offset points into.
        byte_index (int): UTF-8 byte offset in ``[0, len(source.data)]``.

    Returns:
        Location: 1-based line and column (in code points).

    Raises:
        IndexTooLargeError: If the offset lies past the end of the content.
        InvalidCharBoundaryError: If the offset splits a multi-byte character.
    """
    check_index(source, byte_index)
    line_index: int = source.line_index(byte_index)
    return Location(line=line_index + 1, column=column_number(source, line_index, byte_index))


def resolve_span(source: Source, from_: int, to: int) -> ResolvedSpan:
    """Resolve a byte range to positions and the byte range of the covered lines.

    Args:
        source (Source): The source the range points into.
        from_ (int): Start byte offset.
        to (int): End byte offset (exclusive).

    Returns:
        ResolvedSpan: The resolved range.

    Raises:
        IndexTooLargeError: If an offset lies past the end of the content.
        InvalidCharBoundaryError: If an offset splits a multi-byte character.
        ValueError: If ``from_ > to``.
    """
    if from_ > to:
        raise ValueError(f"Span start {from_} is after its end {to}")
    start: Location = resolve_location(source, from_)
    end: Location = resolve_location(source, to)

    if end.line > start.line and end.column == 1:
        # The range stops right after a line terminator: it ends with the previous line.
        previous: int = end.line - 2
        end = Location(line=end.line - 1, column=_count_chars(_raw_line(source, previous)) + 1)

    line_start: int = source.line_starts[start.line - 1]
    _, line_end = source.line_range(end.line - 1)
    return ResolvedSpan(
        origin=source.name,
        start=start,
        end=end,
        from_=from_,
        to=to,
        line_start=line_start,
        line_end=line_end,
    )


def byte_offset(source: Source, line: int, column: int) -> int:
    """Return the byte offset of a 1-based line/column position.

    This is the inverse of `resolve_location`.

    Raises:
        LineTooLargeError: If the line does not exist (payload uses 0-based indices).
        ColumnTooLargeError: If the column lies past the end of the line.
    """
    start, _ = source.line_range(line - 1)
    text: str = _raw_line(source, line - 1).decode("utf-8")
    max_column: int = len(text) + 1
    if column < 1 or column > max_column:
        raise ColumnTooLargeError(given=column, max=max_column)
    return start + len(text[: column - 1].encode("utf-8"))


def char_width(char: str, tab_width: int) -> int:
    """Return the number of terminal cells ``char`` occupies."""
    if char == "\t":
        return tab_width
    if unicodedata.combining(char):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def display_width(text: str, tab_width: int) -> int:
    """Return the number of terminal cells ``text`` occupies."""
    return sum(char_width(char, tab_width) for char in text)


def expand_tabs(text: str, tab_width: int) -> str:
    """Replace each tab in ``text`` with ``tab_width`` spaces."""
    return text.replace("\t", " " * tab_width)
