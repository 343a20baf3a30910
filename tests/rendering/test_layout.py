# topmark:header:start
#
#   project      : AraReport
#   file         : test_layout.py
#   file_relpath : tests/rendering/test_layout.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Tests for marker row packing, hanging labels, and multi-line rails."""

from __future__ import annotations

from typing import TYPE_CHECKING

from arareport.annotation import AnnotationType
from arareport.rendering.chars import ASCII_GLYPHS, UNICODE_GLYPHS
from arareport.rendering.layout import (
    LineMark,
    MultiLineMark,
    annotation_rows,
    assign_rails,
    assign_rows,
    mark_rows,
)

if TYPE_CHECKING:
    from arareport.rendering.layout import Row

PRIMARY = AnnotationType.PRIMARY
SECONDARY = AnnotationType.SECONDARY


def _text(row: Row) -> str:
    return "".join(piece.text for piece in row)


def test_disjoint_marks_share_a_row() -> None:
    left = LineMark(0, 2, PRIMARY)
    right = LineMark(4, 6, SECONDARY)

    assert assign_rows([right, left]) == [[left, right]]


def test_overlapping_marks_stack_earliest_first() -> None:
    wide = LineMark(2, 8, SECONDARY, order=1)
    inner = LineMark(4, 5, PRIMARY, order=0)

    assert assign_rows([inner, wide]) == [[wide], [inner]]


def test_equal_starts_keep_insertion_order() -> None:
    first = LineMark(3, 4, SECONDARY, order=0)
    second = LineMark(3, 4, PRIMARY, order=1)

    assert assign_rows([second, first]) == [[first], [second]]


def test_empty_range_draws_one_marker() -> None:
    assert LineMark(5, 5, PRIMARY).end == 6


def test_rightmost_label_inline_others_hang() -> None:
    row = [LineMark(0, 2, PRIMARY, "a"), LineMark(4, 6, SECONDARY, "b")]

    texts: list[str] = [_text(r) for r in mark_rows(row, ASCII_GLYPHS)]

    assert texts == ["^^  -- b", "|", "a"]


def test_hanging_labels_keep_connectors_to_their_left() -> None:
    row = [
        LineMark(0, 1, SECONDARY, "first"),
        LineMark(3, 4, SECONDARY, "second"),
        LineMark(6, 7, PRIMARY, "third"),
    ]

    texts: list[str] = [_text(r) for r in mark_rows(row, ASCII_GLYPHS)]

    assert texts == ["-  -  ^ third", "|  |", "|  second", "first"]


def test_marker_pieces_record_their_kind() -> None:
    row = mark_rows([LineMark(1, 2, PRIMARY), LineMark(3, 4, SECONDARY)], ASCII_GLYPHS)[0]

    kinds = [(piece.text, piece.kind) for piece in row]

    assert kinds == [(" ", None), ("^", PRIMARY), (" ", None), ("-", SECONDARY)]


def test_rails_are_ordered_by_start_line_then_column() -> None:
    late = MultiLineMark(2, 0, 4, 0, PRIMARY, order=0)
    early_right = MultiLineMark(1, 5, 3, 0, SECONDARY, order=1)
    early_left = MultiLineMark(1, 2, 5, 0, SECONDARY, order=2)

    assert assign_rails([late, early_right, early_left]) == [early_left, early_right, late]


def test_single_rail_rows() -> None:
    rails = [MultiLineMark(1, 9, 3, 0, PRIMARY, "this block")]

    start_rows = [_text(r) for r in annotation_rows(1, [], rails, ASCII_GLYPHS)]
    middle_rows = annotation_rows(2, [], rails, ASCII_GLYPHS)
    end_rows = [_text(r) for r in annotation_rows(3, [], rails, ASCII_GLYPHS)]

    assert start_rows == [" __________^"]
    assert middle_rows == []
    assert end_rows == ["|_^ this block"]


def test_unicode_rail_glyphs() -> None:
    rails = [MultiLineMark(1, 0, 2, 0, PRIMARY)]

    assert [_text(r) for r in annotation_rows(1, [], rails, UNICODE_GLYPHS)] == ["╭─^"]
    assert [_text(r) for r in annotation_rows(2, [], rails, UNICODE_GLYPHS)] == ["╰─^"]


def test_nested_rails_close_innermost_first() -> None:
    outer = MultiLineMark(1, 0, 3, 0, PRIMARY, "outer")
    inner = MultiLineMark(1, 4, 3, 2, SECONDARY, "inner")
    rails = assign_rails([outer, inner])

    start_rows = [_text(r) for r in annotation_rows(1, [], rails, ASCII_GLYPHS)]
    end_rows = [_text(r) for r in annotation_rows(3, [], rails, ASCII_GLYPHS)]

    assert start_rows == [" __^", "| _____-"]
    assert end_rows == ["||___- inner", "|__^ outer"]


def test_single_line_marks_beside_active_rail() -> None:
    rails = [MultiLineMark(1, 0, 3, 0, PRIMARY)]

    marks = [LineMark(1, 3, SECONDARY, "x")]

    rows = [_text(r) for r in annotation_rows(2, marks, rails, ASCII_GLYPHS)]

    assert rows == ["|  -- x"]
