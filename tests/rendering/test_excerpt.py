# topmark:header:start
#
#   project      : AraReport
#   file         : test_excerpt.py
#   file_relpath : tests/rendering/test_excerpt.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Tests for excerpt line selection."""

from __future__ import annotations

import pytest

from arareport.errors import LineTooLargeError
from arareport.rendering.excerpt import ExcerptLine, extract_excerpt
from arareport.source import Source

SEVEN = Source("seven.src", "".join(f"line{n}\n" for n in range(1, 8)))


def _numbers(lines: list[ExcerptLine]) -> list[int]:
    return [line.number for line in lines]


def test_requested_line_with_context() -> None:
    lines = extract_excerpt(SEVEN, [2], context_lines=1)

    assert _numbers(lines) == [1, 2, 3]
    assert [line.text for line in lines] == ["line1", "line2", "line3"]
    assert not any(line.gap_before for line in lines)


def test_disjoint_windows_are_marked_with_a_gap() -> None:
    lines = extract_excerpt(SEVEN, [2, 6], context_lines=1)

    assert _numbers(lines) == [1, 2, 3, 5, 6, 7]
    assert [line.number for line in lines if line.gap_before] == [5]


def test_adjacent_windows_merge() -> None:
    lines = extract_excerpt(SEVEN, [2, 4], context_lines=1)

    assert _numbers(lines) == [1, 2, 3, 4, 5]
    assert not any(line.gap_before for line in lines)


def test_empty_line_after_trailing_newline_is_not_context() -> None:
    assert _numbers(extract_excerpt(SEVEN, [7], context_lines=1)) == [6, 7]


def test_empty_last_line_can_be_requested() -> None:
    lines = extract_excerpt(SEVEN, [8], context_lines=1)

    assert _numbers(lines) == [7, 8]
    assert lines[-1].text == ""


def test_zero_context() -> None:
    assert _numbers(extract_excerpt(SEVEN, [2, 3], context_lines=0)) == [2, 3]


def test_unknown_line_is_rejected() -> None:
    with pytest.raises(LineTooLargeError) as excinfo:
        extract_excerpt(SEVEN, [9])

    assert (excinfo.value.given, excinfo.value.max) == (8, 7)


def test_long_lines_are_not_truncated() -> None:
    long_line: str = "x" * 500
    source = Source("long.src", long_line)

    assert extract_excerpt(source, [1])[0].text == long_line
