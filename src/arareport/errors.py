# topmark:header:start
#
#   project      : AraReport
#   file         : errors.py
#   file_relpath : src/arareport/errors.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Exceptions raised while rendering reports.

Usage:
    Every failure that can happen while a report is resolved against its
    `SourceMap` or written to a sink is raised as a subclass of `ReportError`.
    None of them is recovered from locally: the current render is aborted and
    the exception propagates to the caller.

Taxonomy:
    - `FileMissingError`: an annotation or primary span references an unknown source.
    - `IndexTooLargeError`: a byte offset exceeds the source length.
    - `LineTooLargeError`: a line index exceeds the source's line count.
    - `ColumnTooLargeError`: a column exceeds the length of its line.
    - `InvalidCharBoundaryError`: an offset falls inside a multi-byte UTF-8 sequence.
    - `ReportIOError`: the output sink refused a write.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base class for all AraReport rendering errors."""


class FileMissingError(ReportError):
    """A required source is not in the source map."""

    def __init__(self, origin: str) -> None:
        self.origin = origin
        super().__init__(f"source {origin!r} is not in the source map")


class IndexTooLargeError(ReportError):
    """The source is present, but does not contain the given byte index."""

    def __init__(self, given: int, max: int) -> None:  # noqa: A002 - mirrors the error payload
        self.given = given
        self.max = max
        super().__init__(f"invalid index {given}, maximum index is {max}")


class LineTooLargeError(ReportError):
    """The source is present, but does not contain the given line index."""

    def __init__(self, given: int, max: int) -> None:  # noqa: A002
        self.given = given
        self.max = max
        super().__init__(f"invalid line {given}, maximum line is {max}")


class ColumnTooLargeError(ReportError):
    """The line exists, but does not contain the given column."""

    def __init__(self, given: int, max: int) -> None:  # noqa: A002
        self.given = given
        self.max = max
        super().__init__(f"invalid column {given}, maximum column is {max}")


class InvalidCharBoundaryError(ReportError):
    """The byte index lies inside the source but not on a UTF-8 code point boundary."""

    def __init__(self, given: int) -> None:
        self.given = given
        super().__init__(f"invalid character boundary at index {given}")


class ReportIOError(ReportError):
    """The output sink failed to accept a write.

    The underlying `OSError` is available as ``__cause__``.
    """
