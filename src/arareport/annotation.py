# topmark:header:start
#
#   project      : AraReport
#   file         : annotation.py
#   file_relpath : src/arareport/annotation.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Labeled byte ranges attached to issues.

An `Annotation` points into a named source (`origin`) with a half-open byte
range ``[from_, to)``. Primary annotations are drawn with the issue's severity
color and ``^`` markers; secondary annotations use a lighter style and ``-``
markers. The type affects visual weight only, never positioning.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from arareport.constants import INLINE_SOURCE_NAME

Span = tuple[str, int, int]
"""A byte range within a named source: ``(origin, from_, to)``."""


class AnnotationType(str, Enum):
    """Visual weight of an annotation."""

    PRIMARY = "primary"
    SECONDARY = "secondary"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Annotation:
    """A labeled byte range within a named source.

    Attributes:
        type (AnnotationType): Primary or secondary.
        origin (str): Name of the source the range points into.
        from_ (int): Start byte offset (inclusive).
        to (int): End byte offset (exclusive); ``from_ <= to``.
        message (str | None): Optional label drawn next to the markers.
    """

    type: AnnotationType
    origin: str
    from_: int
    to: int
    message: str | None = None

    def __post_init__(self) -> None:
        if self.from_ < 0 or self.to < 0:
            raise ValueError(f"Annotation offsets must be non-negative: {self.from_}..{self.to}")
        if self.from_ > self.to:
            raise ValueError(f"Annotation start {self.from_} is after its end {self.to}")

    @classmethod
    def new(
        cls,
        type: AnnotationType,  # noqa: A002
        origin: str = INLINE_SOURCE_NAME,
        from_: int = 0,
        to: int = 0,
    ) -> Annotation:
        """Create an annotation without a message."""
        return cls(type=type, origin=origin, from_=from_, to=to)

    @classmethod
    def primary(cls, origin: str, from_: int, to: int) -> Annotation:
        """Create a primary annotation.

        Example:
            >>> Annotation.primary("main.ara", 0, 5).type
            <AnnotationType.PRIMARY: 'primary'>
        """
        return cls.new(AnnotationType.PRIMARY, origin, from_, to)

    @classmethod
    def secondary(cls, origin: str, from_: int, to: int) -> Annotation:
        """Create a secondary annotation."""
        return cls.new(AnnotationType.SECONDARY, origin, from_, to)

    def with_message(self, message: str) -> Annotation:
        """Return a copy of this annotation carrying ``message``.

        Example:
            >>> Annotation.secondary("main.ara", 10, 11).with_message("try removing this").message
            'try removing this'
        """
        return replace(self, message=message)

    @property
    def is_primary(self) -> bool:
        """True for primary annotations."""
        return self.type is AnnotationType.PRIMARY

    @property
    def span(self) -> Span:
        """The annotated range as ``(origin, from_, to)``."""
        return (self.origin, self.from_, self.to)
