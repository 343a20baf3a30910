# topmark:header:start
#
#   project      : AraReport
#   file         : issue.py
#   file_relpath : src/arareport/issue.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Issues: single diagnostics with severity, code, spans and notes.

Sections:
    * IssueSeverity: totally ordered severity (NOTE < HELP < WARNING < ERROR < BUG)
      with the color used for human-readable output.
    * Issue: immutable diagnostic built through a fluent ``with_*`` chain.

Example:
    ```python
    issue = (
        Issue.error("0003", "standalone type `void` cannot be part of a union")
        .with_source("main.ara", 10, 14)
        .with_annotation(
            Annotation.secondary("main.ara", 9, 10).with_message("union type starts here")
        )
        .with_note("consider using `null` instead of `void`")
    )
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from arareport.annotation import Annotation, AnnotationType, Span
from arareport.rendering.colored_enum import ColoredStrEnum, style

if TYPE_CHECKING:
    from collections.abc import Sequence


class IssueSeverity(ColoredStrEnum):
    """Severity of an issue, ordered by declaration: NOTE < HELP < WARNING < ERROR < BUG.

    The order is what `Report.severity()` aggregates over; it is defined by the
    rich comparisons below rather than by the string values.
    """

    NOTE = ("note", style(fg="green", bold=True))
    HELP = ("help", style(fg="cyan", bold=True))
    WARNING = ("warning", style(fg="yellow", bold=True))
    ERROR = ("error", style(fg="red", bold=True))
    BUG = ("bug", style(fg="bright_red", bold=True))

    @property
    def rank(self) -> int:
        """Position of this severity in ascending order (NOTE is 0)."""
        return _SEVERITY_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IssueSeverity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, IssueSeverity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, IssueSeverity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, IssueSeverity):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_ORDER: tuple[IssueSeverity, ...] = tuple(IssueSeverity)


@dataclass(frozen=True)
class Issue:
    """A single diagnostic.

    Attributes:
        severity (IssueSeverity): Importance of the issue.
        message (str): Primary message shown in the header line.
        code (str | None): Optional code shown as ``severity[code]``.
        source (Span | None): Optional primary span ``(origin, from_, to)``, drawn as
            an implicit primary annotation.
        annotations (tuple[Annotation, ...]): Additional labeled ranges, in insertion order.
        notes (tuple[str, ...]): Trailing notes, in insertion order.
    """

    severity: IssueSeverity
    message: str
    code: str | None = None
    source: Span | None = None
    annotations: tuple[Annotation, ...] = ()
    notes: tuple[str, ...] = ()

    @classmethod
    def new(cls, severity: IssueSeverity, message: str) -> Issue:
        """Create an issue with the given severity and message."""
        return cls(severity=severity, message=message)

    @classmethod
    def _coded(
        cls,
        severity: IssueSeverity,
        code: str,
        message: str,
        origin: str | None,
        from_: int | None,
        to: int | None,
    ) -> Issue:
        issue: Issue = cls.new(severity, message).with_code(code)
        if origin is not None:
            if from_ is None or to is None:
                raise ValueError("A primary span needs both `from_` and `to` offsets")
            issue = issue.with_source(origin, from_, to)
        return issue

    @classmethod
    def error(
        cls,
        code: str,
        message: str,
        origin: str | None = None,
        from_: int | None = None,
        to: int | None = None,
    ) -> Issue:
        """Create an error issue, optionally with its primary span.

        Example:
            >>> Issue.error("E1", "bad", "a.src", 9, 10).source
            ('a.src', 9, 10)
        """
        return cls._coded(IssueSeverity.ERROR, code, message, origin, from_, to)

    @classmethod
    def warning(
        cls,
        code: str,
        message: str,
        origin: str | None = None,
        from_: int | None = None,
        to: int | None = None,
    ) -> Issue:
        """Create a warning issue, optionally with its primary span."""
        return cls._coded(IssueSeverity.WARNING, code, message, origin, from_, to)

    @classmethod
    def help(
        cls,
        code: str,
        message: str,
        origin: str | None = None,
        from_: int | None = None,
        to: int | None = None,
    ) -> Issue:
        """Create a help issue, optionally with its primary span."""
        return cls._coded(IssueSeverity.HELP, code, message, origin, from_, to)

    @classmethod
    def note(
        cls,
        code: str,
        message: str,
        origin: str | None = None,
        from_: int | None = None,
        to: int | None = None,
    ) -> Issue:
        """Create a note issue, optionally with its primary span."""
        return cls._coded(IssueSeverity.NOTE, code, message, origin, from_, to)

    @classmethod
    def bug(
        cls,
        code: str,
        message: str,
        origin: str | None = None,
        from_: int | None = None,
        to: int | None = None,
    ) -> Issue:
        """Create a bug issue, optionally with its primary span."""
        return cls._coded(IssueSeverity.BUG, code, message, origin, from_, to)

    @classmethod
    def from_string(cls, message: str) -> Issue:
        """Create an error issue without code from a plain message."""
        return cls.new(IssueSeverity.ERROR, message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> Issue:
        """Create an error issue from an exception, using ``str(exc)`` as message.

        Example:
            >>> Issue.from_exception(ValueError("invalid digit found in string")).message
            'invalid digit found in string'
        """
        return cls.from_string(str(exc))

    def with_code(self, code: str) -> Issue:
        """Return a copy of this issue with ``code`` set."""
        return replace(self, code=code)

    def with_source(self, origin: str, from_: int, to: int) -> Issue:
        """Return a copy of this issue with its primary span set.

        Raises:
            ValueError: If ``from_ > to`` or an offset is negative.
        """
        if from_ < 0 or to < 0 or from_ > to:
            raise ValueError(f"Invalid primary span {from_}..{to} in {origin!r}")
        return replace(self, source=(origin, from_, to))

    def with_annotation(self, annotation: Annotation) -> Issue:
        """Return a copy of this issue with ``annotation`` appended."""
        return replace(self, annotations=(*self.annotations, annotation))

    def with_annotations(self, annotations: Sequence[Annotation]) -> Issue:
        """Return a copy of this issue with ``annotations`` appended in order."""
        return replace(self, annotations=(*self.annotations, *annotations))

    def with_note(self, note: str) -> Issue:
        """Return a copy of this issue with ``note`` appended."""
        return replace(self, notes=(*self.notes, note))

    def primary_annotation(self) -> Annotation | None:
        """Return the primary span as an implicit primary annotation, if any."""
        if self.source is None:
            return None
        origin, from_, to = self.source
        return Annotation(AnnotationType.PRIMARY, origin, from_, to)

    def all_annotations(self) -> list[Annotation]:
        """Return the annotations followed by the implicit primary annotation."""
        implicit: Annotation | None = self.primary_annotation()
        return [*self.annotations, implicit] if implicit is not None else list(self.annotations)

    def primary_origin(self) -> str | None:
        """Return the issue's primary file.

        This is the origin of the primary span; without one, the origin of the first
        primary annotation, then of the first annotation.
        """
        if self.source is not None:
            return self.source[0]
        for annotation in self.annotations:
            if annotation.is_primary:
                return annotation.origin
        if self.annotations:
            return self.annotations[0].origin
        return None

    def origins(self) -> list[str]:
        """Return the distinct origins touched, primary file first, then in annotation order."""
        primary: str | None = self.primary_origin()
        ordered: list[str] = [primary] if primary is not None else []
        for annotation in self.annotations:
            if annotation.origin not in ordered:
                ordered.append(annotation.origin)
        return ordered

    def header_label(self) -> str:
        """Return ``severity[code]``, or just the severity for an issue without code."""
        if self.code is not None:
            return f"{self.severity}[{self.code}]"
        return str(self.severity)

    def header(self) -> str:
        """Return the plain header text ``severity[code]: message``."""
        return f"{self.header_label()}: {self.message}"

    def __str__(self) -> str:
        """Return the header, followed by the primary span when present.

        Example:
            >>> str(Issue.error("E0231", "unexpected token").with_source("main.ara", 10, 11))
            'error[E0231]: unexpected token at main.ara@10:11'
        """
        if self.source is None:
            return self.header()
        origin, from_, to = self.source
        return f"{self.header()} at {origin}@{from_}:{to}"
