# topmark:header:start
#
#   project      : AraReport
#   file         : report.py
#   file_relpath : src/arareport/report.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Reports: ordered issues plus an optional closing footer.

Sections:
    * ReportFooter: closing message, notes, and the ``summary`` switch.
    * Report: immutable, ordered collection of issues with an aggregate severity.
    * ReportCollection / Reportable: several reports rendered as one stream.
    * Helpers computing per-severity counts for footer summaries.

A report owns its issues and footer; it never owns the `SourceMap` it is
rendered against.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Union

from arareport.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from arareport.config.logging import AraReportLogger
    from arareport.issue import Issue, IssueSeverity

logger: AraReportLogger = get_logger(__name__)


@dataclass(frozen=True)
class ReportFooter:
    """Closing block of a report.

    Attributes:
        message (str): Message shown in the closing header.
        notes (tuple[str, ...]): Notes shown under the closing header.
        summary (bool): When True, a per-severity count is appended at render
            time. It is never stored in ``notes``.
    """

    message: str
    notes: tuple[str, ...] = ()
    summary: bool = False

    def with_note(self, note: str) -> ReportFooter:
        """Return a copy of this footer with ``note`` appended."""
        return replace(self, notes=(*self.notes, note))

    def with_summary(self, enabled: bool = True) -> ReportFooter:
        """Return a copy of this footer with the generated summary switched on or off."""
        return replace(self, summary=enabled)


@dataclass(frozen=True)
class Report:
    """An ordered collection of issues, typically one per compiled unit.

    Example:
        ```python
        report = (
            Report()
            .with_issue(Issue.error("E0003", "standalone type `void`", "main.ara", 10, 14))
            .with_issue(Issue.warning("W0023", "...", "lib.ara", 9, 10))
            .with_footer(ReportFooter("aborting due to previous errors").with_summary())
        )
        assert report.severity() is IssueSeverity.ERROR
        ```
    """

    issues: tuple[Issue, ...] = ()
    footer: ReportFooter | None = None

    @classmethod
    def from_issue(cls, issue: Issue) -> Report:
        """Create a report holding a single issue."""
        return cls(issues=(issue,))

    def with_issue(self, issue: Issue) -> Report:
        """Return a copy of this report with ``issue`` appended."""
        return replace(self, issues=(*self.issues, issue))

    def with_issues(self, issues: Iterable[Issue]) -> Report:
        """Return a copy of this report with ``issues`` appended in order."""
        return replace(self, issues=(*self.issues, *issues))

    def with_footer(self, footer: ReportFooter) -> Report:
        """Return a copy of this report with ``footer`` set."""
        return replace(self, footer=footer)

    def severity(self) -> IssueSeverity | None:
        """Return the highest severity among the issues, or None for an empty report."""
        if not self.issues:
            return None
        return max(issue.severity for issue in self.issues)

    def severity_counts(self) -> list[tuple[IssueSeverity, int]]:
        """Return ``(severity, count)`` pairs sorted by ascending severity."""
        return compute_severity_counts(self.issues)

    def summary_text(self) -> str:
        """Return the generated summary, e.g. ``"1 warning(s), 2 error(s)"``."""
        return format_severity_counts(self.severity_counts())

    def __str__(self) -> str:
        return "".join(f"{issue}\n" for issue in self.issues)


ReportCollection = Sequence[Report]
"""Several reports rendered, in list order, as a single output stream."""

Reportable = Union[Report, ReportCollection]
"""Anything the builder can render: one report or a collection of reports."""


def to_reports(reportable: Reportable) -> list[Report]:
    """Normalize a report or a collection of reports into a list.

    Args:
        reportable (Reportable): A `Report` or a sequence of reports.

    Returns:
        list[Report]: The reports in rendering order.

    Raises:
        TypeError: If an element is not a `Report`.
    """
    if isinstance(reportable, Report):
        return [reportable]
    reports: list[Report] = list(reportable)
    for item in reports:
        if not isinstance(item, Report):
            raise TypeError(f"Expected a Report, got {type(item).__name__}")
    logger.trace("Rendering %d report(s)", len(reports))
    return reports


def compute_severity_counts(issues: Iterable[Issue]) -> list[tuple[IssueSeverity, int]]:
    """Return per-severity issue counts sorted by ascending severity.

    Severities without issues are omitted.

    Args:
        issues (Iterable[Issue]): The issues to count.

    Returns:
        list[tuple[IssueSeverity, int]]: ``(severity, count)`` pairs.
    """
    counts: Counter[IssueSeverity] = Counter(issue.severity for issue in issues)
    return sorted(counts.items(), key=lambda entry: entry[0])


def format_severity_counts(counts: Iterable[tuple[IssueSeverity, int]]) -> str:
    """Render counts as ``"{count} {severity}(s)"`` joined by ``", "``."""
    return ", ".join(f"{count} {severity}(s)" for severity, count in counts)
