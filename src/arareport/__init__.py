# topmark:header:start
#
#   project      : AraReport
#   file         : __init__.py
#   file_relpath : src/arareport/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""AraReport package.

AraReport is the diagnostic-reporting core of a compiler toolchain. It turns
structured issues (errors, warnings, notes, help, bugs) into human-readable,
source-anchored output spanning multiple files and multiple reports per run.
"""

from __future__ import annotations

from arareport.annotation import Annotation, AnnotationType, Span
from arareport.builder import ReportBuilder
from arareport.config.model import CharSet, ColorChoice, DisplayStyle, RenderConfig
from arareport.constants import ARAREPORT_VERSION
from arareport.errors import (
    ColumnTooLargeError,
    FileMissingError,
    IndexTooLargeError,
    InvalidCharBoundaryError,
    LineTooLargeError,
    ReportError,
    ReportIOError,
)
from arareport.issue import Issue, IssueSeverity
from arareport.report import Report, ReportCollection, ReportFooter, Reportable
from arareport.source import Source, SourceMap

__version__: str = ARAREPORT_VERSION

__all__: list[str] = [
    "Annotation",
    "AnnotationType",
    "CharSet",
    "ColorChoice",
    "ColumnTooLargeError",
    "DisplayStyle",
    "FileMissingError",
    "IndexTooLargeError",
    "InvalidCharBoundaryError",
    "Issue",
    "IssueSeverity",
    "LineTooLargeError",
    "RenderConfig",
    "Report",
    "ReportBuilder",
    "ReportCollection",
    "ReportError",
    "ReportFooter",
    "ReportIOError",
    "Reportable",
    "Source",
    "SourceMap",
    "Span",
    "__version__",
]
