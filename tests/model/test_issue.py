# topmark:header:start
#
#   project      : AraReport
#   file         : test_issue.py
#   file_relpath : tests/model/test_issue.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Tests for annotations, issue construction, and severity ordering."""

from __future__ import annotations

import pytest

from arareport.annotation import Annotation, AnnotationType
from arareport.constants import INLINE_SOURCE_NAME
from arareport.issue import Issue, IssueSeverity
from tests.conftest import parametrize


def test_severity_total_order() -> None:
    """Severities are ordered NOTE < HELP < WARNING < ERROR < BUG."""
    ordered: list[IssueSeverity] = [
        IssueSeverity.NOTE,
        IssueSeverity.HELP,
        IssueSeverity.WARNING,
        IssueSeverity.ERROR,
        IssueSeverity.BUG,
    ]

    assert sorted(reversed(ordered)) == ordered
    assert max(ordered) is IssueSeverity.BUG
    assert IssueSeverity.WARNING < IssueSeverity.ERROR
    assert IssueSeverity.BUG >= IssueSeverity.ERROR


def test_severity_renders_as_lowercase_name() -> None:
    assert str(IssueSeverity.WARNING) == "warning"
    assert IssueSeverity.ERROR.color("x") != "x"


@parametrize(
    ("factory", "severity"),
    [
        (Issue.error, IssueSeverity.ERROR),
        (Issue.warning, IssueSeverity.WARNING),
        (Issue.help, IssueSeverity.HELP),
        (Issue.note, IssueSeverity.NOTE),
        (Issue.bug, IssueSeverity.BUG),
    ],
)
def test_coded_constructors(factory: object, severity: IssueSeverity) -> None:
    issue: Issue = factory("C1", "message", "a.src", 1, 2)  # type: ignore[operator]

    assert issue.severity is severity
    assert issue.code == "C1"
    assert issue.source == ("a.src", 1, 2)


def test_coded_constructor_requires_both_offsets() -> None:
    with pytest.raises(ValueError):
        Issue.error("E1", "bad", "a.src", 1)


def test_fluent_chain_keeps_insertion_order() -> None:
    """Annotations and notes are kept in the order they were added."""
    first = Annotation.secondary("a.src", 0, 1).with_message("first")
    second = Annotation.primary("b.src", 2, 3)
    issue = (
        Issue.new(IssueSeverity.WARNING, "msg")
        .with_annotation(first)
        .with_annotations([second])
        .with_note("one")
        .with_note("two")
    )

    assert issue.annotations == (first, second)
    assert issue.notes == ("one", "two")


def test_with_source_validates_range() -> None:
    with pytest.raises(ValueError):
        Issue.from_string("x").with_source("a.src", 5, 4)


def test_string_forms() -> None:
    issue = Issue.error("E0231", "unexpected token").with_source("main.ara", 10, 11)

    assert issue.header() == "error[E0231]: unexpected token"
    assert str(issue) == "error[E0231]: unexpected token at main.ara@10:11"
    assert str(Issue.from_string("plain")) == "error: plain"


def test_from_exception_uses_message() -> None:
    issue = Issue.from_exception(ValueError("invalid digit found in string"))

    assert issue.severity is IssueSeverity.ERROR
    assert issue.code is None
    assert issue.message == "invalid digit found in string"


def test_implicit_primary_annotation_comes_last() -> None:
    secondary = Annotation.secondary("a.src", 0, 1)
    issue = Issue.error("E1", "bad", "a.src", 2, 3).with_annotation(secondary)

    annotations = issue.all_annotations()

    assert annotations[0] is secondary
    assert annotations[-1] == Annotation(AnnotationType.PRIMARY, "a.src", 2, 3)


def test_origins_put_primary_file_first() -> None:
    issue = (
        Issue.error("E1", "bad")
        .with_annotation(Annotation.secondary("lib.ara", 0, 1))
        .with_annotation(Annotation.primary("main.ara", 0, 1))
        .with_annotation(Annotation.secondary("other.ara", 0, 1))
        .with_annotation(Annotation.secondary("lib.ara", 2, 3))
    )

    assert issue.primary_origin() == "main.ara"
    assert issue.origins() == ["main.ara", "lib.ara", "other.ara"]


def test_annotation_defaults_and_validation() -> None:
    annotation = Annotation.new(AnnotationType.SECONDARY)

    assert annotation.origin == INLINE_SOURCE_NAME
    assert annotation.span == (INLINE_SOURCE_NAME, 0, 0)
    assert annotation.message is None
    with pytest.raises(ValueError):
        Annotation.primary("a.src", 3, 2)
