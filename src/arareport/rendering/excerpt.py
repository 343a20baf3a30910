# topmark:header:start
#
#   project      : AraReport
#   file         : excerpt.py
#   file_relpath : src/arareport/rendering/excerpt.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Select the source lines shown beneath a diagnostic.

An excerpt holds every annotated line plus ``context_lines`` lines before and
after it. Overlapping or adjacent windows merge; a discontinuity between two
windows is flagged on the first line after it so the emitter can draw a break
marker. Lines are returned verbatim (terminator excluded), however long.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from arareport.config.logging import get_logger
from arareport.errors import LineTooLargeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from arareport.config.logging import AraReportLogger
    from arareport.source import Source

logger: AraReportLogger = get_logger(__name__)


@dataclass(frozen=True)
class ExcerptLine:
    """One line of an excerpt.

    Attributes:
        number (int): 1-based line number.
        text (str): Line text without its terminator.
        gap_before (bool): True when lines were skipped between this line and the previous one.
    """

    number: int
    text: str
    gap_before: bool = False


def _last_context_line(source: Source) -> int:
    # The empty pseudo-line after a trailing newline is not worth showing as context.
    count: int = source.line_count
    if count > 1 and source.line_starts[-1] == len(source.data):
        return count - 1
    return count


def extract_excerpt(
    source: Source,
    line_numbers: Iterable[int],
    context_lines: int = 1,
) -> list[ExcerptLine]:
    """Return the ordered lines to display for a set of annotated lines.

    Args:
        source (Source): The source to read from.
        line_numbers (Iterable[int]): 1-based numbers of the annotated lines.
        context_lines (int): Lines of context shown before and after each annotated line.

    Returns:
        list[ExcerptLine]: Requested lines and their context, ascending and de-duplicated.

    Raises:
        LineTooLargeError: If a requested line does not exist (payload uses 0-based indices).
    """
    requested: set[int] = set(line_numbers)
    max_index: int = source.line_count - 1
    for number in sorted(requested):
        if number < 1 or number - 1 > max_index:
            raise LineTooLargeError(given=number - 1, max=max_index)

    last_context: int = _last_context_line(source)
    shown: set[int] = set(requested)
    for number in requested:
        for offset in range(1, context_lines + 1):
            if number - offset >= 1:
                shown.add(number - offset)
            if number + offset <= last_context:
                shown.add(number + offset)

    lines: list[ExcerptLine] = []
    previous: int | None = None
    for number in sorted(shown):
        gap: bool = previous is not None and number != previous + 1
        lines.append(ExcerptLine(number, source.line_text(number - 1), gap_before=gap))
        previous = number

    logger.trace(
        "Excerpt of %s: requested=%s shown=%s",
        source.name,
        sorted(requested),
        [line.number for line in lines],
    )
    return lines
