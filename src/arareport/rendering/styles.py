# topmark:header:start
#
#   project      : AraReport
#   file         : styles.py
#   file_relpath : src/arareport/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Colorizers applied to the parts of a rendered issue.

Severity colors live on `IssueSeverity` itself; this module holds the styles of
everything else (gutter, secondary markers, emphasized message text).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from arareport.rendering.colored_enum import style

if TYPE_CHECKING:
    from arareport.issue import IssueSeverity
    from arareport.rendering.colored_enum import Colorizer

LINE_NUMBER: Colorizer = style(fg="bright_black")
BORDER: Colorizer = style(fg="bright_black")
SECONDARY: Colorizer = style(fg="blue")
MESSAGE: Colorizer = style(bold=True)
NOTE_LABEL: Colorizer = style(bold=True)


def primary(severity: IssueSeverity) -> Colorizer:
    """Return the style for primary markers and labels of an issue with ``severity``."""
    return severity.color


def mark(severity: IssueSeverity, is_primary: bool) -> Colorizer:
    """Return the style of a marker, connector, or label."""
    return primary(severity) if is_primary else SECONDARY
