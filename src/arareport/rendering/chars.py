# topmark:header:start
#
#   project      : AraReport
#   file         : chars.py
#   file_relpath : src/arareport/rendering/chars.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Glyph sets used to draw excerpt borders, markers, and rails."""

from __future__ import annotations

from dataclasses import dataclass

from arareport.config.model import CharSet


@dataclass(frozen=True)
class Glyphs:
    """Characters used by the emitter and the layout engine.

    Attributes:
        border (str): Vertical bar separating the gutter from the excerpt.
        primary_caret (str): Marker under primary ranges.
        secondary_caret (str): Marker under secondary ranges.
        connector (str): Vertical line joining a marker to a label placed below it.
        rail_top (str): Corner where a multi-line rail starts.
        rail_fill (str): Horizontal run joining a rail to its marker.
        rail_vertical (str): Vertical segment of an active rail.
        rail_bottom (str): Corner where a multi-line rail ends.
        note_bullet (str): Marker in front of note and summary lines.
    """

    border: str
    primary_caret: str
    secondary_caret: str
    connector: str
    rail_top: str
    rail_fill: str
    rail_vertical: str
    rail_bottom: str
    note_bullet: str = "="

    def caret(self, primary: bool) -> str:
        """Return the marker glyph for a primary or secondary range."""
        return self.primary_caret if primary else self.secondary_caret


ASCII_GLYPHS = Glyphs(
    border="|",
    primary_caret="^",
    secondary_caret="-",
    connector="|",
    rail_top=" ",
    rail_fill="_",
    rail_vertical="|",
    rail_bottom="|",
)

UNICODE_GLYPHS = Glyphs(
    border="│",
    primary_caret="^",
    secondary_caret="-",
    connector="│",
    rail_top="╭",
    rail_fill="─",
    rail_vertical="│",
    rail_bottom="╰",
)


def glyphs_for(charset: CharSet) -> Glyphs:
    """Return the glyph set matching ``charset``."""
    if charset is CharSet.UNICODE:
        return UNICODE_GLYPHS
    return ASCII_GLYPHS
