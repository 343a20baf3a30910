# topmark:header:start
#
#   project      : AraReport
#   file         : model.py
#   file_relpath : src/arareport/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Rendering options and the immutable configuration snapshot.

Sections:
    * ColorChoice: when to emit ANSI colors.
    * CharSet: line-drawing glyphs for borders and connectors.
    * DisplayStyle: vertical density of the output.
    * RenderConfig: frozen snapshot of all options, buildable from a TOML table.

Each option set is closed and enumerable, so options are enums rather than
free-form flags. Tokens read from configuration files are matched
case-insensitively against keys, member names, and aliases.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, TypeVar

from arareport.config.logging import get_logger
from arareport.constants import DEFAULT_CONTEXT_LINES, DEFAULT_TAB_WIDTH
from arareport.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Mapping

    from arareport.config.logging import AraReportLogger

logger: AraReportLogger = get_logger(__name__)

_KS = TypeVar("_KS", bound=KeyedStrEnum)


class ColorChoice(KeyedStrEnum):
    """User intent for colorized output.

    Attributes:
        ALWAYS: Force-enable color regardless of the sink.
        AUTO: Defer to the sink's own terminal detection (and ``FORCE_COLOR``/``NO_COLOR``).
        NEVER: Disable color entirely.
    """

    ALWAYS = ("always", "Always emit colors", ("force", "on"))
    AUTO = ("auto", "Emit colors when the sink is a terminal")
    NEVER = ("never", "Never emit colors", ("off", "none"))


class CharSet(KeyedStrEnum):
    """Glyph set for excerpt borders and connectors."""

    ASCII = ("ascii", "ASCII line drawing (`-`, `|`)")
    UNICODE = ("unicode", "Box-drawing characters", ("utf8", "utf-8", "box"))


class DisplayStyle(KeyedStrEnum):
    """Vertical density of rendered issues.

    Attributes:
        DEFAULT: Full excerpt blocks with annotations and notes.
        COMFORTABLE: Location-prefixed header line plus notes.
        COMPACT: A single line per issue.
    """

    DEFAULT = ("default", "Full source excerpts", ("rich",))
    COMFORTABLE = ("comfortable", "Header and notes", ("medium",))
    COMPACT = ("compact", "One line per issue", ("short",))


def _parse_option(enum_cls: type[_KS], key: str, raw: Any) -> _KS:
    if isinstance(raw, enum_cls):
        return raw
    member: _KS | None = enum_cls.parse(raw) if isinstance(raw, str) else None
    if member is None:
        raise ValueError(
            f"Invalid value for `{key}`: {raw!r} (expected one of: {enum_cls.choices()})"
        )
    return member


def _parse_count(key: str, raw: Any, *, minimum: int) -> int:
    # bool is an int subclass; `context_lines = true` is a config mistake
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < minimum:
        raise ValueError(f"Invalid value for `{key}`: {raw!r} (expected an integer >= {minimum})")
    return raw


@dataclass(frozen=True)
class RenderConfig:
    """Immutable snapshot of rendering options.

    Attributes:
        colors (ColorChoice): Color policy. Defaults to ``AUTO``.
        charset (CharSet): Line-drawing glyphs. Defaults to ``ASCII``.
        style (DisplayStyle): Output density. Defaults to ``DEFAULT``.
        context_lines (int): Lines of context shown before and after annotated lines.
        tab_width (int): Number of spaces a tab expands to in excerpts.
    """

    colors: ColorChoice = ColorChoice.AUTO
    charset: CharSet = CharSet.ASCII
    style: DisplayStyle = DisplayStyle.DEFAULT
    context_lines: int = DEFAULT_CONTEXT_LINES
    tab_width: int = DEFAULT_TAB_WIDTH

    @classmethod
    def from_dict(cls, table: Mapping[str, Any]) -> RenderConfig:
        """Build a configuration from a TOML-like table.

        Unknown keys are logged and ignored; missing keys keep their defaults.

        Args:
            table (Mapping[str, Any]): Parsed table, e.g. ``{"colors": "never"}``.

        Returns:
            RenderConfig: The resulting configuration.

        Raises:
            ValueError: If a known key holds an invalid value.
        """
        known: set[str] = {f.name for f in fields(cls)}
        for key in table:
            if key not in known:
                logger.warning("Ignoring unknown render option: %r", key)

        defaults = cls()
        config = cls(
            colors=_parse_option(ColorChoice, "colors", table.get("colors", defaults.colors)),
            charset=_parse_option(CharSet, "charset", table.get("charset", defaults.charset)),
            style=_parse_option(DisplayStyle, "style", table.get("style", defaults.style)),
            context_lines=_parse_count(
                "context_lines", table.get("context_lines", defaults.context_lines), minimum=0
            ),
            tab_width=_parse_count(
                "tab_width", table.get("tab_width", defaults.tab_width), minimum=1
            ),
        )
        logger.debug("Resolved render config: %s", config)
        return config

    def to_dict(self) -> dict[str, Any]:
        """Return a TOML-friendly mapping of the options."""
        return {
            "colors": self.colors.value,
            "charset": self.charset.value,
            "style": self.style.value,
            "context_lines": self.context_lines,
            "tab_width": self.tab_width,
        }
