# topmark:header:start
#
#   project      : AraReport
#   file         : colored_enum.py
#   file_relpath : src/arareport/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Colorizers and the enum base for values that render in their own color.

A `Colorizer` turns text into ANSI-decorated text. Colorizers are applied
unconditionally; the writer that receives a styled segment decides whether the
decorated or the bare text reaches its sink, so no data type needs to know
about terminals.

`IssueSeverity` is the main client: each severity is the tag printed in
headers (``"error"``) and carries the color of that tag and of the primary
markers drawn for the issue.
"""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Any, Protocol

import click


class Colorizer(Protocol):
    """Callable that decorates a string for display."""

    def __call__(self, text: str) -> str: ...


def style(**style_kwargs: Any) -> Colorizer:
    """Return a colorizer calling `click.style` with ``style_kwargs``.

    Example:
        >>> style(fg="red", bold=True)("E") == click.style("E", fg="red", bold=True)
        True
    """
    return partial(click.style, **style_kwargs)


class ColoredStrEnum(str, Enum):
    """String enum whose members each carry a `Colorizer`.

    Members are declared as ``NAME = (text, colorizer)``. The text becomes the
    member value; the colorizer is exposed as `color`.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    def __str__(self) -> str:
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Colorizer of this member."""
        return self._color
