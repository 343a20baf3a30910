# topmark:header:start
#
#   project      : AraReport
#   file         : enum_mixins.py
#   file_relpath : src/arareport/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Enum base for the closed option sets of the renderer.

``KeyedStrEnum`` members are strings whose value is the token written in
configuration files (``colors = "never"``). Each member also carries a short
description and a tuple of alternative spellings, so ``"utf-8"``, ``"UTF8"``
and ``"unicode"`` all select `CharSet.UNICODE`.

Example:
    ```python
    class Density(KeyedStrEnum):
        LOOSE = ("loose", "Blank lines between items", ("wide",))
        TIGHT = ("tight", "No blank lines")

    assert Density.parse("Wide") is Density.LOOSE
    assert Density.choices() == "loose, tight"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def normalize_token(token: str) -> str:
    """Fold case and separators so ``"UTF-8"``, ``"utf_8"`` and ``"utf 8"`` compare equal."""
    return token.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """String enum keyed by its configuration token.

    Attributes:
        description (str): One-line description of the member.
        aliases (tuple[str, ...]): Alternative spellings accepted by `parse()`.
    """

    description: str
    aliases: tuple[str, ...]

    def __new__(cls: type[_KS], key: str, description: str, aliases: Iterable[str] = ()) -> _KS:
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.description = description
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return self._value_

    def tokens(self) -> Iterator[str]:
        """Yield every normalized spelling that selects this member."""
        yield normalize_token(self._value_)
        yield normalize_token(self.name)
        for alias in self.aliases:
            yield normalize_token(alias)

    @classmethod
    def choices(cls) -> str:
        """Return the canonical tokens of all members, comma separated."""
        return ", ".join(member.value for member in cls)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Return the member selected by ``raw``, or None when nothing matches.

        The token is compared case-insensitively against each member's value,
        name, and aliases; ``-`` and spaces count as ``_``.
        """
        if raw is None:
            return None
        token: str = normalize_token(raw)
        return next((member for member in cls if token in member.tokens()), None)
