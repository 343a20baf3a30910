# topmark:header:start
#
#   project      : AraReport
#   file         : source.py
#   file_relpath : src/arareport/source.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Named source buffers and the registry reports are resolved against.

Sections:
    * Source: an immutable named text buffer addressed by UTF-8 byte offsets,
      with a lazily built line-start table.
    * SourceMap: an ordered collection of sources with unique names.

Both types are read-only once constructed, so they can be shared between
renders running on different threads.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING

from arareport.constants import INLINE_SOURCE_NAME
from arareport.errors import FileMissingError, LineTooLargeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class Source:
    """A named, immutable text buffer.

    Offsets into a source are **byte** offsets into its UTF-8 encoding; see
    `arareport.rendering.position` for the mapping to lines and columns.

    Attributes:
        name (str): Unique key of the source within a `SourceMap`.
        content (str): The source text.
    """

    name: str
    content: str

    @classmethod
    def inline(cls, content: str) -> Source:
        """Create a source under the implicit current-file name.

        Args:
            content (str): The source text.

        Returns:
            Source: A source named `INLINE_SOURCE_NAME`.
        """
        return cls(INLINE_SOURCE_NAME, content)

    @cached_property
    def data(self) -> bytes:
        """UTF-8 encoding of the content."""
        return self.content.encode("utf-8")

    @cached_property
    def line_starts(self) -> tuple[int, ...]:
        """Byte offsets at which each line starts.

        The first line always starts at 0; every ``\\n`` opens a new line, so a
        trailing newline yields a final empty line.
        """
        data: bytes = self.data
        starts: list[int] = [0]
        index: int = data.find(b"\n")
        while index != -1:
            starts.append(index + 1)
            index = data.find(b"\n", index + 1)
        return tuple(starts)

    @property
    def line_count(self) -> int:
        """Number of lines, including the empty line after a trailing newline."""
        return len(self.line_starts)

    def line_index(self, byte_index: int) -> int:
        """Return the 0-based index of the line containing ``byte_index``.

        The offset is not validated here; callers go through
        `arareport.rendering.position` which checks bounds and boundaries first.
        """
        return bisect_right(self.line_starts, byte_index) - 1

    def line_range(self, line_index: int) -> tuple[int, int]:
        """Return the byte range of a line, without its terminator.

        Args:
            line_index (int): 0-based line index.

        Returns:
            tuple[int, int]: ``(start, end)`` byte offsets; ``end`` excludes the
            ``\\n`` and a preceding ``\\r``.

        Raises:
            LineTooLargeError: If the line does not exist.
        """
        starts: tuple[int, ...] = self.line_starts
        if line_index < 0 or line_index >= len(starts):
            raise LineTooLargeError(given=line_index, max=len(starts) - 1)
        start: int = starts[line_index]
        end: int = starts[line_index + 1] - 1 if line_index + 1 < len(starts) else len(self.data)
        if end > start and self.data[end - 1 : end] == b"\r":
            end -= 1
        return start, end

    def line_text(self, line_index: int) -> str:
        """Return the text of a line without its terminator.

        Raises:
            LineTooLargeError: If the line does not exist.
        """
        start, end = self.line_range(line_index)
        return self.data[start:end].decode("utf-8")


@dataclass(frozen=True)
class SourceMap:
    """Ordered, read-only registry of named sources.

    Names are unique: lookups return at most one source. A reference to an
    unknown name is reported as `FileMissingError` by `lookup()`.
    """

    sources: tuple[Source, ...] = ()
    _by_name: dict[str, Source] = field(init=False, repr=False, compare=False)

    def __init__(self, sources: Iterable[Source] = ()) -> None:
        items: tuple[Source, ...] = tuple(sources)
        by_name: dict[str, Source] = {}
        for source in items:
            if source.name in by_name:
                raise ValueError(f"Duplicate source name in source map: {source.name!r}")
            by_name[source.name] = source
        object.__setattr__(self, "sources", items)
        object.__setattr__(self, "_by_name", by_name)

    def get(self, name: str) -> Source | None:
        """Return the source registered under ``name``, or None."""
        return self._by_name.get(name)

    def lookup(self, name: str) -> Source:
        """Return the source registered under ``name``.

        Raises:
            FileMissingError: If no source has that name.
        """
        source: Source | None = self._by_name.get(name)
        if source is None:
            raise FileMissingError(name)
        return source

    def names(self) -> list[str]:
        """Return the source names in insertion order."""
        return [source.name for source in self.sources]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Source]:
        return iter(self.sources)

    def __len__(self) -> int:
        return len(self.sources)
