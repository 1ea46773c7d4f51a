"""In-memory markdown document with line/offset addressing."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` within a document."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"span start {self.start} is after end {self.end}")


@dataclass(frozen=True)
class Line:
    """One line of a document. ``end`` excludes the line break."""

    number: int
    start: int
    end: int
    text: str


class DocumentQuery(Protocol):
    """Read access to a document, as needed by the range resolver."""

    @property
    def line_count(self) -> int: ...

    def line_at(self, offset: int) -> Line: ...

    def line(self, number: int) -> Line: ...

    def get_range(self, start: int, end: int) -> str: ...


class FoldingQuery(Protocol):
    """Structural folding: the range that collapses under a line, if any."""

    def foldable(self, doc: DocumentQuery, line_start: int, line_end: int) -> Span | None: ...


@dataclass
class Document:
    """A text document addressable by line number or character offset.

    Lines may be separated by ``\\n`` or ``\\r\\n``; the separator is kept in
    the text and excluded from each line's bounds.
    """

    text: str = ""
    _starts: list[int] = field(init=False, repr=False, default_factory=list)

    def __post_init__(self) -> None:
        self._index()

    def _index(self) -> None:
        starts = [0]
        pos = self.text.find("\n")
        while pos != -1:
            starts.append(pos + 1)
            pos = self.text.find("\n", pos + 1)
        self._starts = starts

    @property
    def line_count(self) -> int:
        return len(self._starts)

    @property
    def lines(self) -> list[str]:
        return [self.line(i).text for i in range(self.line_count)]

    def line(self, number: int) -> Line:
        """Return line ``number`` (0-based)."""
        if not 0 <= number < self.line_count:
            raise IndexError(f"line {number} out of range")
        start = self._starts[number]
        if number + 1 < self.line_count:
            end = self._starts[number + 1] - 1
            if end > start and self.text[end - 1] == "\r":
                end -= 1
        else:
            end = len(self.text)
        return Line(number, start, end, self.text[start:end])

    def line_at(self, offset: int) -> Line:
        """Return the line containing ``offset``, clamped to the document."""
        offset = max(0, min(offset, len(self.text)))
        return self.line(bisect.bisect_right(self._starts, offset) - 1)

    def pos_to_offset(self, line: int, ch: int) -> int:
        """Convert a (line, column) position to an offset."""
        target = self.line(line)
        return min(target.start + max(ch, 0), target.end)

    def offset_to_pos(self, offset: int) -> tuple[int, int]:
        """Convert an offset to a (line, column) position."""
        offset = max(0, min(offset, len(self.text)))
        target = self.line_at(offset)
        return target.number, min(offset, target.end) - target.start

    def get_range(self, start: int, end: int) -> str:
        return self.text[start:end]

    def replace_range(self, start: int, end: int, replacement: str) -> None:
        """Replace ``[start, end)`` with ``replacement``."""
        self.text = self.text[:start] + replacement + self.text[end:]
        self._index()
