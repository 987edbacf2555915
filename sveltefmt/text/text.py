from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in the text handed to the parser.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: int) -> TextRange:
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)

    def contains(self, offset: int) -> bool:
        """Check if the range contains the given offset."""
        return self.start <= offset < self.end

    def shift(self, delta: int) -> TextRange:
        """Shift the range by the given delta, clamping at zero."""
        return TextRange(max(self.start + delta, 0), max(self.end + delta, 0))

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


class Located(Protocol):
    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start : range.end]


def offset_to_line_col(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of an offset into source."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def loc_start(node: Located) -> int:
    return node.start


def loc_end(node: Located) -> int:
    return node.end


def node_range(node: Located) -> TextRange:
    return TextRange(loc_start(node), loc_end(node))


def get_text(node: Located, source: str) -> str:
    """Raw source text of a node, sliced by its own offsets."""
    return slice_text_range(source, node_range(node))
