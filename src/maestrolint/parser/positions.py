"""Offset to (line, column) mapping for diagnostic ranges."""

from __future__ import annotations

from bisect import bisect_right

from maestrolint.models.errors import SourcePosition


class LineIndex:
    """Line-start table over a document, built in one pass.

    Resolving an offset is a binary search, so a validation run can map
    every finding back to the source without rescanning the text.
    """

    def __init__(self, text: str) -> None:
        self._length = len(text)
        starts = [0]
        for offset, char in enumerate(text):
            if char == "\n":
                starts.append(offset + 1)
        self._line_starts = starts

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def clamp(self, offset: int) -> int:
        return max(0, min(self._length, offset))

    def position(self, offset: int) -> SourcePosition:
        """Return the 0-based line/character for *offset* (clamped to the text)."""
        offset = self.clamp(offset)
        line = bisect_right(self._line_starts, offset) - 1
        return SourcePosition(line=line, character=offset - self._line_starts[line])
