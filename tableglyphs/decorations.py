# tableglyphs/decorations.py
"""Non-destructive visual overrides over buffer ranges.

The applier keeps its own range map, keyed by line and sorted by start
column, entirely separate from the buffer text. A decoration says "draw
every character in this range as glyph"; reading the buffer is never
affected, so stripping every decoration restores the original display.
"""

import bisect
from typing import Dict, Iterator, List, NamedTuple, Optional

from .positions import Position, TextRange


class Decoration(NamedTuple):
    range: TextRange
    glyph: str


class DecorationApplier:
    """Overlay of (range, glyph) decorations.

    Applying over decorated characters replaces them (last write wins);
    a decoration only partly covered by a new apply or a remove is
    trimmed to its uncovered part.
    """

    def __init__(self):
        self._lines: Dict[int, List[Decoration]] = {}

    def apply(self, text_range: TextRange, glyph: str) -> None:
        """Draw every character of text_range as glyph."""
        if text_range.end <= text_range.start:
            raise ValueError(f"cannot decorate empty range {text_range}")
        self._clear(text_range.line, text_range.start, text_range.end)
        decorations = self._lines.setdefault(text_range.line, [])
        bisect.insort(decorations, Decoration(text_range, glyph))

    def remove(self, start: Position, end: Position) -> None:
        """Strip decorations between two positions (end exclusive).

        The span may cover several lines. Removing where nothing is
        decorated is a no-op.
        """
        for line in [n for n in self._lines if start.line <= n <= end.line]:
            lo = start.column if line == start.line else 0
            hi = end.column if line == end.line else None
            self._clear(line, lo, hi)

    def remove_range(self, text_range: TextRange) -> None:
        self._clear(text_range.line, text_range.start, text_range.end)

    def remove_lines(self, start_line: int, end_line: int) -> None:
        """Strip every decoration on lines [start_line, end_line)."""
        for line in [n for n in self._lines if start_line <= n < end_line]:
            del self._lines[line]

    def remove_all(self) -> None:
        self._lines.clear()

    def glyph_at(self, position: Position) -> Optional[str]:
        """Glyph drawn at position, or None when undecorated."""
        for decoration in self._lines.get(position.line, ()):
            if decoration.range.start > position.column:
                break
            if position.column < decoration.range.end:
                return decoration.glyph
        return None

    def decorations(self, line: Optional[int] = None) -> List[Decoration]:
        """Decorations in buffer order, optionally limited to one line."""
        if line is not None:
            return list(self._lines.get(line, ()))
        return [d for n in sorted(self._lines) for d in self._lines[n]]

    def __iter__(self) -> Iterator[Decoration]:
        return iter(self.decorations())

    def __len__(self) -> int:
        return sum(len(decorations) for decorations in self._lines.values())

    def _clear(self, line: int, lo: int, hi: Optional[int]) -> None:
        decorations = self._lines.get(line)
        if not decorations:
            return
        kept: List[Decoration] = []
        for decoration in decorations:
            start, end = decoration.range.start, decoration.range.end
            if end <= lo or (hi is not None and start >= hi):
                kept.append(decoration)
                continue
            if start < lo:
                kept.append(Decoration(TextRange(line, start, lo), decoration.glyph))
            if hi is not None and hi < end:
                kept.append(Decoration(TextRange(line, hi, end), decoration.glyph))
        if kept:
            kept.sort()
            self._lines[line] = kept
        else:
            del self._lines[line]
