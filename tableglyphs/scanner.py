# tableglyphs/scanner.py
"""Region scanner: find border characters in a span and decorate them.

The scanner is pull-based: a host scheduler calls it with whatever line
span needs (re)rendering, and it must give the same answer for a span
no matter how the buffer was split into spans. A '-' run cut by a span
boundary is therefore always extended to its full width within the line.

Table membership is answered by a TableRegions boundary finder. Within
one scan, the end line of the table last entered is cached so lines
inside it do not trigger fresh membership queries.
"""

import re
from typing import List, NamedTuple, Optional

from .classifier import NeighborContext, char_at, classify, dash_run
from .decorations import DecorationApplier
from .glyphs import GlyphSet, SINGLE
from .positions import Position, TextRange
from .regions import LineSource, TableRegions
from .trace import trace as _trace_write


BORDER_PATTERN = re.compile(r"[-|+]")


def _trace(msg: str, include_traceback: bool = False) -> None:
    _trace_write("RegionScanner", msg, include_traceback=include_traceback)


class DecorationOp(NamedTuple):
    """One instruction for the applier.

    A glyph of None means "strip any decoration in range".
    """
    range: TextRange
    glyph: Optional[str]

    @property
    def is_removal(self) -> bool:
        return self.glyph is None


class RegionScanner:
    """Classifies border characters and feeds the decoration applier.

    Args:
        source: Buffer lines.
        regions: Boundary finder answering table membership.
        applier: Where decorations are applied by __call__/apply.
        glyphs: Glyph set used to turn roles into characters. May be
            replaced at any time; it is read on every scan.
    """

    def __init__(
        self,
        source: LineSource,
        regions: TableRegions,
        applier: DecorationApplier,
        glyphs: GlyphSet = SINGLE,
    ):
        self._source = source
        self._regions = regions
        self._applier = applier
        self.glyphs = glyphs

    def __call__(self, start_line: int, end_line: int) -> None:
        """Incremental-scanner entry point: redecorate lines [start, end)."""
        end_line = min(end_line, self._source.line_count)
        if start_line >= end_line:
            return
        self._applier.remove_lines(start_line, end_line)
        self.apply(self.scan(Position(start_line, 0), Position(end_line, 0)))

    def apply(self, ops: List[DecorationOp]) -> None:
        for op in ops:
            if op.is_removal:
                self._applier.remove_range(op.range)
            else:
                self._applier.apply(op.range, op.glyph)

    def scan(self, start: Position, end: Position) -> List[DecorationOp]:
        """Classify every border character in [start, end).

        Returns:
            Decoration instructions in buffer order. Characters outside
            any table produce nothing.
        """
        glyphs = self.glyphs
        ops: List[DecorationOp] = []
        table_end: Optional[int] = None

        last_line = min(end.line, self._source.line_count - 1)
        for line in range(start.line, last_line + 1):
            text = self._source.line(line)
            col = start.column if line == start.line else 0
            stop = min(end.column, len(text)) if line == end.line else len(text)

            while col < stop:
                match = BORDER_PATTERN.search(text, col, stop)
                if match is None:
                    break
                col = match.start()

                if table_end is not None and line >= table_end:
                    table_end = None
                if table_end is None:
                    table_end = self._table_end(Position(line, col))
                    if table_end is None:
                        # Membership is per line: nothing else here decorates.
                        break

                char = match.group()
                if char == "-":
                    run_start, run_end = dash_run(text, col)
                    text_range = TextRange(line, run_start, run_end)
                    ctx = NeighborContext(
                        run_ends_at_junction=char_at(text, run_end) in ("+", "|"),
                    )
                    col = run_end
                else:
                    text_range = TextRange(line, col, col + 1)
                    ctx = self._context(text, line, col, table_end)
                    col += 1

                role = classify(char, ctx)
                glyph = glyphs[role] if role is not None else None
                ops.append(DecorationOp(text_range, glyph))

        return ops

    def _context(
        self, text: str, line: int, col: int, table_end: int
    ) -> NeighborContext:
        above = self._source.line(line - 1) if line > 0 else None
        below = (
            self._source.line(line + 1)
            if line + 1 < self._source.line_count
            else None
        )
        return NeighborContext(
            before=char_at(text, col - 1),
            after=char_at(text, col + 1),
            above_is_table=self._is_table_line(line - 1),
            below_is_table=line + 1 < table_end or self._is_table_line(line + 1),
            char_above=char_at(above, col),
            char_below=char_at(below, col),
            at_line_start=col == 0,
        )

    def _is_table_line(self, line: int) -> bool:
        if line < 0 or line >= self._source.line_count:
            return False
        try:
            return bool(self._regions.is_table_line(line))
        except Exception:
            _trace(f"is_table_line({line}) failed, treating as non-table",
                   include_traceback=True)
            return False

    def _table_end(self, position: Position) -> Optional[int]:
        """End line of the table at position, or None outside tables."""
        if not self._is_table_line(position.line):
            return None
        try:
            end = self._regions.table_end(position)
        except Exception:
            _trace(f"table_end({position}) failed, treating as non-table",
                   include_traceback=True)
            return None
        if end <= position.line:
            _trace(f"table_end({position}) returned {end}, treating as non-table")
            return None
        return end
