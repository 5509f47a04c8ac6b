# tableglyphs/regions.py
"""Table region detection.

The scanner only needs two questions answered: "is this line part of a
table?" and "where does the table containing this position end?". Hosts
with their own notion of tables implement TableRegions; LineTableRegions
is the default used by the bundled Editor and the formatter plugin.

Detection patterns:
1. Pipe tables:        | cell | cell |   and   |------+------|
2. ASCII grid borders: +------+------+
"""

import re
from typing import Protocol, Tuple, runtime_checkable

from .positions import Position


# A pipe anywhere at the start of the line, or a grid border corner.
TABLE_LINE = re.compile(r"^[ \t]*(?:\||\+[-+])")


class TableRegionError(LookupError):
    """Raised when a position is not inside any table."""


@runtime_checkable
class LineSource(Protocol):
    """Read-only line access, as provided by TextBuffer."""

    @property
    def line_count(self) -> int:
        ...

    def line(self, index: int) -> str:
        ...


@runtime_checkable
class TableRegions(Protocol):
    """Boundary finder consulted by the region scanner."""

    def is_table_line(self, line: int) -> bool:
        """True if the given line belongs to a recognized table."""
        ...

    def table_end(self, position: Position) -> int:
        """Exclusive end line of the table containing position."""
        ...


class LineTableRegions:
    """Tables are maximal runs of consecutive table-looking lines."""

    def __init__(self, source: LineSource):
        self._source = source

    def is_table_line(self, line: int) -> bool:
        if line < 0 or line >= self._source.line_count:
            return False
        return TABLE_LINE.match(self._source.line(line)) is not None

    def table_end(self, position: Position) -> int:
        line = position.line
        if not self.is_table_line(line):
            raise TableRegionError(f"line {line} is not inside a table")
        while self.is_table_line(line):
            line += 1
        return line


def table_bounds(regions: TableRegions, position: Position) -> Tuple[int, int]:
    """Return [start, end) lines of the table containing position.

    Works with any TableRegions; the start is found by walking up with
    is_table_line since the protocol only reports table ends.

    Raises:
        TableRegionError: If position is not inside a table.
    """
    if not regions.is_table_line(position.line):
        raise TableRegionError(f"line {position.line} is not inside a table")
    start = position.line
    while start > 0 and regions.is_table_line(start - 1):
        start -= 1
    return start, regions.table_end(position)
