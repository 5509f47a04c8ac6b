# tableglyphs/positions.py
"""Buffer coordinates shared by the scanner, applier and host."""

from typing import NamedTuple


class Position(NamedTuple):
    """A (line, column) location in a buffer, both 0-based."""
    line: int
    column: int


class TextRange(NamedTuple):
    """A half-open column range [start, end) on a single line."""
    line: int
    start: int
    end: int
