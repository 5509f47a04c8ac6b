# tableglyphs/tests/test_regions.py
"""Tests for table region detection."""

import pytest

from tableglyphs.host import TextBuffer
from tableglyphs.positions import Position
from tableglyphs.regions import (
    LineTableRegions,
    TableRegionError,
    TableRegions,
    table_bounds,
)


DOCUMENT = "\n".join([
    "Heading",            # 0
    "| a | b |",          # 1
    "|---+---|",          # 2
    "| 1 | 2 |",          # 3
    "",                   # 4
    "  +--+",             # 5
    "  |x |",             # 6
    "  +--+",             # 7
    "+ not a table",      # 8
])


@pytest.fixture
def regions():
    return LineTableRegions(TextBuffer(DOCUMENT))


class TestLineTableRegions:

    def test_protocol(self, regions):
        assert isinstance(regions, TableRegions)

    @pytest.mark.parametrize("line,expected", [
        (0, False), (1, True), (2, True), (3, True), (4, False),
        (5, True), (6, True), (7, True), (8, False),
        (-1, False), (99, False),
    ])
    def test_is_table_line(self, regions, line, expected):
        assert regions.is_table_line(line) is expected

    def test_table_end_is_exclusive(self, regions):
        assert regions.table_end(Position(1, 0)) == 4
        assert regions.table_end(Position(3, 5)) == 4
        assert regions.table_end(Position(6, 2)) == 8

    def test_table_end_outside_table(self, regions):
        with pytest.raises(TableRegionError):
            regions.table_end(Position(0, 0))


class TestTableBounds:

    def test_bounds(self, regions):
        assert table_bounds(regions, Position(2, 0)) == (1, 4)
        assert table_bounds(regions, Position(7, 0)) == (5, 8)

    def test_bounds_outside_table(self, regions):
        with pytest.raises(LookupError):
            table_bounds(regions, Position(4, 0))
