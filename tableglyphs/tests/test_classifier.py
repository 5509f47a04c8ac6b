# tableglyphs/tests/test_classifier.py
"""Tests for the border character context classifier."""

import pytest

from tableglyphs.classifier import NeighborContext, char_at, classify, dash_run
from tableglyphs.glyphs import GlyphRole


def ctx(before=None, after=None, above=True, below=True, **kwargs):
    return NeighborContext(
        before=before,
        after=after,
        above_is_table=above,
        below_is_table=below,
        **kwargs,
    )


class TestDashes:
    """Tests for '-' runs."""

    def test_run_ending_at_junction_is_horizontal(self):
        assert classify("-", NeighborContext(run_ends_at_junction=True)) == GlyphRole.HORIZONTAL

    def test_run_not_ending_at_junction_is_undecorated(self):
        assert classify("-", NeighborContext(run_ends_at_junction=False)) is None

    def test_dash_run_bounds(self):
        assert dash_run("+------+", 3) == (1, 7)
        assert dash_run("--", 0) == (0, 2)
        assert dash_run("a-b", 1) == (1, 2)


class TestVerticalBars:
    """Tests for '|' in order of rule precedence."""

    def test_right_t(self):
        assert classify("|", ctx(before=" ", after="-")) == GlyphRole.RIGHT_T

    def test_right_t_needs_column_after_line_start(self):
        """At the first column the right-T rule does not apply."""
        result = classify("|", ctx(after="-", at_line_start=True))
        assert result == GlyphRole.VERTICAL

    def test_left_t(self):
        assert classify("|", ctx(before="-", after=None)) == GlyphRole.LEFT_T

    def test_upper_right(self):
        assert classify("|", ctx(before="-", above=False)) == GlyphRole.UPPER_RIGHT

    def test_lower_right(self):
        assert classify("|", ctx(before="-", below=False)) == GlyphRole.LOWER_RIGHT

    def test_upper_left(self):
        assert classify("|", ctx(after="-", above=False)) == GlyphRole.UPPER_LEFT

    def test_lower_left(self):
        assert classify("|", ctx(after="-", below=False)) == GlyphRole.LOWER_LEFT

    def test_plain_separator(self):
        assert classify("|", ctx(before=" ", after=" ")) == GlyphRole.VERTICAL

    def test_isolated_line_prefers_upper_corner(self):
        """With no table above or below, the upper corner rules win."""
        assert classify("|", ctx(before="-", above=False, below=False)) == GlyphRole.UPPER_RIGHT
        assert classify("|", ctx(after="-", above=False, below=False)) == GlyphRole.UPPER_LEFT

    def test_dash_on_both_sides_inside_table(self):
        """Rule 1 (followed by '-') is checked before rule 2."""
        assert classify("|", ctx(before="-", after="-")) == GlyphRole.RIGHT_T


class TestJunctions:
    """Tests for '+'."""

    def test_cross(self):
        assert classify("+", ctx(before="-", after="-")) == GlyphRole.CROSS

    def test_down_t(self):
        assert classify("+", ctx(before="-", after="-", above=False)) == GlyphRole.DOWN_T

    def test_up_t(self):
        context = ctx(before="-", after="-", below=False, char_above="|", char_below=None)
        assert classify("+", context) == GlyphRole.UP_T

    def test_up_t_requires_bar_above(self):
        context = ctx(before="-", after="-", below=False, char_above=" ")
        assert classify("+", context) is None

    def test_no_lower_t_inferred(self):
        """A junction matching no rule stays undecorated."""
        context = ctx(before="-", after="-", above=False, below=False, char_above=None)
        assert classify("+", context) is None

    def test_up_t_not_when_bar_below(self):
        context = ctx(before="-", after="-", below=False, char_above="|", char_below="|")
        assert classify("+", context) is None

    @pytest.mark.parametrize("above,below,before,after,expected", [
        (False, True, None, "-", GlyphRole.UPPER_LEFT),
        (False, True, "-", None, GlyphRole.UPPER_RIGHT),
        (True, False, None, "-", GlyphRole.LOWER_LEFT),
        (True, False, "-", None, GlyphRole.LOWER_RIGHT),
        (True, True, None, "-", GlyphRole.RIGHT_T),
        (True, True, "-", None, GlyphRole.LEFT_T),
    ])
    def test_grid_border_edges(self, above, below, before, after, expected):
        """A '+' ending a border row acts as a corner or side T."""
        context = ctx(before=before, after=after, above=above, below=below,
                      at_line_start=before is None)
        assert classify("+", context) == expected

    def test_lone_plus_undecorated(self):
        assert classify("+", ctx(before=" ", after=" ")) is None


class TestMisc:

    def test_other_characters(self):
        assert classify("x", ctx()) is None

    def test_char_at_bounds(self):
        assert char_at("abc", -1) is None
        assert char_at("abc", 3) is None
        assert char_at(None, 0) is None
        assert char_at("abc", 1) == "b"
