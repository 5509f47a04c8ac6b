# tableglyphs/classifier.py
"""Context classifier for ASCII table border characters.

Maps a border character and its immediate neighbourhood to the GlyphRole
it visually represents. Only a one-character horizontal window, the
characters directly above and below, and the table membership of the
adjacent lines are consulted, so any sub-span of a table can be
reclassified without reading the rest of it.

Everything in this module is pure.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .glyphs import GlyphRole


@dataclass(frozen=True)
class NeighborContext:
    """Facts about a border character's surroundings.

    Attributes:
        before: Character immediately to the left, None at line start.
        after: Character immediately to the right, None at line end.
        above_is_table: Whether the previous line is a table line.
        below_is_table: Whether the next line is a table line.
        char_above: Character at the same column one line up, if any.
        char_below: Character at the same column one line down, if any.
        at_line_start: True when the character is the first of its line.
        run_ends_at_junction: For '-', whether the maximal '-' run holding
            it is immediately followed by '+' or '|'.
    """
    before: Optional[str] = None
    after: Optional[str] = None
    above_is_table: bool = False
    below_is_table: bool = False
    char_above: Optional[str] = None
    char_below: Optional[str] = None
    at_line_start: bool = False
    run_ends_at_junction: bool = False


def dash_run(text: str, col: int) -> Tuple[int, int]:
    """Return the half-open column range of the '-' run covering col."""
    start = col
    while start > 0 and text[start - 1] == "-":
        start -= 1
    end = col + 1
    while end < len(text) and text[end] == "-":
        end += 1
    return start, end


def char_at(text: Optional[str], col: int) -> Optional[str]:
    if text is None or col < 0 or col >= len(text):
        return None
    return text[col]


def classify(char: str, ctx: NeighborContext) -> Optional[GlyphRole]:
    """Classify a border character.

    Args:
        char: One of '-', '|', '+'.
        ctx: The character's neighbourhood.

    Returns:
        The role to draw, or None to leave the character undecorated.
    """
    if char == "-":
        return GlyphRole.HORIZONTAL if ctx.run_ends_at_junction else None
    if char == "|":
        return _classify_edge(ctx, GlyphRole.VERTICAL)
    if char == "+":
        if ctx.before == "-" and ctx.after == "-":
            return _classify_junction(ctx)
        if ctx.before == "-" or ctx.after == "-":
            # End of a grid border row: behaves like a '|' edge, but a
            # lone '+' is never drawn as a vertical bar.
            return _classify_edge(ctx, None, allow_line_start=True)
    return None


def _classify_edge(
    ctx: NeighborContext,
    fallback: Optional[GlyphRole],
    allow_line_start: bool = False,
) -> Optional[GlyphRole]:
    dash_after = ctx.after == "-"
    dash_before = ctx.before == "-"
    inside = ctx.above_is_table and ctx.below_is_table

    if dash_after and inside and (allow_line_start or not ctx.at_line_start):
        return GlyphRole.RIGHT_T
    if dash_before and inside:
        return GlyphRole.LEFT_T
    if dash_before and not ctx.above_is_table:
        return GlyphRole.UPPER_RIGHT
    if dash_before and not ctx.below_is_table:
        return GlyphRole.LOWER_RIGHT
    if dash_after and not ctx.above_is_table:
        return GlyphRole.UPPER_LEFT
    if dash_after and not ctx.below_is_table:
        return GlyphRole.LOWER_LEFT
    return fallback


def _classify_junction(ctx: NeighborContext) -> Optional[GlyphRole]:
    if ctx.above_is_table and ctx.below_is_table:
        return GlyphRole.CROSS
    if not ctx.above_is_table and ctx.below_is_table:
        return GlyphRole.DOWN_T
    if ctx.char_above == "|" and ctx.char_below != "|":
        return GlyphRole.UP_T
    # No lower-T is inferred for the remaining cases.
    return None
