# tableglyphs/glyphs.py
"""Glyph sets for decorating ASCII table borders.

A glyph set is an ordered string of exactly 11 box-drawing characters,
one per GlyphRole. Sets are swapped as a whole; there is no way to edit
a single role in place.

Usage:
    from tableglyphs.glyphs import GlyphRole, get_preset, GlyphSet

    glyphs = get_preset("double")
    glyphs[GlyphRole.CROSS]          # '╬'
    custom = GlyphSet("┏┓┗┛┳┫┻┣╋━┃")
"""

from enum import IntEnum
from typing import Dict, Iterator

import wcwidth


GLYPH_COUNT = 11


class GlyphRole(IntEnum):
    """Semantic position a border character can represent.

    The integer value is the index into the glyph string.
    """
    UPPER_LEFT = 0
    UPPER_RIGHT = 1
    LOWER_LEFT = 2
    LOWER_RIGHT = 3
    DOWN_T = 4
    LEFT_T = 5
    UP_T = 6
    RIGHT_T = 7
    CROSS = 8
    HORIZONTAL = 9
    VERTICAL = 10


class GlyphSetError(ValueError):
    """Raised when a glyph set string is not a valid 11-glyph set."""


class GlyphSet:
    """Immutable 11-glyph set indexed by GlyphRole."""

    __slots__ = ("_chars",)

    def __init__(self, chars: str):
        if not isinstance(chars, str):
            raise GlyphSetError(
                f"glyph set must be a string, got {type(chars).__name__}"
            )
        if len(chars) != GLYPH_COUNT:
            raise GlyphSetError(
                f"glyph set needs exactly {GLYPH_COUNT} characters, "
                f"got {len(chars)}: {chars!r}"
            )
        for role, char in zip(GlyphRole, chars):
            # Box-drawing characters are East Asian Ambiguous; wcwidth
            # reports them as 1, which is what a decoration must occupy.
            if wcwidth.wcwidth(char) != 1:
                raise GlyphSetError(
                    f"glyph for {role.name} must occupy one column: {char!r}"
                )
        self._chars = chars

    @property
    def chars(self) -> str:
        return self._chars

    def __getitem__(self, role: GlyphRole) -> str:
        return self._chars[role]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __len__(self) -> int:
        return GLYPH_COUNT

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GlyphSet):
            return self._chars == other._chars
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"GlyphSet({self._chars!r})"


SINGLE = GlyphSet("┌┐└┘┬┤┴├┼─│")
DOUBLE = GlyphSet("╔╗╚╝╦╣╩╠╬═║")

PRESETS: Dict[str, GlyphSet] = {
    "single": SINGLE,
    "double": DOUBLE,
}

DEFAULT_PRESET = "single"


def get_preset(name: str) -> GlyphSet:
    """Look up a built-in glyph set by name (case-insensitive).

    Raises:
        GlyphSetError: If no preset has that name.
    """
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise GlyphSetError(
            f"unknown glyph preset {name!r}, expected one of {sorted(PRESETS)}"
        ) from None
