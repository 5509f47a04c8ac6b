# tableglyphs/__init__.py
"""Box-drawing decoration for plain-text tables.

Border characters ('-', '|', '+') of ASCII tables are drawn with Unicode
box-drawing glyphs through a separate decoration overlay; the text itself
is never modified.

Example:
    from tableglyphs import Editor, TableGlyphMode, render_text

    editor = Editor("+------+\\n| cell |\\n+------+")
    mode = TableGlyphMode.for_editor(editor, realign=my_realign)
    mode.activate()
    editor.redisplay()
    print(render_text(editor.buffer, mode.applier))
"""

from .classifier import NeighborContext, classify
from .decorations import Decoration, DecorationApplier
from .glyphs import DOUBLE, GlyphRole, GlyphSet, GlyphSetError, PRESETS, SINGLE, get_preset
from .host import CommandTable, Editor, RenderScheduler, TextBuffer
from .lifecycle import ModeError, ModeState, TableGlyphMode
from .positions import Position, TextRange
from .preferences import resolve_glyph_set
from .regions import LineTableRegions, TableRegionError, TableRegions
from .render import render_line, render_rich, render_text
from .scanner import DecorationOp, RegionScanner

__all__ = [
    "CommandTable",
    "DOUBLE",
    "Decoration",
    "DecorationApplier",
    "DecorationOp",
    "Editor",
    "GlyphRole",
    "GlyphSet",
    "GlyphSetError",
    "LineTableRegions",
    "ModeError",
    "ModeState",
    "NeighborContext",
    "PRESETS",
    "Position",
    "RegionScanner",
    "RenderScheduler",
    "SINGLE",
    "TableGlyphMode",
    "TableRegionError",
    "TableRegions",
    "TextBuffer",
    "TextRange",
    "classify",
    "get_preset",
    "render_line",
    "render_rich",
    "render_text",
    "resolve_glyph_set",
]
