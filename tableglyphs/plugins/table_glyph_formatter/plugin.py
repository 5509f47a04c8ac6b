# tableglyphs/plugins/table_glyph_formatter/plugin.py
"""Table glyph formatter plugin.

Detects ASCII tables in streamed text and draws their borders with
box-drawing glyphs. Cell text and column widths are left exactly as
written; only '-', '|' and '+' border characters change appearance.

Detection patterns:
1. Pipe tables:        | cell | cell |   with   |------+------|
2. ASCII grid tables:  +------+------+

Usage (pipeline):
    from tableglyphs.plugins.formatter_pipeline import create_pipeline
    from tableglyphs.plugins.table_glyph_formatter import create_plugin

    pipeline = create_pipeline()
    pipeline.register(create_plugin())  # priority 25
"""

from typing import Any, Dict, Iterator, List, Optional

from tableglyphs.decorations import DecorationApplier
from tableglyphs.glyphs import GlyphSet
from tableglyphs.host import Editor
from tableglyphs.preferences import resolve_glyph_set
from tableglyphs.regions import TABLE_LINE
from tableglyphs.render import render_text
from tableglyphs.scanner import RegionScanner
from tableglyphs.trace import trace as _trace_write

# Priority for pipeline ordering (20-39 = structural formatting)
DEFAULT_PRIORITY = 25

# A lone table-looking line is more likely prose than a table.
MIN_TABLE_LINES = 2


def _trace(msg: str) -> None:
    _trace_write("TableGlyphFormatter", msg)


class TableGlyphFormatterPlugin:
    """Plugin that draws ASCII table borders with box-drawing glyphs.

    Implements the FormatterPlugin protocol. Table lines are buffered
    until the block ends (a non-table line or flush), then the block is
    loaded into an Editor, scanned, and rendered with its decorations.
    """

    def __init__(self):
        self._priority = DEFAULT_PRIORITY
        self._glyphs: Optional[GlyphSet] = None

        # Lines of the table block being accumulated
        self._buffer: List[str] = []

        # Incomplete line (no trailing newline yet)
        self._line_buffer: str = ""

    # ==================== FormatterPlugin Protocol ====================

    @property
    def name(self) -> str:
        return "table_glyph_formatter"

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def glyphs(self) -> GlyphSet:
        if self._glyphs is None:
            self._glyphs = resolve_glyph_set()
        return self._glyphs

    def process_chunk(self, chunk: str) -> Iterator[str]:
        """Process a chunk, buffering table lines until the block ends.

        Partial lines are held until their newline arrives, since a line
        cannot be classified as table or prose before it is complete.
        """
        text = self._line_buffer + chunk
        self._line_buffer = ""

        last_newline = text.rfind("\n")
        if last_newline == -1:
            self._line_buffer = text
            return
        self._line_buffer = text[last_newline + 1:]

        for line in text[:last_newline].split("\n"):
            if self._is_table_line(line):
                self._buffer.append(line)
                continue
            yield from self._flush_buffer()
            yield line + "\n"

    def flush(self) -> Iterator[str]:
        """Flush the pending partial line and any buffered table."""
        if self._line_buffer:
            line, self._line_buffer = self._line_buffer, ""
            if self._is_table_line(line):
                self._buffer.append(line)
                yield from self._flush_buffer(trailing_newline=False)
                return
            yield from self._flush_buffer()
            yield line
            return
        yield from self._flush_buffer()

    def reset(self) -> None:
        self._buffer = []
        self._line_buffer = ""

    # ==================== Table Rendering ====================

    def _is_table_line(self, line: str) -> bool:
        return TABLE_LINE.match(line) is not None

    def _flush_buffer(self, trailing_newline: bool = True) -> Iterator[str]:
        if not self._buffer:
            return
        lines, self._buffer = self._buffer, []
        ending = "\n" if trailing_newline else ""

        if len(lines) < MIN_TABLE_LINES:
            yield "\n".join(lines) + ending
            return

        yield self.decorate("\n".join(lines)) + ending

    def decorate(self, text: str) -> str:
        """Return text with every table border drawn in the glyph set."""
        editor = Editor(text)
        applier = DecorationApplier()
        scanner = RegionScanner(editor.buffer, editor.regions, applier, self.glyphs)
        editor.scheduler.register_incremental_scanner(scanner)
        editor.redisplay()
        _trace(f"decorated {editor.buffer.line_count} line(s), "
               f"{len(applier)} decoration(s)")
        return render_text(editor.buffer, applier)

    # ==================== ConfigurableFormatter Protocol ====================

    def initialize(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the formatter with configuration.

        Args:
            config: Dict with optional settings:
                - priority: Pipeline priority (default: 25)
                - glyphs: Preset name ("single", "double") or an
                  11-character glyph string (default: user preference)

        Raises:
            GlyphSetError: If glyphs is given but invalid.
        """
        config = config or {}
        self._priority = config.get("priority", DEFAULT_PRIORITY)
        self._glyphs = resolve_glyph_set(config.get("glyphs"))

    def shutdown(self) -> None:
        self.reset()


def create_plugin() -> TableGlyphFormatterPlugin:
    """Factory function to create a TableGlyphFormatterPlugin instance."""
    return TableGlyphFormatterPlugin()
