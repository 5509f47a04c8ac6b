# tableglyphs/plugins/table_glyph_formatter/__init__.py
"""Table glyph formatter plugin for the formatter pipeline."""

from .plugin import DEFAULT_PRIORITY, TableGlyphFormatterPlugin, create_plugin

__all__ = ["DEFAULT_PRIORITY", "TableGlyphFormatterPlugin", "create_plugin"]
