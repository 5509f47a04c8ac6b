# tableglyphs/render.py
"""Render a buffer with its decorations overlaid.

Decorations never change buffer text; these helpers produce what the
user sees. render_rich returns a rich Text so decorated cells can also
carry a style when printed to a rich Console.
"""

from typing import Optional

from rich.text import Text

from .decorations import DecorationApplier
from .regions import LineSource


DEFAULT_BORDER_STYLE = "table.border"


def render_line(source: LineSource, applier: DecorationApplier, line: int) -> str:
    """Displayed form of one line."""
    chars = list(source.line(line))
    for decoration in applier.decorations(line):
        end = min(decoration.range.end, len(chars))
        for col in range(decoration.range.start, end):
            chars[col] = decoration.glyph
    return "".join(chars)


def render_text(source: LineSource, applier: DecorationApplier) -> str:
    """Displayed form of the whole buffer."""
    return "\n".join(
        render_line(source, applier, line) for line in range(source.line_count)
    )


def render_rich(
    source: LineSource,
    applier: DecorationApplier,
    style: Optional[str] = DEFAULT_BORDER_STYLE,
) -> Text:
    """Displayed form of the whole buffer as rich Text.

    Args:
        source: Buffer lines.
        applier: Decorations to overlay.
        style: Style applied to decorated cells, None for no styling.
    """
    text = Text()
    for line in range(source.line_count):
        if line:
            text.append("\n")
        raw = source.line(line)
        col = 0
        for decoration in applier.decorations(line):
            start = min(decoration.range.start, len(raw))
            end = min(decoration.range.end, len(raw))
            if start < col or start >= end:
                continue
            text.append(raw[col:start])
            text.append(decoration.glyph * (end - start), style=style or "")
            col = end
        text.append(raw[col:])
    return text
