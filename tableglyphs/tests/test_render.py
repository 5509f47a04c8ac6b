# tableglyphs/tests/test_render.py
"""Tests for rendering decorated buffers."""

from rich.console import Console

from tableglyphs.decorations import DecorationApplier
from tableglyphs.host import TextBuffer
from tableglyphs.positions import TextRange
from tableglyphs.render import render_line, render_rich, render_text


def decorated_box():
    buffer = TextBuffer("+--+\n|ab|\n+--+")
    applier = DecorationApplier()
    applier.apply(TextRange(0, 0, 1), "┌")
    applier.apply(TextRange(0, 1, 3), "─")
    applier.apply(TextRange(0, 3, 4), "┐")
    applier.apply(TextRange(1, 0, 1), "│")
    applier.apply(TextRange(1, 3, 4), "│")
    return buffer, applier


class TestRenderText:

    def test_render_line(self):
        buffer, applier = decorated_box()
        assert render_line(buffer, applier, 0) == "┌──┐"
        assert render_line(buffer, applier, 1) == "│ab│"
        assert render_line(buffer, applier, 2) == "+--+"

    def test_render_text_leaves_buffer_alone(self):
        buffer, applier = decorated_box()
        assert render_text(buffer, applier) == "┌──┐\n│ab│\n+--+"
        assert buffer.text == "+--+\n|ab|\n+--+"

    def test_decoration_past_line_end_is_clipped(self):
        buffer = TextBuffer("+-")
        applier = DecorationApplier()
        applier.apply(TextRange(0, 1, 9), "─")
        assert render_text(buffer, applier) == "+─"


class TestRenderRich:

    def test_plain_text_matches(self):
        buffer, applier = decorated_box()
        assert render_rich(buffer, applier).plain == render_text(buffer, applier)

    def test_decorated_cells_styled(self):
        buffer, applier = decorated_box()
        text = render_rich(buffer, applier, style="bold blue")

        styled = {text.plain[span.start:span.end] for span in text.spans}
        assert styled == {"┌", "──", "┐", "│"}
        assert all(span.style == "bold blue" for span in text.spans)

    def test_no_style(self):
        buffer, applier = decorated_box()
        assert render_rich(buffer, applier, style=None).spans == []

    def test_prints_with_default_style(self):
        buffer, applier = decorated_box()
        console = Console(width=20, record=True, color_system=None)
        console.print(render_rich(buffer, applier))
        assert "┌──┐" in console.export_text()
