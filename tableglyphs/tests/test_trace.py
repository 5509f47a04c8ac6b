# tableglyphs/tests/test_trace.py
"""Tests for trace logging."""

import os
import tempfile

from tableglyphs.host import Editor
from tableglyphs.scanner import RegionScanner
from tableglyphs.decorations import DecorationApplier
from tableglyphs.trace import trace, trace_path


class BrokenRegions:

    def is_table_line(self, line):
        raise RuntimeError("regions unavailable")

    def table_end(self, position):
        raise RuntimeError("regions unavailable")


class TestTracePath:

    def test_env_value_is_used(self, tmp_path):
        assert trace_path() == str(tmp_path / "trace.log")

    def test_empty_env_disables(self, monkeypatch):
        monkeypatch.setenv("TABLEGLYPHS_TRACE_LOG", "")
        assert trace_path() is None

    def test_unset_env_uses_temp_dir(self, monkeypatch):
        monkeypatch.delenv("TABLEGLYPHS_TRACE_LOG", raising=False)
        assert trace_path() == os.path.join(
            tempfile.gettempdir(), "tableglyphs_trace.log")


class TestTrace:

    def test_writes_component_prefix(self, tmp_path):
        trace("Scanner", "hello")
        content = (tmp_path / "trace.log").read_text()
        assert "[Scanner] hello" in content

    def test_disabled_writes_nothing(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TABLEGLYPHS_TRACE_LOG", "")
        trace("Scanner", "hello")
        assert not (tmp_path / "trace.log").exists()

    def test_creates_directories(self, tmp_path, monkeypatch):
        path = tmp_path / "nested" / "dir" / "trace.log"
        monkeypatch.setenv("TABLEGLYPHS_TRACE_LOG", str(path))
        trace("X", "msg")
        assert "[X] msg" in path.read_text()

    def test_unwritable_path_is_ignored(self, tmp_path, monkeypatch):
        # A directory cannot be opened for appending.
        monkeypatch.setenv("TABLEGLYPHS_TRACE_LOG", str(tmp_path))
        trace("X", "msg")

    def test_traceback_is_appended(self, tmp_path):
        try:
            raise KeyError("missing")
        except KeyError:
            trace("X", "lookup failed", include_traceback=True)
        content = (tmp_path / "trace.log").read_text()
        assert "[X] lookup failed" in content
        assert "KeyError: 'missing'" in content

    def test_boundary_failures_are_traced(self, tmp_path):
        editor = Editor("+--+\n|  |\n+--+")
        scanner = RegionScanner(editor.buffer, BrokenRegions(), DecorationApplier())

        scanner(0, 3)

        content = (tmp_path / "trace.log").read_text()
        assert "[RegionScanner]" in content
        assert "RuntimeError: regions unavailable" in content
