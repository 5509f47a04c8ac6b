# tableglyphs/conftest.py
"""Pytest fixtures shared by the tableglyphs tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the real home directory and trace log.

    Preferences live under ~/.tableglyphs and the glyph set can be
    overridden from the environment, so both are pinned per test.
    """
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("TABLEGLYPHS_GLYPHS", raising=False)
    monkeypatch.setenv("TABLEGLYPHS_TRACE_LOG", str(tmp_path / "trace.log"))
    yield


@pytest.fixture
def grid_table():
    """A 5-line ASCII grid table with a header separator."""
    return "\n".join([
        "+------+------+",
        "| a    | b    |",
        "+------+------+",
        "| c    | d    |",
        "+------+------+",
    ])


@pytest.fixture
def pipe_table():
    """A 5-line pipe table whose borders start with '|'."""
    return "\n".join([
        "+------+------+",
        "| a    | b    |",
        "|------+------|",
        "| c    | d    |",
        "+------+------+",
    ])
