# tableglyphs/plugins/__init__.py
"""Formatter plugins built on the decoration engine."""
