# tableglyphs/preferences.py
"""User preferences and glyph set configuration.

Stores user preferences to ~/.tableglyphs/preferences.json. The only
setting the decoration engine reads is "glyph_set": either a preset name
("single", "double") or a custom 11-character string.

Resolution order for resolve_glyph_set(None):
1. TABLEGLYPHS_GLYPHS environment variable
2. Saved "glyph_set" preference
3. The "single" preset
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from .glyphs import DEFAULT_PRESET, GlyphSet, GlyphSetError, PRESETS, get_preset

logger = logging.getLogger(__name__)

GLYPHS_ENV_VAR = "TABLEGLYPHS_GLYPHS"
GLYPH_SET_KEY = "glyph_set"


def _get_preferences_path() -> Path:
    """Get the path to the user preferences file."""
    return Path.home() / ".tableglyphs" / "preferences.json"


def _load_all_preferences() -> dict:
    prefs_path = _get_preferences_path()
    try:
        if prefs_path.exists():
            with open(prefs_path, "r", encoding="utf-8") as f:
                return json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load preferences: {e}")
    return {}


def _save_all_preferences(prefs: dict) -> bool:
    prefs_path = _get_preferences_path()
    try:
        prefs_path.parent.mkdir(parents=True, exist_ok=True)
        with open(prefs_path, "w", encoding="utf-8") as f:
            json.dump(prefs, f, indent=2, ensure_ascii=False)
        return True
    except OSError as e:
        logger.warning(f"Failed to save preferences: {e}")
        return False


def save_preference(key: str, value: Any) -> bool:
    """Save a single preference value.

    Returns:
        True if saved successfully, False otherwise.
    """
    prefs = _load_all_preferences()
    prefs[key] = value
    success = _save_all_preferences(prefs)
    if success:
        logger.info(f"Saved preference: {key}={value}")
    return success


def load_preference(key: str, default: Any = None) -> Any:
    prefs = _load_all_preferences()
    return prefs.get(key, default)


def parse_glyph_set(value: Union[str, GlyphSet]) -> GlyphSet:
    """Turn a preset name or an 11-character string into a GlyphSet.

    Raises:
        GlyphSetError: If value is neither a preset nor a valid set.
    """
    if isinstance(value, GlyphSet):
        return value
    if not isinstance(value, str):
        raise GlyphSetError(f"glyph set must be a string, got {type(value).__name__}")
    if value.strip().lower() in PRESETS:
        return get_preset(value)
    return GlyphSet(value)


def resolve_glyph_set(value: Optional[Union[str, GlyphSet]] = None) -> GlyphSet:
    """Resolve the glyph set to use.

    An explicit value is validated strictly. Values coming from the
    environment or the preferences file fall back to the default preset
    with a warning when invalid.
    """
    if value is not None:
        return parse_glyph_set(value)

    for source, candidate in (
        (GLYPHS_ENV_VAR, os.environ.get(GLYPHS_ENV_VAR)),
        ("preferences", load_preference(GLYPH_SET_KEY)),
    ):
        if not candidate:
            continue
        try:
            return parse_glyph_set(candidate)
        except GlyphSetError as e:
            logger.warning(f"Ignoring invalid glyph set from {source}: {e}")

    return get_preset(DEFAULT_PRESET)


def save_glyph_set(value: Union[str, GlyphSet]) -> bool:
    """Validate and persist the glyph set preference."""
    glyphs = parse_glyph_set(value)
    if isinstance(value, str) and value.strip().lower() in PRESETS:
        return save_preference(GLYPH_SET_KEY, value.strip().lower())
    return save_preference(GLYPH_SET_KEY, glyphs.chars)
