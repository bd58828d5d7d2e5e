"""Default configuration values for pocketkit."""

from __future__ import annotations

from pathlib import Path

# Loose default kept for existing callers; pass a tighter tolerance explicitly.
DEFAULT_APPROX_TOLERANCE = 1.5

DEFAULT_USE_COLOR = True
DEFAULT_FALLBACK_COLUMNS = 80
DEFAULT_FALLBACK_LINES = 24

DEFAULT_SETTINGS_PATH = Path.home() / ".pocketkit_settings.json"
