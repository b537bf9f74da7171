"""
Settings manager for editor configuration
"""
import copy
import json
import logging
import os
from typing import Any, Optional, Tuple

from lanternmap.constants import (
    ASSETS_DIR, DEFAULT_SHEET_NAME, TILE_SIZE, WINDOW_SIZE, FPS, PALETTE_COLUMNS
)

logger = logging.getLogger(__name__)


def _parent(settings: dict, key: str) -> Tuple[dict, str]:
    """Get the dict holding a dotted key, and the last key part."""
    keys = key.split('.')
    parent = settings
    for k in keys[:-1]:
        parent = parent[k]
    return parent, keys[-1]


def _positive_int(value: Any) -> Optional[int]:
    """Convert a whole, positive JSON number to int, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value > 0:
        return value
    return None


class Settings:
    """Read-only editor settings, merged over defaults. Nothing is written back."""

    DEFAULT_SETTINGS = {
        'language': 'english',
        'sheet': {
            'name': DEFAULT_SHEET_NAME,
            'assets_dir': str(ASSETS_DIR),
            'tile_width': TILE_SIZE[0],
            'tile_height': TILE_SIZE[1],
        },
        'palette': {
            'columns': PALETTE_COLUMNS,
        },
        'video': {
            'resolution': list(WINDOW_SIZE),
            'fps': FPS,
        },
    }

    # Values checked after loading; anything else falls back to its default
    STRING_KEYS = ['language', 'sheet.name', 'sheet.assets_dir']
    POSITIVE_INT_KEYS = ['sheet.tile_width', 'sheet.tile_height', 'palette.columns', 'video.fps']

    def __init__(self, settings_file: Optional[str] = 'settings.json'):
        """Initialize settings manager."""
        self.settings_file = settings_file
        self.settings = self.load()

    def load(self) -> dict:
        """Load settings from file, falling back to defaults."""
        if not self.settings_file or not os.path.exists(self.settings_file):
            return copy.deepcopy(self.DEFAULT_SETTINGS)

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                loaded_settings = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Error loading settings from %s: %s. Using defaults.",
                           self.settings_file, e)
            return copy.deepcopy(self.DEFAULT_SETTINGS)

        if not isinstance(loaded_settings, dict):
            logger.warning("Settings file %s does not hold an object. Using defaults.",
                           self.settings_file)
            return copy.deepcopy(self.DEFAULT_SETTINGS)

        logger.info("Loaded settings from %s", self.settings_file)
        return self._validate(self._merge_with_defaults(loaded_settings))

    def _merge_with_defaults(self, loaded: dict) -> dict:
        """Merge loaded settings with defaults to ensure all keys exist."""
        result = copy.deepcopy(self.DEFAULT_SETTINGS)

        for key, value in loaded.items():
            if key in result and isinstance(result[key], dict):
                if not isinstance(value, dict):
                    logger.warning("Ignoring setting '%s': expected an object, got %r",
                                   key, value)
                    continue
                # Merge nested dicts
                result[key].update(value)
            else:
                result[key] = value

        return result

    def _validate(self, settings: dict) -> dict:
        """Replace values the editor cannot use with their defaults."""
        for key in self.STRING_KEYS:
            parent, name = _parent(settings, key)
            value = parent.get(name)
            if not isinstance(value, str) or not value:
                self._reset_to_default(settings, key, value)

        for key in self.POSITIVE_INT_KEYS:
            parent, name = _parent(settings, key)
            value = _positive_int(parent.get(name))
            if value is None:
                self._reset_to_default(settings, key, parent.get(name))
            else:
                parent[name] = value

        resolution = settings['video'].get('resolution')
        size = None
        if isinstance(resolution, (list, tuple)) and len(resolution) == 2:
            size = [_positive_int(v) for v in resolution]
        if size is None or None in size:
            self._reset_to_default(settings, 'video.resolution', resolution)
        else:
            settings['video']['resolution'] = size

        return settings

    def _reset_to_default(self, settings: dict, key: str, bad_value: Any) -> None:
        default_parent, name = _parent(self.DEFAULT_SETTINGS, key)
        default = default_parent[name]
        logger.warning("Invalid value %r for setting '%s'. Using default %r.",
                       bad_value, key, default)
        parent, _ = _parent(settings, key)
        parent[name] = copy.deepcopy(default)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value by dotted key, e.g. 'sheet.name'."""
        keys = key.split('.')
        value = self.settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def override(self, key: str, value: Any) -> None:
        """Set a value for this run only (command-line overrides)."""
        keys = key.split('.')
        settings = self.settings

        for k in keys[:-1]:
            if not isinstance(settings.get(k), dict):
                settings[k] = {}
            settings = settings[k]

        settings[keys[-1]] = value

    def get_tile_size(self) -> tuple:
        """Get the (width, height) tile size."""
        return (int(self.get('sheet.tile_width')), int(self.get('sheet.tile_height')))

    def get_resolution(self) -> tuple:
        width, height = self.get('video.resolution')
        return (int(width), int(height))


# Global settings instance
_settings_instance: Optional[Settings] = None  # pylint: disable=invalid-name


def get_settings() -> Settings:
    """Get global settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def init_settings(settings_file: Optional[str] = 'settings.json') -> Settings:
    """Create the global settings instance from a specific file."""
    global _settings_instance
    _settings_instance = Settings(settings_file)
    return _settings_instance
