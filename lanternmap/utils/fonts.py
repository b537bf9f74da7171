"""Font utility with a bundled-font preference and per-size caching."""
from pathlib import Path
from typing import Dict, Optional

import pygame

from lanternmap.constants import ASSETS_DIR

# Path to bundled fonts directory
FONTS_DIR = ASSETS_DIR / "fonts"

# Bundled font files to look for (in priority order)
BUNDLED_FONT_FILES = [
    "NotoSans-Regular.ttf",
    "DejaVuSans.ttf",
]

_font_cache: Dict[int, pygame.font.Font] = {}
_bundled_font_path: Optional[Path] = None
_bundled_font_checked: bool = False


def _find_bundled_font() -> Optional[Path]:
    """Find a bundled font file in the assets directory.

    Returns:
        Path to the bundled font file, or None if not found
    """
    global _bundled_font_path, _bundled_font_checked

    if _bundled_font_checked:
        return _bundled_font_path

    _bundled_font_checked = True

    if not FONTS_DIR.exists():
        return None

    for font_file in BUNDLED_FONT_FILES:
        font_path = FONTS_DIR / font_file
        if font_path.exists():
            _bundled_font_path = font_path
            return _bundled_font_path

    return None


def get_font(size: int) -> pygame.font.Font:
    """
    Get a font of the given size.

    Priority order:
    1. Bundled font from assets/fonts directory
    2. Default pygame font

    Args:
        size: Font size in points

    Returns:
        pygame.font.Font instance
    """
    if not pygame.font.get_init():
        pygame.font.init()

    # Cached fonts die with pygame.quit(), so check before reusing
    if size in _font_cache:
        try:
            _font_cache[size].get_height()
            return _font_cache[size]
        except pygame.error:
            del _font_cache[size]

    bundled_font_path = _find_bundled_font()
    if bundled_font_path:
        try:
            font = pygame.font.Font(str(bundled_font_path), size)
            _font_cache[size] = font
            return font
        except (pygame.error, OSError):
            pass

    font = pygame.font.Font(None, size)
    _font_cache[size] = font
    return font
