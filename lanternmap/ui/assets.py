"""
Sprite sheet asset loading.
"""
import logging
import os
from typing import Optional

import pygame

from lanternmap.constants import SHEET_FILE_PATTERNS

logger = logging.getLogger(__name__)


def load_sprite_sheet(name: str, assets_dir: str) -> Optional[pygame.Surface]:
    """
    Load a sprite sheet by asset name.

    Tries each of the known file name patterns in order. A missing or
    unreadable sheet is not an error for the caller; the editor shows an
    "image not found" state instead.

    Args:
        name: Asset name without extension (e.g. 'lantern_tileset_2_sheet')
        assets_dir: Directory holding the sheet files

    Returns:
        Loaded surface, or None if no candidate file could be loaded
    """
    for pattern in SHEET_FILE_PATTERNS:
        full_path = os.path.join(assets_dir, pattern.format(name=name))
        if not os.path.isfile(full_path):
            continue
        try:
            sheet = pygame.image.load(full_path)
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Could not load sprite sheet %s: %s", full_path, e)
            continue

        # convert_alpha needs a display mode; keep the raw surface otherwise
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            sheet = sheet.convert_alpha()

        logger.info("Loaded sprite sheet %s (%dx%d)", full_path, sheet.get_width(), sheet.get_height())
        return sheet

    logger.warning("Sprite sheet '%s' not found in %s", name, assets_dir)
    return None
