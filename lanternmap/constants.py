"""
Constants for the Lantern map editor.
"""
from enum import Enum
from pathlib import Path
from typing import Tuple


class EditorView(Enum):
    """Top-level states of the editor window."""
    GRID = 'grid'
    IMAGE_NOT_FOUND = 'image_not_found'


# Tile geometry
TILE_SIZE: Tuple[int, int] = (32, 32)

# Assets
ASSETS_DIR = Path(__file__).parent / "assets"
DEFAULT_SHEET_NAME = 'lantern_tileset_2_sheet'
SHEET_FILE_PATTERNS = [
    "{name}.png",
    "{name}_sheet.png",
    "{name}.bmp",
]

# Window
WINDOW_SIZE: Tuple[int, int] = (1024, 700)
FPS = 30

# Layout
TOOLBAR_HEIGHT = 40
PALETTE_WIDTH = 200
PALETTE_COLUMNS = 5
PALETTE_SPACING = 4
PALETTE_PADDING = 8
PALETTE_LABEL_HEIGHT = 14
DIVIDER_WIDTH = 1
CANVAS_TOP_SPACER = 16
SCROLL_STEP = 32

# Colors
BG_COLOR = (236, 236, 236)
PANEL_COLOR = (246, 246, 246)
DIVIDER_COLOR = (200, 200, 200)
GRID_COLOR = (128, 128, 128)        # Gray cell outlines
TILE_BORDER_COLOR = (128, 128, 128)
TILE_HOVER_COLOR = (0, 122, 255)    # Blue outline on hover
LABEL_COLOR = (60, 60, 60)
ERROR_TEXT_COLOR = (255, 59, 48)    # Red "image not found" message
TOOLBAR_COLOR = (228, 228, 228)
BUTTON_COLOR = (250, 250, 250)
BUTTON_HOVER_COLOR = (220, 232, 250)
BUTTON_BORDER_COLOR = (170, 170, 170)
TOOLTIP_BG_COLOR = (255, 255, 225)
TEXT_COLOR = (30, 30, 30)
