"""Tile palette component for the map editor."""
from typing import List, Optional, Tuple

import pygame

from lanternmap.constants import (
    PALETTE_COLUMNS, PALETTE_SPACING, PALETTE_PADDING, PALETTE_LABEL_HEIGHT,
    PANEL_COLOR, TILE_BORDER_COLOR, TILE_HOVER_COLOR, LABEL_COLOR
)
from lanternmap.core.tiles import Tile, TileCache
from lanternmap.utils.fonts import get_font


class TilePalette:
    """Scrollable grid of the tiles sliced from the sprite sheet."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 sheet: pygame.Surface, tile_size: Tuple[int, int],
                 tile_cache: Optional[TileCache] = None,
                 columns: int = PALETTE_COLUMNS) -> None:
        """
        Initialize the tile palette.

        Args:
            x: X position
            y: Y position
            width: Width of the palette
            height: Height of the palette
            sheet: Sprite sheet surface the tiles are cut from
            tile_size: (width, height) of a tile
            tile_cache: Shared extraction cache. A private one is created if None.
            columns: Number of tile columns
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.sheet = sheet
        self.tile_size = tile_size
        self.tile_cache = tile_cache if tile_cache is not None else TileCache()
        self.columns = max(1, columns)

        # Mouse state
        self.hover_index: Optional[int] = None  # Position in self.tiles
        self.scroll_offset = 0

        # Layout
        self.spacing = PALETTE_SPACING
        self.padding = PALETTE_PADDING
        self.label_height = PALETTE_LABEL_HEIGHT
        self.border_width = 2

        # Fonts
        self.label_font = get_font(14)

    @property
    def tiles(self) -> List[Tile]:
        return self.tile_cache.get(self.sheet, self.tile_size)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def _column_width(self) -> int:
        usable = self.width - 2 * self.padding - (self.columns - 1) * self.spacing
        return max(self.tile_size[0], usable // self.columns)

    def _item_height(self) -> int:
        # 2 px top padding, the tile, a gap, then the caption
        return 2 + self.tile_size[1] + 4 + self.label_height

    def content_height(self) -> int:
        """Height of all palette rows, including padding."""
        rows = -(-len(self.tiles) // self.columns)
        if rows == 0:
            return 2 * self.padding
        return 2 * self.padding + rows * self._item_height() + (rows - 1) * self.spacing

    def tile_rect(self, position: int) -> pygame.Rect:
        """
        Get the on-screen rectangle of a tile image.

        Args:
            position: Position of the tile in the palette

        Returns:
            Rectangle in window coordinates, accounting for scrolling
        """
        tile_width, tile_height = self.tile_size
        row, col = divmod(position, self.columns)
        column_width = self._column_width()
        cell_x = self.x + self.padding + col * (column_width + self.spacing)
        cell_y = self.y + self.padding + row * (self._item_height() + self.spacing) - self.scroll_offset
        tile_x = cell_x + (column_width - tile_width) // 2
        return pygame.Rect(tile_x, cell_y + 2, tile_width, tile_height)

    def tile_index_at(self, mouse_pos: Tuple[int, int]) -> Optional[int]:
        """
        Find the palette position of the tile under the mouse.

        Returns:
            Position in ``tiles``, or None if the mouse is not over a tile
        """
        if not self.rect.collidepoint(mouse_pos):
            return None
        for position in range(len(self.tiles)):
            if self.tile_rect(position).collidepoint(mouse_pos):
                return position
        return None

    def handle_mouse_move(self, mouse_pos: Tuple[int, int]) -> bool:
        """
        Track which tile is hovered.

        Returns:
            True if the mouse is over a tile, False otherwise
        """
        self.hover_index = self.tile_index_at(mouse_pos)
        return self.hover_index is not None

    def handle_mouse_down(self, mouse_pos: Tuple[int, int]) -> Optional[Tile]:
        """
        Pick up the tile under the mouse.

        Returns:
            The tile to start dragging, or None
        """
        position = self.tile_index_at(mouse_pos)
        if position is None:
            return None
        return self.tiles[position]

    def handle_scroll(self, dy: int) -> None:
        """Scroll the palette by dy pixels, clamped to its content."""
        max_offset = max(0, self.content_height() - self.height)
        self.scroll_offset = max(0, min(max_offset, self.scroll_offset + dy))

    def resize(self, height: int) -> None:
        self.height = height
        self.handle_scroll(0)

    def draw(self, screen: pygame.Surface) -> None:
        """
        Draw the palette.

        Args:
            screen: Pygame surface to draw on
        """
        panel_rect = self.rect
        pygame.draw.rect(screen, PANEL_COLOR, panel_rect)

        previous_clip = screen.get_clip()
        screen.set_clip(panel_rect)

        for position, tile in enumerate(self.tiles):
            tile_rect = self.tile_rect(position)
            caption_top = tile_rect.bottom + 4
            if caption_top + self.label_height < panel_rect.top or tile_rect.top > panel_rect.bottom:
                continue

            screen.blit(tile.surface, tile_rect)

            # Blue outline on hover
            border_color = TILE_HOVER_COLOR if self.hover_index == position else TILE_BORDER_COLOR
            pygame.draw.rect(screen, border_color, tile_rect.inflate(2, 2), width=self.border_width)

            label_surface = self.label_font.render(tile.label, True, LABEL_COLOR)
            label_rect = label_surface.get_rect(centerx=tile_rect.centerx, y=caption_top)
            screen.blit(label_surface, label_rect)

        screen.set_clip(previous_clip)
