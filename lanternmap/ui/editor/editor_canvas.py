"""Workspace canvas component."""
from typing import Optional, Tuple

import pygame

from lanternmap.constants import BG_COLOR, GRID_COLOR
from lanternmap.core.placement import PlacementCanvas, PlacedTile, Point, grid_cells


class EditorCanvas:
    """Grid workspace that tiles are dropped onto."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 placement: PlacementCanvas) -> None:
        """
        Initialize the editor canvas.

        Args:
            x: X position
            y: Y position
            width: Width of the canvas
            height: Height of the canvas
            placement: Placement model holding placed tiles and drag state
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.placement = placement

        self.bg_color = BG_COLOR
        self.grid_color = GRID_COLOR

    @property
    def tile_size(self) -> Tuple[int, int]:
        return self.placement.tile_size

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def contains(self, mouse_pos: Tuple[int, int]) -> bool:
        """Check if a window position is over the canvas."""
        return self.rect.collidepoint(mouse_pos)

    def to_local(self, mouse_pos: Tuple[int, int]) -> Point:
        """Convert a window position to canvas pixels."""
        return (mouse_pos[0] - self.x, mouse_pos[1] - self.y)

    def to_window(self, point: Point) -> Tuple[int, int]:
        """Convert canvas pixels to a window position."""
        return (int(round(point[0] + self.x)), int(round(point[1] + self.y)))

    def handle_drag_motion(self, mouse_pos: Tuple[int, int]) -> None:
        """Move the drag preview to follow the mouse."""
        self.placement.update_drag(self.to_local(mouse_pos))

    def handle_drop(self, mouse_pos: Tuple[int, int]) -> Optional[PlacedTile]:
        """
        Finish a drag.

        Drops outside the canvas are abandoned.

        Returns:
            The placed tile, or None if nothing was placed
        """
        if not self.placement.is_dragging:
            return None
        if not self.contains(mouse_pos):
            self.placement.cancel_drag()
            return None
        return self.placement.end_drag(self.to_local(mouse_pos))

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)

    def draw(self, screen: pygame.Surface) -> None:
        """
        Draw the canvas.

        Args:
            screen: Pygame surface to draw on
        """
        canvas_rect = self.rect
        pygame.draw.rect(screen, self.bg_color, canvas_rect)

        previous_clip = screen.get_clip()
        screen.set_clip(canvas_rect)
        self._draw_grid(screen)
        self._draw_placed_tiles(screen)
        screen.set_clip(previous_clip)

        # The preview follows the mouse even outside the canvas
        self._draw_drag_preview(screen)

    def _draw_grid(self, screen: pygame.Surface) -> None:
        """One outline per cell, slightly larger than the tile."""
        tile_width, tile_height = self.tile_size
        for cell in grid_cells(self.width, self.height, self.tile_size):
            outline = pygame.Rect(0, 0, tile_width + 2, tile_height + 2)
            outline.center = self.to_window(cell.center)
            pygame.draw.rect(screen, self.grid_color, outline, width=1)

    def _draw_placed_tiles(self, screen: pygame.Surface) -> None:
        for placed in self.placement.placed_tiles:
            self._blit_centered(screen, placed.tile.surface, placed.position)

    def _draw_drag_preview(self, screen: pygame.Surface) -> None:
        drag = self.placement.drag
        if drag.tile is None or drag.position is None:
            return
        self._blit_centered(screen, drag.tile.surface, drag.position)

    def _blit_centered(self, screen: pygame.Surface, surface: pygame.Surface, point: Point) -> None:
        target = surface.get_rect(center=self.to_window(point))
        screen.blit(surface, target)
