"""
Tile extraction from sprite sheets.

A sprite sheet is a single surface holding fixed-size tiles laid out in a
grid. Extraction walks the grid row by row and crops one sub-surface per
cell, so the position of a tile in the returned list matches
``row * columns + col``.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import pygame

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Tile:
    """A single tile cropped from a sprite sheet."""
    index: int
    row: int
    col: int
    surface: pygame.Surface = field(repr=False)

    @property
    def label(self) -> str:
        """1-based label shown under the tile in the palette."""
        return str(self.index + 1)

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()


def _validate_tile_size(tile_size: Tuple[int, int]) -> Tuple[int, int]:
    tile_width, tile_height = tile_size
    if tile_width <= 0 or tile_height <= 0:
        raise ValueError(f"Tile size must be positive, got {tile_width}x{tile_height}")
    return tile_width, tile_height


def sheet_dimensions(image: pygame.Surface, tile_size: Tuple[int, int]) -> Tuple[int, int]:
    """
    Get the number of whole tiles that fit in a sheet.

    Partial trailing rows and columns are not counted.

    Args:
        image: Sprite sheet surface
        tile_size: (width, height) of a tile in pixels

    Returns:
        Tuple of (rows, columns)
    """
    tile_width, tile_height = _validate_tile_size(tile_size)
    width, height = image.get_size()
    return height // tile_height, width // tile_width


def extract_tiles(image: pygame.Surface, tile_size: Tuple[int, int]) -> List[Tile]:
    """
    Slice a sprite sheet into tiles in row-major order.

    A cell that cannot be cropped is skipped, so the result may be shorter
    than ``rows * columns``. Surviving tiles keep the index of their cell.

    Args:
        image: Sprite sheet surface
        tile_size: (width, height) of a tile in pixels

    Returns:
        List of tiles ordered by ``row * columns + col``
    """
    tile_width, tile_height = _validate_tile_size(tile_size)
    rows, columns = sheet_dimensions(image, tile_size)

    tiles = []
    for row in range(rows):
        for col in range(columns):
            rect = pygame.Rect(col * tile_width, row * tile_height, tile_width, tile_height)
            try:
                surface = image.subsurface(rect).copy()
            except (ValueError, pygame.error) as e:
                logger.debug("Skipping tile at row %d, col %d: %s", row, col, e)
                continue
            tiles.append(Tile(row * columns + col, row, col, surface))

    logger.debug("Extracted %d tiles (%dx%d grid) from %dx%d sheet",
                 len(tiles), columns, rows, image.get_width(), image.get_height())
    return tiles


class TileCache:
    """
    Caches extraction results per (sheet, tile size).

    Repeated lookups return the same Tile objects, so tiles can be
    compared by identity across palette redraws.
    """

    def __init__(self) -> None:
        self._entries: Dict[Tuple[pygame.Surface, Tuple[int, int]], List[Tile]] = {}

    def get(self, image: pygame.Surface, tile_size: Tuple[int, int]) -> List[Tile]:
        """
        Get the tiles for a sheet, extracting them on first use.

        Args:
            image: Sprite sheet surface
            tile_size: (width, height) of a tile in pixels

        Returns:
            Cached list of tiles
        """
        key = (image, tuple(tile_size))
        tiles = self._entries.get(key)
        if tiles is None:
            tiles = extract_tiles(image, tile_size)
            self._entries[key] = tiles
        return tiles

    def clear(self) -> None:
        """Drop all cached extractions."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
