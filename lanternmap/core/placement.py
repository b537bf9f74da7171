"""
Grid-snapped tile placement.

Holds the tiles placed on the workspace and the drag gesture that places
them. A drop snaps to a grid cell center and is kept only if no placed
tile already sits at exactly that position.
"""
import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from lanternmap.core.tiles import Tile

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass(frozen=True)
class PlacedTile:
    """A tile committed to the canvas, centered on its grid cell."""
    tile: Tile
    position: Point


@dataclass(frozen=True)
class GridCell:
    """One cell of the workspace grid."""
    row: int
    col: int
    center: Point


@dataclass
class DragState:
    """Tile being dragged and where the pointer last was."""
    tile: Optional[Tile] = None
    position: Optional[Point] = None


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def snap_point(point: Point, tile_size: Tuple[int, int]) -> Point:
    """
    Snap a drop point to a grid cell center.

    Args:
        point: Drop point (x, y) in canvas pixels
        tile_size: (width, height) of a grid cell

    Returns:
        Snapped (x, y) as floats
    """
    tile_width, tile_height = tile_size
    x, y = point
    snapped_x = round_half_away(x / tile_width) * tile_width + tile_width / 2
    snapped_y = round_half_away(y / tile_height) * tile_height + tile_height / 2
    return (float(snapped_x), float(snapped_y))


def grid_dimensions(width: int, height: int, tile_size: Tuple[int, int]) -> Tuple[int, int]:
    """
    Get how many whole cells fit in an area.

    Returns:
        Tuple of (rows, columns)
    """
    tile_width, tile_height = tile_size
    return int(height // tile_height), int(width // tile_width)


def grid_cells(width: int, height: int, tile_size: Tuple[int, int]) -> Iterator[GridCell]:
    """
    Iterate over the cells of a grid, row by row.

    Args:
        width: Area width in pixels
        height: Area height in pixels
        tile_size: (width, height) of a grid cell

    Yields:
        GridCell for every (row, col) pair
    """
    tile_width, tile_height = tile_size
    rows, columns = grid_dimensions(width, height, tile_size)
    for row in range(rows):
        for col in range(columns):
            center = (col * tile_width + tile_width / 2, row * tile_height + tile_height / 2)
            yield GridCell(row, col, center)


class PlacementCanvas:
    """Placed tiles plus the idle/dragging lifecycle that adds to them."""

    def __init__(self, tile_size: Tuple[int, int]) -> None:
        """
        Initialize an empty canvas.

        Args:
            tile_size: (width, height) of a grid cell
        """
        tile_width, tile_height = tile_size
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError(f"Tile size must be positive, got {tile_width}x{tile_height}")
        self.tile_size = (tile_width, tile_height)
        self.drag = DragState()
        self._placed: List[PlacedTile] = []

    @property
    def placed_tiles(self) -> Tuple[PlacedTile, ...]:
        return tuple(self._placed)

    @property
    def is_dragging(self) -> bool:
        return self.drag.tile is not None

    def begin_drag(self, tile: Tile) -> None:
        """Start dragging a tile. No position until the first update."""
        self.drag = DragState(tile=tile)

    def update_drag(self, point: Point) -> None:
        """Move the drag preview. Does nothing while idle."""
        if self.drag.tile is None:
            return
        self.drag.position = point

    def end_drag(self, point: Point) -> Optional[PlacedTile]:
        """
        Drop the dragged tile.

        Args:
            point: Drop point (x, y) in canvas pixels

        Returns:
            The new PlacedTile, or None if the cell was taken or nothing
            was being dragged
        """
        tile = self.drag.tile
        self.drag = DragState()
        if tile is None:
            return None

        snapped = snap_point(point, self.tile_size)
        if self.is_occupied(snapped):
            logger.debug("Drop at %s rejected, cell %s is occupied", point, snapped)
            return None

        placed = PlacedTile(tile, snapped)
        self._placed.append(placed)
        logger.debug("Placed tile %d at %s", tile.index, snapped)
        return placed

    def cancel_drag(self) -> None:
        """Abandon the current drag without placing anything."""
        self.drag = DragState()

    def tile_at(self, position: Point) -> Optional[PlacedTile]:
        for placed in self._placed:
            if placed.position == position:
                return placed
        return None

    def is_occupied(self, position: Point) -> bool:
        return self.tile_at(position) is not None

    def clear(self) -> None:
        """Remove every placed tile and reset the drag."""
        self._placed.clear()
        self.drag = DragState()

    def __len__(self) -> int:
        return len(self._placed)
