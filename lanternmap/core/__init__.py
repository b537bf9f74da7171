"""
Core editor logic, independent of the UI.
"""
from lanternmap.core.tiles import Tile, TileCache, extract_tiles, sheet_dimensions
from lanternmap.core.placement import (
    PlacedTile, PlacementCanvas, GridCell, snap_point, grid_cells, grid_dimensions
)

__all__ = [
    'Tile', 'TileCache', 'extract_tiles', 'sheet_dimensions',
    'PlacedTile', 'PlacementCanvas', 'GridCell', 'snap_point', 'grid_cells', 'grid_dimensions',
]
