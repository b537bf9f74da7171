"""Tests for grid-snapped tile placement."""
import pytest

from lanternmap.core.placement import (
    PlacementCanvas, PlacedTile, grid_cells, grid_dimensions, round_half_away, snap_point
)


class TestSnapPoint:
    """Test snapping drop points to cell centers."""

    def test_observed_drop(self):
        """Test (50, 18) with 32px cells."""
        # round(50/32) = 2 -> 80, round(18/32) = 1 -> 48
        assert snap_point((50, 18), (32, 32)) == (80.0, 48.0)

    @pytest.mark.parametrize("point", [
        (0, 0), (10, 10), (47.9, 3.2), (100, 200), (31, 33), (250.5, 12.25),
    ])
    def test_matches_formula(self, point):
        """Test snap is round(v / t) * t + t / 2 on both axes."""
        x, y = point
        expected = (round_half_away(x / 32) * 32 + 16, round_half_away(y / 24) * 24 + 12)
        assert snap_point(point, (32, 24)) == expected

    def test_half_rounds_away_from_zero(self):
        """Test exact half-cell drops round up, not to even."""
        assert snap_point((16, 16), (32, 32)) == (48.0, 48.0)
        assert snap_point((48, 80), (32, 32)) == (80.0, 112.0)

    def test_returns_floats(self):
        """Test odd tile sizes keep the half-pixel center."""
        assert snap_point((0, 0), (15, 15)) == (7.5, 7.5)

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1), (1.5, 2), (2.5, 3), (-0.5, -1), (-1.5, -2), (0.49, 0), (-0.49, 0),
    ])
    def test_round_half_away(self, value, expected):
        """Test ties go away from zero."""
        assert round_half_away(value) == expected


class TestGrid:
    """Test grid geometry."""

    def test_dimensions_floor(self):
        """Test partial cells are not counted."""
        assert grid_dimensions(100, 70, (32, 32)) == (2, 3)
        assert grid_dimensions(31, 31, (32, 32)) == (0, 0)

    def test_cell_centers(self):
        """Test one cell per (row, col) with centers at col*tw+tw/2, row*th+th/2."""
        cells = list(grid_cells(96, 64, (32, 32)))
        assert len(cells) == 6
        assert [(c.row, c.col) for c in cells[:4]] == [(0, 0), (0, 1), (0, 2), (1, 0)]
        assert cells[0].center == (16, 16)
        assert cells[5].center == (80, 48)

    def test_empty_area(self):
        """Test an area smaller than a cell has no cells."""
        assert list(grid_cells(10, 100, (32, 32))) == []


class TestPlacementCanvas:
    """Test the drag lifecycle and placement rules."""

    def test_initial_state(self):
        """Test a new canvas is empty and idle."""
        canvas = PlacementCanvas((32, 32))
        assert len(canvas) == 0
        assert canvas.placed_tiles == ()
        assert canvas.is_dragging is False

    def test_invalid_tile_size(self):
        """Test non-positive tile sizes are rejected."""
        with pytest.raises(ValueError):
            PlacementCanvas((0, 32))

    def test_begin_drag(self, grass_tile):
        """Test starting a drag records the tile without a position."""
        canvas = PlacementCanvas((32, 32))
        canvas.begin_drag(grass_tile)
        assert canvas.is_dragging is True
        assert canvas.drag.tile is grass_tile
        assert canvas.drag.position is None

    def test_update_drag_moves_preview_only(self, grass_tile):
        """Test drag updates never commit a placement."""
        canvas = PlacementCanvas((32, 32))
        canvas.begin_drag(grass_tile)
        canvas.update_drag((10, 12))
        canvas.update_drag((70, 90))
        assert canvas.drag.position == (70, 90)
        assert len(canvas) == 0

    def test_update_drag_when_idle(self):
        """Test updates are ignored without a drag."""
        canvas = PlacementCanvas((32, 32))
        canvas.update_drag((10, 12))
        assert canvas.drag.position is None
        assert canvas.is_dragging is False

    def test_end_drag_places_snapped_tile(self, grass_tile):
        """Test a drop commits the tile at the snapped position."""
        canvas = PlacementCanvas((32, 32))
        canvas.begin_drag(grass_tile)
        canvas.update_drag((50, 18))
        placed = canvas.end_drag((50, 18))

        assert placed == PlacedTile(grass_tile, (80.0, 48.0))
        assert canvas.placed_tiles == (placed,)
        assert canvas.is_dragging is False
        assert canvas.drag.position is None

    def test_same_cell_twice_keeps_one(self, grass_tile):
        """Test two drops snapping to the same point store one tile."""
        canvas = PlacementCanvas((32, 32))
        canvas.begin_drag(grass_tile)
        canvas.end_drag((50, 18))
        canvas.begin_drag(grass_tile)
        assert canvas.end_drag((60, 30)) is None
        assert len(canvas) == 1

    def test_different_tile_same_cell_rejected(self, grass_tile, water_tile):
        """Test a second tile cannot replace the first."""
        canvas = PlacementCanvas((32, 32))
        canvas.begin_drag(grass_tile)
        canvas.end_drag((50, 18))
        canvas.begin_drag(water_tile)
        assert canvas.end_drag((50, 18)) is None

        assert len(canvas) == 1
        assert canvas.placed_tiles[0].tile is grass_tile
        assert canvas.is_dragging is False

    def test_different_cells_both_placed(self, grass_tile, water_tile):
        """Test drops on distinct cells are all kept, in drop order."""
        canvas = PlacementCanvas((32, 32))
        canvas.begin_drag(grass_tile)
        canvas.end_drag((0, 0))
        canvas.begin_drag(water_tile)
        canvas.end_drag((64, 0))

        assert [p.position for p in canvas.placed_tiles] == [(16.0, 16.0), (80.0, 16.0)]
        assert canvas.tile_at((80.0, 16.0)).tile is water_tile
        assert canvas.is_occupied((16.0, 16.0))
        assert not canvas.is_occupied((48.0, 16.0))

    def test_same_tile_in_many_cells(self, grass_tile):
        """Test one palette tile can be placed repeatedly."""
        canvas = PlacementCanvas((32, 32))
        for x in (0, 64, 128):
            canvas.begin_drag(grass_tile)
            canvas.end_drag((x, 0))
        assert len(canvas) == 3

    def test_end_drag_when_idle(self):
        """Test a release without a drag is a no-op."""
        canvas = PlacementCanvas((32, 32))
        assert canvas.end_drag((50, 18)) is None
        assert len(canvas) == 0

    def test_cancel_drag(self, grass_tile):
        """Test cancelling leaves the canvas unchanged."""
        canvas = PlacementCanvas((32, 32))
        canvas.begin_drag(grass_tile)
        canvas.update_drag((5, 5))
        canvas.cancel_drag()
        assert canvas.is_dragging is False
        assert len(canvas) == 0

    def test_clear(self, grass_tile):
        """Test clearing removes placed tiles and the drag."""
        canvas = PlacementCanvas((32, 32))
        canvas.begin_drag(grass_tile)
        canvas.end_drag((0, 0))
        canvas.begin_drag(grass_tile)
        canvas.clear()
        assert len(canvas) == 0
        assert canvas.is_dragging is False

    def test_placed_tiles_is_read_only_view(self, grass_tile):
        """Test callers cannot append through placed_tiles."""
        canvas = PlacementCanvas((32, 32))
        canvas.begin_drag(grass_tile)
        canvas.end_drag((0, 0))
        assert isinstance(canvas.placed_tiles, tuple)
