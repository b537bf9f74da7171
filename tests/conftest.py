"""Pytest configuration and shared fixtures for testing."""
import os

import pytest
import pygame

from lanternmap.core.tiles import Tile
from lanternmap.utils import fonts

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

# One distinct color per cell, row-major
CELL_COLORS = [
    (200, 40, 40), (40, 200, 40), (40, 40, 200), (200, 200, 40),
    (200, 40, 200), (40, 200, 200), (120, 60, 30), (30, 60, 120),
    (90, 90, 90), (250, 150, 50), (150, 250, 50), (50, 150, 250),
]


def _make_sheet(width, height, tile_size=(32, 32)):
    """Create a sheet whose whole cells are filled with CELL_COLORS in order."""
    tile_width, tile_height = tile_size
    sheet = pygame.Surface((width, height))
    sheet.fill((0, 0, 0))
    columns = width // tile_width
    for row in range(height // tile_height):
        for col in range(columns):
            color = CELL_COLORS[(row * columns + col) % len(CELL_COLORS)]
            sheet.fill(color, pygame.Rect(col * tile_width, row * tile_height,
                                          tile_width, tile_height))
    return sheet


@pytest.fixture
def dummy_display():
    """Set up dummy display for headless testing."""
    os.environ['SDL_VIDEODRIVER'] = 'dummy'
    os.environ['SDL_AUDIODRIVER'] = 'dummy'
    pygame.init()
    # Fonts from an earlier pygame session are no longer valid
    fonts._font_cache.clear()
    screen = pygame.display.set_mode((1024, 700))
    yield screen
    pygame.quit()


@pytest.fixture
def make_sheet(dummy_display):
    """Factory for sheets filled with one color per cell."""
    return _make_sheet


@pytest.fixture
def cell_colors():
    """Cell colors used by make_sheet, row-major."""
    return CELL_COLORS


@pytest.fixture
def quad_sheet(dummy_display):
    """A 64x64 sheet holding four 32x32 tiles."""
    return _make_sheet(64, 64)


@pytest.fixture
def grass_tile(dummy_display):
    """Create a single green tile."""
    surface = pygame.Surface((32, 32))
    surface.fill((40, 200, 40))
    return Tile(0, 0, 0, surface)


@pytest.fixture
def water_tile(dummy_display):
    """Create a single blue tile."""
    surface = pygame.Surface((32, 32))
    surface.fill((40, 40, 200))
    return Tile(1, 0, 1, surface)
