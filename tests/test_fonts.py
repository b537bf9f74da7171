"""Tests for font utility module."""
import pytest
import pygame
from lanternmap.utils.fonts import get_font, _font_cache


@pytest.fixture
def pygame_init():
    """Initialize pygame for tests."""
    pygame.init()
    # Clear cache before each test to avoid test interference
    _font_cache.clear()
    yield
    pygame.quit()


def test_get_font_returns_font_object(pygame_init):
    """Test that get_font returns a pygame Font object."""
    font = get_font(24)
    assert isinstance(font, pygame.font.Font)


def test_get_font_caching(pygame_init):
    """Test that fonts are cached and reused."""
    font1 = get_font(24)
    font2 = get_font(24)
    assert font1 is font2


def test_get_font_different_sizes(pygame_init):
    """Test that different sizes return different font objects."""
    assert get_font(12) is not get_font(48)


def test_font_renders_labels(pygame_init):
    """Test that palette labels render."""
    surface = get_font(14).render("42", True, (60, 60, 60))
    assert isinstance(surface, pygame.Surface)
    assert surface.get_width() > 0
