"""Main map editor class that coordinates all components."""
import logging
from typing import Any, Dict, Optional, Tuple

import pygame

from lanternmap.constants import (
    EditorView, TILE_SIZE, PALETTE_COLUMNS, FPS, WINDOW_SIZE,
    TOOLBAR_HEIGHT, PALETTE_WIDTH, DIVIDER_WIDTH, CANVAS_TOP_SPACER, SCROLL_STEP,
    BG_COLOR, DIVIDER_COLOR, ERROR_TEXT_COLOR
)
from lanternmap.core.placement import PlacementCanvas
from lanternmap.core.tiles import TileCache
from lanternmap.ui.assets import load_sprite_sheet
from lanternmap.ui.editor.editor_canvas import EditorCanvas
from lanternmap.ui.editor.tile_palette import TilePalette
from lanternmap.ui.editor.toolbar import Toolbar
from lanternmap.utils.fonts import get_font
from lanternmap.utils.language import get_language
from lanternmap.utils.settings import Settings

logger = logging.getLogger(__name__)


class MapEditor:
    """Main map editor class."""

    def __init__(self, screen: Optional[pygame.Surface] = None,
                 sheet: Optional[pygame.Surface] = None,
                 tile_size: Tuple[int, int] = TILE_SIZE,
                 palette_columns: int = PALETTE_COLUMNS,
                 fps: int = FPS) -> None:
        """
        Initialize the map editor.

        Args:
            screen: Optional pygame surface. If None, creates its own.
            sheet: Sprite sheet to slice. None shows the "image not found" view.
            tile_size: (width, height) of a tile
            palette_columns: Number of tile columns in the palette
            fps: Frame rate cap for the editor loop
        """
        # Initialize pygame if not already done
        if not pygame.get_init():
            pygame.init()

        # Create screen if not provided
        self.owns_screen = screen is None
        if self.owns_screen:
            self.screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
            pygame.display.set_caption(get_language().get('editor.title', 'Lantern Map Editor'))
        else:
            self.screen = screen

        self.sheet = sheet
        self.tile_size = tile_size
        self.fps = fps
        self.running = True

        self.view = EditorView.GRID if sheet is not None else EditorView.IMAGE_NOT_FOUND

        # Fonts
        self.message_font = get_font(28)

        self.tile_cache = TileCache()
        self.placement = PlacementCanvas(tile_size)
        self.toolbar: Optional[Toolbar] = None
        self.palette: Optional[TilePalette] = None
        self.canvas: Optional[EditorCanvas] = None

        if self.view == EditorView.GRID:
            screen_width, screen_height = self.screen.get_size()
            self.toolbar = Toolbar(0, 0, screen_width, TOOLBAR_HEIGHT)
            self.palette = TilePalette(0, TOOLBAR_HEIGHT, PALETTE_WIDTH, screen_height - TOOLBAR_HEIGHT,
                                       sheet, tile_size, self.tile_cache, palette_columns)
            canvas_x = PALETTE_WIDTH + DIVIDER_WIDTH
            canvas_y = TOOLBAR_HEIGHT + CANVAS_TOP_SPACER
            self.canvas = EditorCanvas(canvas_x, canvas_y,
                                       screen_width - canvas_x, screen_height - canvas_y,
                                       self.placement)
        else:
            logger.warning("Editor started without a sprite sheet")

    @classmethod
    def from_settings(cls, settings: Settings,
                      screen: Optional[pygame.Surface] = None) -> 'MapEditor':
        """
        Build an editor from settings, loading the configured sprite sheet.

        Args:
            settings: Editor settings
            screen: Optional pygame surface. If None, the editor creates its own.

        Returns:
            MapEditor instance
        """
        if not pygame.get_init():
            pygame.init()
        owns_screen = screen is None
        if owns_screen:
            screen = pygame.display.set_mode(settings.get_resolution(), pygame.RESIZABLE)
            pygame.display.set_caption(get_language().get('editor.title', 'Lantern Map Editor'))

        sheet = load_sprite_sheet(settings.get('sheet.name'), settings.get('sheet.assets_dir'))
        editor = cls(screen, sheet,
                     tile_size=settings.get_tile_size(),
                     palette_columns=int(settings.get('palette.columns', PALETTE_COLUMNS)),
                     fps=int(settings.get('video.fps', FPS)))
        editor.owns_screen = owns_screen
        return editor

    def run(self) -> Optional[Dict[str, Any]]:
        """
        Run the map editor loop.

        Returns:
            Result dict or None
        """
        clock = pygame.time.Clock()

        # Clear any residual events
        pygame.event.clear()

        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    return {'type': 'exit'}

                self.handle_event(event)

            self.draw()
            clock.tick(self.fps)

        return None

    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Handle pygame event.

        Args:
            event: Pygame event
        """
        if event.type == pygame.VIDEORESIZE:
            self._handle_resize(event.w, event.h)
            return

        # Nothing to interact with without a sheet
        if self.view != EditorView.GRID:
            return

        if event.type == pygame.MOUSEMOTION:
            self._handle_mouse_motion(event)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._handle_mouse_down(event)
        elif event.type == pygame.MOUSEBUTTONUP:
            self._handle_mouse_up(event)

    def _handle_resize(self, width: int, height: int) -> None:
        if self.owns_screen:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.layout(width, height)

    def layout(self, width: int, height: int) -> None:
        """Fit the components to a new window size."""
        if self.view != EditorView.GRID:
            return
        self.toolbar.resize(width)
        self.palette.resize(height - TOOLBAR_HEIGHT)
        self.canvas.resize(width - self.canvas.x, height - self.canvas.y)

    def _handle_mouse_motion(self, event: pygame.event.Event) -> None:
        """
        Handle mouse motion event.

        Args:
            event: Pygame event
        """
        self.toolbar.handle_mouse_move(event.pos)
        self.palette.handle_mouse_move(event.pos)

        if self.placement.is_dragging:
            self.canvas.handle_drag_motion(event.pos)

    def _handle_mouse_down(self, event: pygame.event.Event) -> None:
        """
        Handle mouse button down event.

        Args:
            event: Pygame event
        """
        if event.button == 1:  # Left click
            if self.toolbar.handle_click(event.pos):
                return

            tile = self.palette.handle_mouse_down(event.pos)
            if tile is not None:
                self.placement.begin_drag(tile)
                self.canvas.handle_drag_motion(event.pos)

        elif event.button == 4:  # Mouse wheel up
            if self.palette.rect.collidepoint(event.pos):
                self.palette.handle_scroll(-SCROLL_STEP)

        elif event.button == 5:  # Mouse wheel down
            if self.palette.rect.collidepoint(event.pos):
                self.palette.handle_scroll(SCROLL_STEP)

    def _handle_mouse_up(self, event: pygame.event.Event) -> None:
        """
        Handle mouse button up event.

        Args:
            event: Pygame event
        """
        if event.button == 1:  # Left click
            self.canvas.handle_drop(event.pos)

    def draw(self) -> None:
        """Draw the map editor."""
        self.screen.fill(BG_COLOR)

        if self.view == EditorView.IMAGE_NOT_FOUND:
            self._draw_image_not_found()
        else:
            self.palette.draw(self.screen)
            divider_x = self.palette.x + self.palette.width
            pygame.draw.line(self.screen, DIVIDER_COLOR,
                             (divider_x, TOOLBAR_HEIGHT), (divider_x, self.screen.get_height()),
                             DIVIDER_WIDTH)
            self.canvas.draw(self.screen)
            self.toolbar.draw(self.screen)
            self.toolbar.draw_tooltip(self.screen)

        pygame.display.flip()

    def _draw_image_not_found(self) -> None:
        message = get_language().get('editor.image_not_found', 'Image not found')
        text_surface = self.message_font.render(message, True, ERROR_TEXT_COLOR)
        text_rect = text_surface.get_rect(center=self.screen.get_rect().center)
        self.screen.blit(text_surface, text_rect)
