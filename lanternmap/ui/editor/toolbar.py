"""Window toolbar with the editor's actions."""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import pygame

from lanternmap.constants import (
    TOOLBAR_COLOR, BUTTON_COLOR, BUTTON_HOVER_COLOR, BUTTON_BORDER_COLOR,
    TOOLTIP_BG_COLOR, TEXT_COLOR, DIVIDER_COLOR
)
from lanternmap.utils.fonts import get_font
from lanternmap.utils.language import get_language

logger = logging.getLogger(__name__)


@dataclass
class ToolbarButton:
    """A toolbar button and the action it triggers."""
    name: str
    label: str
    help_text: str
    callback: Callable[[], None]
    rect: Optional[pygame.Rect] = None


def export_map() -> None:
    """Export is not implemented; the action is only logged."""
    logger.info("Export Map button clicked")


def open_settings() -> None:
    logger.info("Settings tapped")


class Toolbar:
    """Row of buttons along the top of the window."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        """
        Initialize the toolbar.

        Args:
            x: X position
            y: Y position
            width: Width of the toolbar
            height: Height of the toolbar
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height

        lang = get_language()
        self.buttons: List[ToolbarButton] = [
            ToolbarButton('settings',
                          lang.get('toolbar.settings', 'Settings'),
                          lang.get('toolbar.settings_help', 'Help me'),
                          open_settings),
            ToolbarButton('export_map',
                          lang.get('toolbar.export_map', 'Export Map'),
                          lang.get('toolbar.export_map_help', 'Export Map'),
                          export_map),
        ]

        # Mouse state
        self.hover_button: Optional[str] = None
        self.mouse_pos: Tuple[int, int] = (0, 0)

        # Fonts
        self.button_font = get_font(18)
        self.tooltip_font = get_font(14)

        self.padding = 6
        self._layout()

    def _layout(self) -> None:
        """Right-align the buttons, primary action last."""
        right = self.x + self.width - self.padding
        for button in reversed(self.buttons):
            text_width, _ = self.button_font.size(button.label)
            button_width = text_width + 4 * self.padding
            button_height = self.height - 2 * self.padding
            button.rect = pygame.Rect(right - button_width, self.y + self.padding,
                                      button_width, button_height)
            right = button.rect.left - self.padding

    def resize(self, width: int) -> None:
        self.width = width
        self._layout()

    def button_at(self, mouse_pos: Tuple[int, int]) -> Optional[ToolbarButton]:
        for button in self.buttons:
            if button.rect is not None and button.rect.collidepoint(mouse_pos):
                return button
        return None

    def handle_mouse_move(self, mouse_pos: Tuple[int, int]) -> bool:
        """
        Track the hovered button for highlighting and tooltips.

        Returns:
            True if a button is hovered
        """
        self.mouse_pos = mouse_pos
        button = self.button_at(mouse_pos)
        self.hover_button = button.name if button else None
        return button is not None

    def handle_click(self, mouse_pos: Tuple[int, int]) -> Optional[str]:
        """
        Run the action of the clicked button.

        Returns:
            Name of the triggered button, or None
        """
        button = self.button_at(mouse_pos)
        if button is None:
            return None
        button.callback()
        return button.name

    def draw(self, screen: pygame.Surface) -> None:
        """
        Draw the toolbar.

        Args:
            screen: Pygame surface to draw on
        """
        bar_rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(screen, TOOLBAR_COLOR, bar_rect)
        pygame.draw.line(screen, DIVIDER_COLOR, bar_rect.bottomleft, bar_rect.bottomright, 1)

        for button in self.buttons:
            is_hovered = self.hover_button == button.name
            pygame.draw.rect(screen, BUTTON_HOVER_COLOR if is_hovered else BUTTON_COLOR,
                             button.rect, border_radius=4)
            pygame.draw.rect(screen, BUTTON_BORDER_COLOR, button.rect, width=1, border_radius=4)

            text_surface = self.button_font.render(button.label, True, TEXT_COLOR)
            screen.blit(text_surface, text_surface.get_rect(center=button.rect.center))

    def draw_tooltip(self, screen: pygame.Surface) -> None:
        """Draw the help text of the hovered button. Call after everything else."""
        button = next((b for b in self.buttons if b.name == self.hover_button), None)
        if button is None:
            return

        text_surface = self.tooltip_font.render(button.help_text, True, TEXT_COLOR)
        tooltip_rect = text_surface.get_rect(x=self.mouse_pos[0] + 12, y=button.rect.bottom + 6)
        tooltip_rect.right = min(tooltip_rect.right, screen.get_width() - 4)
        bg_rect = tooltip_rect.inflate(8, 4)
        pygame.draw.rect(screen, TOOLTIP_BG_COLOR, bg_rect)
        pygame.draw.rect(screen, BUTTON_BORDER_COLOR, bg_rect, width=1)
        screen.blit(text_surface, tooltip_rect)
