"""Draws the welcome, play and game-over screens from a state snapshot."""

import logging
from typing import Dict, Optional

import pygame

from . import config
from .geometry import GridGeometry
from .models import Difficulty, GameMode
from .state import Snapshot

logger = logging.getLogger(__name__)


def load_font(size: int) -> pygame.font.Font:
    """System font if available, otherwise pygame's bundled one"""
    try:
        return pygame.font.SysFont(config.FONT_NAME, size, bold=True)
    except (pygame.error, OSError) as e:
        logger.warning("SysFont %r unavailable (%s), using default font", config.FONT_NAME, e)
        return pygame.font.Font(None, size)


def difficulty_buttons(font: pygame.font.Font, width: int, height: int) -> Dict[Difficulty, pygame.Rect]:
    """Lay out the SLUG / WORM / PYTHON buttons as one centred row.

    Computed once per window; the same rects are used for drawing and for
    mouse hit-testing.
    """
    widths = [font.size(d.label)[0] + 2 * config.BUTTON_PADDING for d in Difficulty]
    row_width = sum(widths) + config.BUTTON_SPACING * (len(widths) - 1)
    x = (width - row_width) // 2
    y = height // 2 + 40

    buttons = {}
    for difficulty, button_width in zip(Difficulty, widths):
        buttons[difficulty] = pygame.Rect(x, y, button_width, config.BUTTON_HEIGHT)
        x += button_width + config.BUTTON_SPACING
    return buttons


class Renderer:
    """Reads snapshots and draws them; never touches game state"""

    def __init__(self, geometry: GridGeometry):
        self.geometry = geometry
        self.font_title = load_font(config.TITLE_FONT_SIZE)
        self.font_button = load_font(config.BUTTON_FONT_SIZE)
        self.font_score = load_font(config.SCORE_FONT_SIZE)
        self.buttons = difficulty_buttons(self.font_button, geometry.width, geometry.height)

    def draw(self, surface: pygame.Surface, snapshot: Snapshot, hovered: Optional[Difficulty] = None):
        """Draw everything"""
        surface.fill(config.BACKGROUND_COLOR)

        if snapshot.mode is GameMode.WELCOME:
            self.draw_welcome(surface, hovered)
        elif snapshot.mode is GameMode.GAME_OVER:
            self.draw_game_over(surface, snapshot)
        else:
            self.draw_playing(surface, snapshot)

        self.draw_scores(surface, snapshot)

    def draw_welcome(self, surface: pygame.Surface, hovered: Optional[Difficulty]):
        height = self.geometry.height
        self.draw_centered(surface, "snake", self.font_title, height // 2 - 60)
        self.draw_centered(surface, "CHOOSE LEVEL:", self.font_score, height // 2)

        for difficulty, rect in self.buttons.items():
            is_hovered = difficulty is hovered
            fill = config.TEXT_COLOR if is_hovered else config.BACKGROUND_COLOR
            ink = config.BACKGROUND_COLOR if is_hovered else config.TEXT_COLOR
            pygame.draw.rect(surface, fill, rect)
            label = self.font_button.render(difficulty.label, True, ink)
            surface.blit(label, label.get_rect(center=rect.center))

    def draw_playing(self, surface: pygame.Surface, snapshot: Snapshot):
        pygame.draw.rect(surface, config.FOOD_COLOR, self.geometry.cell_rect(snapshot.food))
        for cell in snapshot.snake:
            pygame.draw.rect(surface, config.SNAKE_COLOR, self.geometry.cell_rect(cell))

    def draw_game_over(self, surface: pygame.Surface, snapshot: Snapshot):
        height = self.geometry.height
        headline = "best score!" if snapshot.new_high_score else "game over!"
        self.draw_centered(surface, headline, self.font_title, height // 2 - 30)
        self.draw_centered(surface, "Press Space to Restart", self.font_score, height // 2 + 45)

    def draw_scores(self, surface: pygame.Surface, snapshot: Snapshot):
        """Score bottom-left, high score bottom-right, inside the reserved row"""
        bar = pygame.Rect(self.geometry.score_bar_rect())

        score_surface = self.font_score.render(f"Score: {snapshot.score}", True, config.TEXT_COLOR)
        surface.blit(score_surface, score_surface.get_rect(midleft=(bar.left + 10, bar.centery)))

        high_surface = self.font_score.render(f"High Score: {snapshot.high_score}", True, config.TEXT_COLOR)
        surface.blit(high_surface, high_surface.get_rect(midright=(bar.right - 10, bar.centery)))

    def draw_centered(self, surface: pygame.Surface, text: str, font: pygame.font.Font, center_y: int):
        text_surface = font.render(text, True, config.TEXT_COLOR)
        surface.blit(text_surface, text_surface.get_rect(center=(self.geometry.width // 2, center_y)))
