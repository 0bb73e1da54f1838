"""Maps pygame keyboard and mouse events onto game commands."""

from typing import Dict, Optional

import pygame

from .commands import Command, Restart, SelectDifficulty, SetDirection
from .models import Difficulty, Direction, GameMode

DIFFICULTY_KEYS = {
    pygame.K_s: Difficulty.SLUG,
    pygame.K_w: Difficulty.WORM,
    pygame.K_p: Difficulty.PYTHON,
}

DIRECTION_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class InputTranslator:
    """Turns raw events into commands for the current screen.

    Also tracks which difficulty button the pointer is over, which is pure
    presentation state and never reaches the game core.
    """

    def __init__(self, buttons: Dict[Difficulty, pygame.Rect]):
        self.buttons = buttons
        self.hovered: Optional[Difficulty] = None

    def button_at(self, pos) -> Optional[Difficulty]:
        for difficulty, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return difficulty
        return None

    def translate(self, event: pygame.event.Event, mode: GameMode) -> Optional[Command]:
        if mode is not GameMode.WELCOME:
            self.hovered = None

        if event.type == pygame.KEYDOWN:
            return self._translate_key(event.key, mode)

        if mode is GameMode.WELCOME:
            if event.type == pygame.MOUSEMOTION:
                self.hovered = self.button_at(event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                difficulty = self.button_at(event.pos)
                if difficulty is not None:
                    self.hovered = None
                    return SelectDifficulty(difficulty)
        return None

    def _translate_key(self, key: int, mode: GameMode) -> Optional[Command]:
        if mode is GameMode.WELCOME:
            difficulty = DIFFICULTY_KEYS.get(key)
            if difficulty is not None:
                self.hovered = None
                return SelectDifficulty(difficulty)
        elif mode is GameMode.PLAYING:
            direction = DIRECTION_KEYS.get(key)
            if direction is not None:
                return SetDirection(direction)
        elif key == pygame.K_SPACE:
            return Restart()
        return None
