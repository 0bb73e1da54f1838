"""Game state machine: screen mode, score, speed and the per-tick update."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .commands import Command, Restart, SelectDifficulty, SetDirection
from .food import FoodSpawner, NoFreeCellError
from .geometry import Board
from .models import (
    DEFAULT_DIFFICULTY,
    MAX_TICK_RATE,
    Cell,
    Difficulty,
    Direction,
    GameMode,
    MoveResult,
)
from .snake import Snake

logger = logging.getLogger(__name__)

SPEED_INCREMENT = 1


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game taken between two mutations"""
    mode: GameMode
    snake: Tuple[Cell, ...]
    food: Cell
    score: int
    high_score: int
    new_high_score: bool
    tick_rate: int


class GameStateMachine:
    """Owns the screen mode, snake, food and scores.

    welcome -> (difficulty selected) -> playing -> (collision) -> game over
    -> (restart) -> welcome. Commands that do not apply to the current mode
    are ignored.
    """

    def __init__(self, board: Board, spawner: Optional[FoodSpawner] = None,
                 on_rate_change: Optional[Callable[[int], None]] = None):
        self.board = board
        self.spawner = spawner or FoodSpawner()
        self.on_rate_change = on_rate_change

        self.mode = GameMode.WELCOME
        self.difficulty = DEFAULT_DIFFICULTY
        self.tick_rate = self.difficulty.tick_rate
        self.score_multiplier = self.difficulty.multiplier
        self.high_score = 0
        self.reset()

    def reset(self):
        """Fresh snake and food, score back to zero"""
        self.snake = Snake(self.board.center, Direction.RIGHT)
        self.food = self.spawner.spawn(self.snake.cells, self.board)
        self.score = 0
        self.new_high_score = False

    # Commands

    def handle_command(self, command: Command):
        """Dispatch a command object to the matching operation"""
        if isinstance(command, SetDirection):
            self.set_direction(command.direction)
        elif isinstance(command, SelectDifficulty):
            self.select_difficulty(command.difficulty)
        elif isinstance(command, Restart):
            self.restart()
        else:
            raise TypeError(f"unknown command: {command!r}")

    def select_difficulty(self, difficulty: Difficulty):
        if self.mode is not GameMode.WELCOME:
            return
        self.difficulty = difficulty
        self.score_multiplier = difficulty.multiplier
        self.reset()
        self.mode = GameMode.PLAYING
        logger.info("Game started on %s (rate %d, x%d)",
                    difficulty.label, difficulty.tick_rate, difficulty.multiplier)
        self._set_tick_rate(difficulty.tick_rate)

    def set_direction(self, direction: Direction):
        if self.mode is not GameMode.PLAYING:
            return
        self.snake.steer(direction)

    def restart(self):
        if self.mode is not GameMode.GAME_OVER:
            return
        self.reset()
        self.mode = GameMode.WELCOME
        logger.info("Back to welcome screen (high score %d)", self.high_score)

    # Game loop

    def tick(self) -> Optional[MoveResult]:
        """Run one game step; does nothing outside of play"""
        if self.mode is not GameMode.PLAYING:
            return None

        result = self.snake.move(self.board, self.food)

        if result is MoveResult.COLLIDED:
            self._end_game()
        elif result is MoveResult.GREW:
            self.score += self.score_multiplier
            logger.debug("Ate food at %s, score %d", self.snake.head, self.score)
            try:
                self.food = self.spawner.spawn(self.snake.cells, self.board)
            except NoFreeCellError:
                logger.info("Board is full")
                self._end_game()
                return result
            if self.tick_rate < MAX_TICK_RATE:
                self._set_tick_rate(self.tick_rate + SPEED_INCREMENT)

        return result

    def _end_game(self):
        if self.score > self.high_score:
            self.high_score = self.score
            self.new_high_score = True
        self.mode = GameMode.GAME_OVER
        logger.info("Game over, score %d (high score %d)", self.score, self.high_score)

    def _set_tick_rate(self, rate: int):
        self.tick_rate = rate
        logger.debug("Tick rate now %d", rate)
        if self.on_rate_change is not None:
            self.on_rate_change(rate)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            mode=self.mode,
            snake=tuple(self.snake.segments),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            new_high_score=self.new_high_score,
            tick_rate=self.tick_rate,
        )
