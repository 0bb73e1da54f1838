"""Value types shared by the game core and the pygame front end."""

from enum import Enum
from typing import Tuple

Cell = Tuple[int, int]


class Direction(Enum):
    """Direction of travel, valued by its (dx, dy) grid step"""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def step(self, cell: Cell) -> Cell:
        """Return the neighbouring cell in this direction"""
        return (cell[0] + self.dx, cell[1] + self.dy)


class Difficulty(Enum):
    """Starting tick rate (moves per second) and score multiplier"""
    SLUG = (10, 1)
    WORM = (20, 2)
    PYTHON = (30, 3)

    @property
    def tick_rate(self) -> int:
        return self.value[0]

    @property
    def multiplier(self) -> int:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.name


# Speed ramps up with every food eaten but never past the fastest level
MAX_TICK_RATE = max(d.tick_rate for d in Difficulty)
DEFAULT_DIFFICULTY = Difficulty.WORM


class GameMode(Enum):
    WELCOME = "welcome"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class MoveResult(Enum):
    ADVANCED = "advanced"
    GREW = "grew"
    COLLIDED = "collided"
