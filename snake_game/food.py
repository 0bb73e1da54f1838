"""Food placement."""

import logging
import random
from typing import Collection, Optional

from .geometry import Board
from .models import Cell

logger = logging.getLogger(__name__)


class NoFreeCellError(RuntimeError):
    """Raised when the snake covers every cell of the board"""


class FoodSpawner:
    """Picks a uniformly random board cell that is not occupied"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def spawn(self, occupied: Collection[Cell], board: Board) -> Cell:
        """Return a free cell, resampling until one is found"""
        blocked = set(occupied)
        if sum(1 for cell in blocked if board.contains(cell)) >= board.size:
            raise NoFreeCellError(f"no free cell left on a {board.cols}x{board.rows} board")

        while True:
            pos = (self.rng.randrange(board.cols), self.rng.randrange(board.rows))
            if pos not in blocked:
                logger.debug("Food spawned at %s", pos)
                return pos
