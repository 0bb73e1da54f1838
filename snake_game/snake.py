"""Snake body, buffered steering and the per-tick movement rule."""

from collections import deque
from typing import Iterator, List, Optional

from .geometry import Board
from .models import Cell, Direction, MoveResult


class Snake:
    """Ordered body (head first) with a one-tick direction buffer"""

    def __init__(self, start: Cell, direction: Direction = Direction.RIGHT):
        self.segments: deque = deque([start])
        self.direction = direction
        self.pending_direction = direction

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.segments)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self.segments

    @property
    def head(self) -> Cell:
        return self.segments[0]

    @property
    def tail(self) -> Cell:
        return self.segments[-1]

    @property
    def cells(self) -> List[Cell]:
        return list(self.segments)

    def steer(self, direction: Direction) -> bool:
        """Buffer a new direction for the next move (prevents 180 degree turns).

        The guard is checked against the direction of travel, so several
        inputs between two moves can only ever settle on a legal turn.
        """
        if direction is self.direction.opposite:
            return False
        self.pending_direction = direction
        return True

    def hits_itself(self, cell: Cell) -> bool:
        """Would a head at ``cell`` land on the body?

        The tail is excluded because it moves out of the way on this tick.
        """
        body = self.cells[:-1]
        return cell in body

    def move(self, board: Board, food: Optional[Cell], direction: Optional[Direction] = None) -> MoveResult:
        """Advance one cell, growing onto food; the body is untouched on collision"""
        if direction is not None:
            self.pending_direction = direction
        self.direction = self.pending_direction

        new_head = self.direction.step(self.head)
        if not board.contains(new_head) or self.hits_itself(new_head):
            return MoveResult.COLLIDED

        self.segments.appendleft(new_head)
        if new_head == food:
            return MoveResult.GREW

        self.segments.pop()
        return MoveResult.ADVANCED
