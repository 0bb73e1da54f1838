"""Classic single-player snake game."""

from .commands import Command, Restart, SelectDifficulty, SetDirection
from .food import FoodSpawner, NoFreeCellError
from .geometry import Board, GridGeometry
from .models import Cell, Difficulty, Direction, GameMode, MoveResult
from .snake import Snake
from .state import GameStateMachine, Snapshot

__all__ = [
    "Board",
    "Cell",
    "Command",
    "Difficulty",
    "Direction",
    "FoodSpawner",
    "GameMode",
    "GameStateMachine",
    "GridGeometry",
    "MoveResult",
    "NoFreeCellError",
    "Restart",
    "SelectDifficulty",
    "SetDirection",
    "Snake",
    "Snapshot",
]
