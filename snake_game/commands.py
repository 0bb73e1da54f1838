"""Commands accepted by the game state machine."""

from dataclasses import dataclass
from typing import Union

from .models import Difficulty, Direction


@dataclass(frozen=True)
class SetDirection:
    direction: Direction


@dataclass(frozen=True)
class SelectDifficulty:
    difficulty: Difficulty


@dataclass(frozen=True)
class Restart:
    pass


Command = Union[SetDirection, SelectDifficulty, Restart]
