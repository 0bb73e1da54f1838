"""Grid geometry: board bounds and pixel <-> cell conversion."""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .models import Cell


@dataclass(frozen=True)
class Board:
    """Playable area in grid units"""
    cols: int
    rows: int

    def __post_init__(self):
        if self.cols < 1 or self.rows < 1:
            raise ValueError(f"board must be at least 1x1, got {self.cols}x{self.rows}")

    @property
    def size(self) -> int:
        return self.cols * self.rows

    @property
    def center(self) -> Cell:
        return (self.cols // 2, self.rows // 2)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cells(self) -> Iterator[Cell]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield (x, y)


class GridGeometry:
    """Maps a pixel window onto a cell grid.

    The bottom ``score_bar_rows`` rows of the grid hold the score bar, so the
    playable board is that many rows shorter than the window grid.
    """

    def __init__(self, width: int, height: int, cell_size: int, score_bar_rows: int = 1):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        if score_bar_rows < 0:
            raise ValueError(f"score_bar_rows must not be negative, got {score_bar_rows}")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.score_bar_rows = score_bar_rows
        self.cols = width // cell_size
        self.rows = height // cell_size
        if self.rows - score_bar_rows < 1 or self.cols < 1:
            raise ValueError(
                f"{width}x{height} window with {cell_size}px cells leaves no playable area"
            )
        self.board = Board(self.cols, self.rows - score_bar_rows)

    def to_cell(self, px: int, py: int) -> Cell:
        """Cell containing the given pixel"""
        return (px // self.cell_size, py // self.cell_size)

    def to_pixel(self, cell: Cell) -> Tuple[int, int]:
        """Top-left pixel of a cell"""
        return (cell[0] * self.cell_size, cell[1] * self.cell_size)

    def cell_rect(self, cell: Cell) -> Tuple[int, int, int, int]:
        x, y = self.to_pixel(cell)
        return (x, y, self.cell_size, self.cell_size)

    def score_bar_rect(self) -> Tuple[int, int, int, int]:
        top = self.board.rows * self.cell_size
        return (0, top, self.width, self.height - top)
