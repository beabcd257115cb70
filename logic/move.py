"""
Board, player and move types for TicTacToe.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    def __str__(self) -> str:
        return self.value


# The 9 cells, row by row - None means empty
Board = Tuple[Optional[Player], ...]

EMPTY_BOARD: Board = (None,) * CELL_COUNT


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    return index // BOARD_SIZE, index % BOARD_SIZE


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index (0-8)."""
    return row * BOARD_SIZE + col


@dataclass(frozen=True)
class Move:
    """
    One entry of the game history.

    Holds the board as it looked after the move and the cell that was
    played. The game start entry has no cell (row and col are None).
    """
    squares: Board
    row: Optional[int] = None
    col: Optional[int] = None

    @property
    def index(self) -> Optional[int]:
        """Cell index of the move, or None for the game start."""
        if self.row is None or self.col is None:
            return None
        return cell_to_index(self.row, self.col)

    @property
    def is_start(self) -> bool:
        return self.index is None

    def __str__(self) -> str:
        if self.is_start:
            return "Game start"
        return f"{self.squares[self.index]} at ({self.row}, {self.col})"
