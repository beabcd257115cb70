"""
Win checker for TicTacToe.
Finds the winner of a board snapshot and the line that won it.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .move import Player


# All possible winning lines (as cell indices 0-8)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class WinInfo:
    """The winning player's symbol and the squares that make up the win."""
    winner: Player
    line: Tuple[int, int, int]

    def includes(self, index: int) -> bool:
        """Check if a cell is part of the winning line."""
        return index in self.line


def calculate_winner(squares: Sequence[Optional[Player]]) -> Optional[WinInfo]:
    """
    Check if there's a winner.

    Lines are checked rows first, then columns, then diagonals, and the
    first complete line wins.

    Args:
        squares: The 9 board cells.

    Returns:
        WinInfo for the winning line, or None if no winner yet.
    """
    for line in WINNING_LINES:
        a, b, c = line
        player = squares[a]
        if player is not None and player == squares[b] == squares[c]:
            return WinInfo(winner=player, line=line)

    return None


def is_board_full(squares: Sequence[Optional[Player]]) -> bool:
    return all(cell is not None for cell in squares)


# Quick test
if __name__ == "__main__":
    print("Testing calculate_winner...")

    X, O = Player.X, Player.O

    row_win = (X, X, X, O, O, None, None, None, None)
    info = calculate_winner(row_win)
    print(f"Test 1 (row): {info}")
    assert info == WinInfo(X, (0, 1, 2))

    diag_win = (O, X, None, X, O, None, None, None, O)
    info = calculate_winner(diag_win)
    print(f"Test 2 (diagonal): {info}")
    assert info == WinInfo(O, (0, 4, 8))

    no_win = (X, O, X, X, O, O, O, X, X)
    info = calculate_winner(no_win)
    print(f"Test 3 (full, no winner): {info}")
    assert info is None and is_board_full(no_win)

    print("\ncalculate_winner test done!")
