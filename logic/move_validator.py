"""
Move validator for TicTacToe.
Validates that a click on the board is a legal move.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .move import CELL_COUNT
from .win_checker import calculate_winner

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be a cell on the board (0-8)
    2. Game must not be won at the displayed step
    3. Can only place on empty cells
    """

    def validate_click(self, game_state: "GameState", index: int) -> ValidationResult:
        """
        Validate a click on a cell of the displayed board.

        Args:
            game_state: Current game state.
            index: Cell index (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if index is on the board
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        squares = game_state.squares

        # Check if game is over
        win_info = calculate_winner(squares)
        if win_info is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already won by {win_info.winner}!"
            )

        # Check if cell is empty
        if squares[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {squares[index]}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all cells the current player can click.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices.
        """
        return [
            index for index in range(CELL_COUNT)
            if self.validate_click(game_state, index).is_valid
        ]
