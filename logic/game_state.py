"""
Game state management for TicTacToe.
Tracks the full move history and which step of it is on display.

A GameState is an immutable value. Clicks and history jumps return a new
state instead of changing the old one, so any earlier state stays valid.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .move import EMPTY_BOARD, Board, Move, Player, index_to_cell
from .move_validator import MoveValidator
from .win_checker import WinInfo, calculate_winner

logger = logging.getLogger(__name__)

# A full game never lasts longer than this
MAX_MOVES = len(EMPTY_BOARD)

_validator = MoveValidator()


class Outcome(Enum):
    """Where the game stands at the displayed step."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


def get_status_message(winner: Optional[Player], step_number: int, x_is_next: bool) -> str:
    """
    Get the status line for a step of the game.

    Args:
        winner: The winning player, or None.
        step_number: Step of the history on display.
        x_is_next: True if X moves next.

    Returns:
        "Tie", "Winner: <symbol>" or "Next player: <symbol>".
    """
    if winner is None and step_number >= MAX_MOVES:
        return "Tie"
    if winner is not None:
        return f"Winner: {winner}"
    next_player = Player.X if x_is_next else Player.O
    return f"Next player: {next_player}"


@dataclass(frozen=True)
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The move history, starting with the empty board
    - The step of the history currently on display

    Whose turn it is follows from the step: X moves on even steps.
    """

    history: Tuple[Move, ...] = field(default_factory=lambda: (Move(EMPTY_BOARD),))
    step_number: int = 0

    def __post_init__(self):
        if not self.history:
            raise ValueError("history must contain the game start")
        if not 0 <= self.step_number < len(self.history):
            raise ValueError(
                f"step_number {self.step_number} out of range for history of {len(self.history)}"
            )

    @classmethod
    def new(cls) -> "GameState":
        """Create a game at its start."""
        return cls()

    # ---------- Derived state ----------

    @property
    def current(self) -> Move:
        """The history entry on display."""
        return self.history[self.step_number]

    @property
    def squares(self) -> Board:
        return self.current.squares

    @property
    def x_is_next(self) -> bool:
        return self.step_number % 2 == 0

    @property
    def current_player(self) -> Player:
        return Player.X if self.x_is_next else Player.O

    @property
    def win_info(self) -> Optional[WinInfo]:
        return calculate_winner(self.squares)

    @property
    def winner(self) -> Optional[Player]:
        win_info = self.win_info
        return win_info.winner if win_info else None

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        win_info = self.win_info
        return win_info.line if win_info else None

    @property
    def outcome(self) -> Outcome:
        if self.winner is not None:
            return Outcome.WON
        if self.step_number >= MAX_MOVES:
            return Outcome.TIED
        return Outcome.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    def status(self) -> str:
        """Get the status line for the displayed step."""
        return get_status_message(self.winner, self.step_number, self.x_is_next)

    # ---------- Transitions ----------

    def handle_click(self, index: int) -> "GameState":
        """
        Play the current player's mark on a cell.

        Clicking an occupied cell, a cell off the board, or any cell once
        the game is won does nothing. A move made from an earlier step
        discards the moves after it.

        Args:
            index: Cell index (0-8).

        Returns:
            The new state, or this state if the click was ignored.
        """
        result = _validator.validate_click(self, index)
        if not result.is_valid:
            logger.debug("Ignoring click on %r: %s", index, result.error_message)
            return self

        history = self.history[:self.step_number + 1]
        squares = list(self.squares)
        squares[index] = self.current_player

        row, col = index_to_cell(index)
        move = Move(squares=tuple(squares), row=row, col=col)

        if len(history) < len(self.history):
            logger.debug("Discarding %d later move(s)", len(self.history) - len(history))
        logger.debug("Step %d: %s", len(history), move)

        return GameState(history=history + (move,), step_number=len(history))

    def jump_to(self, step: int) -> "GameState":
        """
        Show an earlier (or later) step of the history.

        The history itself is kept, so any step can be revisited.

        Args:
            step: History index to show.

        Returns:
            The new state.

        Raises:
            ValueError: If the step is not in the history.
        """
        if not 0 <= step < len(self.history):
            raise ValueError(f"No step {step} in history (0-{len(self.history) - 1})")
        return GameState(history=self.history, step_number=step)


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState.new()

    # X wins on the top row
    for index in (0, 3, 1, 4, 2):
        game = game.handle_click(index)
        print(f"Clicked {index}: {game.status()}")

    assert game.status() == "Winner: X"
    assert game.winning_line == (0, 1, 2)

    game = game.jump_to(2)
    print(f"Jumped to step 2: {game.status()}")
    assert game.x_is_next and len(game.history) == 6

    print("\nGame state test done!")
