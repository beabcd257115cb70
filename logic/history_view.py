"""
Move history list for TicTacToe.
Builds the entries of the "go to move" list shown next to the board.
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from .game_state import GameState
from .move import Move, Player


START_LABEL = "Go to game start"
START_PLACEHOLDER = "(C, R, P)"


@dataclass(frozen=True)
class HistoryEntry:
    """
    One line of the move list.
    """
    step: int                       # History index this entry jumps to
    label: str                      # Button text
    col: Optional[int] = None       # None for the game start
    row: Optional[int] = None
    symbol: Optional[Player] = None
    is_current: bool = False        # Shown in bold

    def coordinates_text(self) -> str:
        """Render as "(col, row, symbol)"."""
        if self.symbol is None:
            return START_PLACEHOLDER
        return f"({self.col}, {self.row}, {self.symbol})"


def symbol_for_step(step: int) -> Optional[Player]:
    """Player who made the move at a step (X on odd steps), None for the start."""
    if step <= 0:
        return None
    return Player.X if step % 2 == 1 else Player.O


def create_entry(move: Move, step: int, current_step: int) -> HistoryEntry:
    """
    Build the move list entry for one history step.

    Args:
        move: The history entry.
        step: Its index in the history.
        current_step: Step currently on display.

    Returns:
        HistoryEntry for the step.
    """
    is_current = step == current_step
    if step == 0:
        return HistoryEntry(step=0, label=START_LABEL, is_current=is_current)

    return HistoryEntry(
        step=step,
        label=f"Go to Move #{step}",
        col=move.col,
        row=move.row,
        symbol=symbol_for_step(step),
        is_current=is_current,
    )


@dataclass(frozen=True)
class MoveHistoryView:
    """
    Sortable view of the move history.

    Sorting only changes the order entries are listed in; the game state
    is never touched.
    """
    descending: bool = False

    @property
    def sort_button_label(self) -> str:
        return "Sort ascending" if self.descending else "Sort descending"

    def toggle(self) -> "MoveHistoryView":
        """Flip between ascending and descending order."""
        return replace(self, descending=not self.descending)

    def entries(self, game_state: GameState) -> List[HistoryEntry]:
        """
        Get the entries to list, in display order.

        Args:
            game_state: The game whose history is listed.

        Returns:
            One entry per history step, the displayed step marked current.
        """
        entries = [
            create_entry(move, step, game_state.step_number)
            for step, move in enumerate(game_state.history)
        ]
        if self.descending:
            entries.reverse()
        return entries
