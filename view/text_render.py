"""
Plain-text rendering of the board, status and move list.
Used by the console game.
"""

from typing import List, Optional

from logic.game_state import GameState
from logic.history_view import HistoryEntry, MoveHistoryView
from logic.move import BOARD_SIZE, cell_to_index

from .config import DisplayConfig


def render_board(game_state: GameState, config: Optional[DisplayConfig] = None) -> str:
    """
    Render the displayed board with row/column numbers.

    Marks on the winning line are wrapped in the console win markers.
    """
    config = config or DisplayConfig()
    win_info = game_state.win_info
    left, right = config.CONSOLE_WIN_MARKERS

    lines = ["  " + "   ".join(str(col) for col in range(BOARD_SIZE))]
    lines.append("┌" + "┬".join(["───"] * BOARD_SIZE) + "┐")

    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = cell_to_index(row, col)
            player = game_state.squares[index]
            text = config.EMPTY_CELL_TEXT if player is None else player.value
            if win_info is not None and win_info.includes(index):
                cells.append(f"{left}{text}{right}")
            else:
                cells.append(f" {text} ")
        lines.append(f"{row}│" + "│".join(cells) + "│")

        if row < BOARD_SIZE - 1:
            lines.append("├" + "┼".join(["───"] * BOARD_SIZE) + "┤")

    lines.append("└" + "┴".join(["───"] * BOARD_SIZE) + "┘")
    return "\n".join(lines)


def render_entry(entry: HistoryEntry, config: Optional[DisplayConfig] = None) -> str:
    config = config or DisplayConfig()
    marker = config.CURRENT_ENTRY_MARKER if entry.is_current else " "
    return f"{marker} {entry.step:>2}. {entry.label:<17} {entry.coordinates_text()}"


def render_history(
    game_state: GameState,
    view: MoveHistoryView,
    config: Optional[DisplayConfig] = None
) -> List[str]:
    """Render the move list in the view's order, one line per entry."""
    return [render_entry(entry, config) for entry in view.entries(game_state)]


def render_game(
    game_state: GameState,
    view: MoveHistoryView,
    config: Optional[DisplayConfig] = None
) -> str:
    """Render board, status and move list together."""
    parts = [
        render_board(game_state, config),
        "",
        game_state.status(),
        "",
        f"Moves ({'descending' if view.descending else 'ascending'}):",
    ]
    parts.extend(render_history(game_state, view, config))
    return "\n".join(parts)
