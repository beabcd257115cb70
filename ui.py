"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (winning line highlighted)
- Game status
- Move list with sort toggle (click an entry to go back to it)
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from logic.game_state import GameState
from logic.history_view import HistoryEntry, MoveHistoryView
from logic.move import BOARD_SIZE, cell_to_index
from view.config import DisplayConfig

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Owns the one GameState of the session and replaces it on every click.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.game_state = GameState.new()
        self.history_view = MoveHistoryView()

        self.board_cells: List[tk.Button] = []
        self.history_rows: List[ttk.Frame] = []

        # Create UI
        self._create_ui()
        self._render()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BACKGROUND)
        self.root.minsize(520, 360)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=cfg.PADDING, pady=cfg.PADDING)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BACKGROUND)
        style.configure('TLabel', background=cfg.BACKGROUND, foreground='white', font=cfg.HISTORY_FONT)
        style.configure('Title.TLabel', font=cfg.TITLE_FONT, foreground=cfg.TITLE_COLOR)
        style.configure('Status.TLabel', font=cfg.STATUS_FONT, foreground=cfg.STATUS_COLOR)
        style.configure('Move.TLabel', font=cfg.HISTORY_FONT, foreground=cfg.HISTORY_COLOR)
        style.configure('Current.TLabel', font=cfg.HISTORY_CURRENT_FONT, foreground=cfg.HISTORY_COLOR)
        style.configure('TButton', font=cfg.HISTORY_FONT)
        style.configure('Current.TButton', font=cfg.HISTORY_CURRENT_FONT)

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, cfg.PADDING))

        ttk.Label(left_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 10))

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                index = cell_to_index(row, col)
                cell = tk.Button(
                    board_frame,
                    text="",
                    font=cfg.CELL_FONT,
                    width=cfg.CELL_WIDTH,
                    height=cfg.CELL_HEIGHT,
                    bg=cfg.CELL_BG,
                    relief='ridge',
                    borderwidth=2,
                    command=lambda i=index: self._on_cell_click(i)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                self.board_cells.append(cell)

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        control_frame = ttk.Frame(left_frame)
        control_frame.pack(pady=10)

        ttk.Button(control_frame, text="New Game", command=self._new_game).pack(side=tk.LEFT, padx=5)
        ttk.Button(control_frame, text="Quit", command=self._quit).pack(side=tk.LEFT, padx=5)

        # Right panel - move list
        right_frame = ttk.Frame(main_frame)
        right_frame.pack(side=tk.RIGHT, fill=tk.BOTH, expand=True)

        ttk.Label(right_frame, text="Moves", style='Title.TLabel').pack(pady=(0, 10))

        self.sort_btn = ttk.Button(right_frame, text="", command=self._toggle_sort)
        self.sort_btn.pack(pady=(0, 10))

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ---------- Rendering ----------

    def _render(self):
        """Redraw everything from the current game state."""
        self._update_board_display()
        self.status_label.configure(text=self.game_state.status())
        self.sort_btn.configure(text=self.history_view.sort_button_label)
        self._update_history_list()

    def _update_board_display(self):
        """Update the board grid display."""
        cfg = self.config
        win_info = self.game_state.win_info

        for index, cell in enumerate(self.board_cells):
            player = self.game_state.squares[index]
            if player is None:
                cell.configure(text="", bg=cfg.CELL_BG)
            elif win_info is not None and win_info.includes(index):
                cell.configure(text=player.value, bg=cfg.WINNING_CELL_BG, fg=cfg.WINNING_CELL_FG)
            else:
                cell.configure(text=player.value, bg=cfg.CELL_BG, fg=cfg.PLAYER_COLORS[player.value])

    def _update_history_list(self):
        """Rebuild the move list."""
        for row in self.history_rows:
            row.destroy()
        self.history_rows = []

        for entry in self.history_view.entries(self.game_state):
            self.history_rows.append(self._create_history_row(entry))

    def _create_history_row(self, entry: HistoryEntry) -> ttk.Frame:
        """Create one move list row: coordinates plus a jump button."""
        row = ttk.Frame(self.history_frame)
        row.pack(fill=tk.X, pady=1)

        label_style = 'Current.TLabel' if entry.is_current else 'Move.TLabel'
        button_style = 'Current.TButton' if entry.is_current else 'TButton'

        ttk.Label(row, text=f"{entry.step}.", width=4, style=label_style).pack(side=tk.LEFT)
        ttk.Label(row, text=entry.coordinates_text(), width=10, style=label_style).pack(side=tk.LEFT)
        ttk.Button(
            row,
            text=entry.label,
            style=button_style,
            command=lambda step=entry.step: self._jump_to(step)
        ).pack(side=tk.LEFT, padx=5)
        return row

    # ---------- Events ----------

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        new_state = self.game_state.handle_click(index)
        if new_state is self.game_state:
            return
        self.game_state = new_state
        self._render()

    def _jump_to(self, step: int):
        """Show a step from the move list."""
        self.game_state = self.game_state.jump_to(step)
        self._render()

    def _toggle_sort(self):
        """Flip the move list order."""
        self.history_view = self.history_view.toggle()
        self._render()

    def _new_game(self):
        """Start over with an empty board."""
        logger.info("Starting a new game")
        self.game_state = GameState.new()
        self._render()

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move and ignored click"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
