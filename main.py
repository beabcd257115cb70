"""
Main entry point for TicTacToe.

Two players take turns on the same machine. Every move is kept in a
history list, so the game can be rewound to any earlier step; playing a
new move from there replaces the moves that followed.

Runs the desktop UI by default, or a console game with --no-ui.
"""

import logging
from typing import Callable, Optional

from logic.game_state import GameState
from logic.history_view import MoveHistoryView
from view.config import DisplayConfig
from view.text_render import render_game

logger = logging.getLogger(__name__)


HELP_TEXT = """Commands:
  0-8            play on a cell (index map below)
  j N, jump N    go to step N of the move list
  s, sort        toggle ascending/descending move list
  n, new         start a new game
  h, help        show this help
  q, quit        quit

Index map:
  0 | 1 | 2
  3 | 4 | 5
  6 | 7 | 8"""


class TicTacToeConsole:
    """
    Console controller for TicTacToe.

    Game flow:
    1. Show the board, status and move list
    2. Read a command
    3. Click a cell, jump in the history, or re-sort the list
    4. Repeat until the players quit
    """

    def __init__(
        self,
        config: Optional[DisplayConfig] = None,
        output: Callable[[str], None] = print,
    ):
        """
        Initialize the console game.

        Args:
            config: Display settings (default: DisplayConfig()).
            output: Where to write text (default: print).
        """
        self.config = config or DisplayConfig()
        self.output = output
        self.game_state = GameState.new()
        self.history_view = MoveHistoryView()
        self.is_running = False

    def show(self):
        """Print the current board, status and move list."""
        self.output(render_game(self.game_state, self.history_view, self.config))

    def handle_command(self, line: str) -> bool:
        """
        Apply one line of input.

        Args:
            line: The raw command text.

        Returns:
            True if the board changed and should be shown again.
        """
        parts = line.strip().lower().split()
        if not parts:
            return False

        command, args = parts[0], parts[1:]

        if command.isdigit() and not args:
            previous = self.game_state
            self.game_state = self.game_state.handle_click(int(command))
            if self.game_state is previous:
                self.output("That cell can't be played.")
                return False
            return True

        if command in ("j", "jump"):
            if len(args) != 1 or not args[0].isdigit():
                self.output("Usage: jump N")
                return False
            try:
                self.game_state = self.game_state.jump_to(int(args[0]))
            except ValueError as e:
                self.output(str(e))
                return False
            return True

        if command in ("s", "sort"):
            self.history_view = self.history_view.toggle()
            return True

        if command in ("n", "new"):
            logger.info("Starting a new game")
            self.game_state = GameState.new()
            return True

        if command in ("h", "help"):
            self.output(HELP_TEXT)
            return False

        if command in ("q", "quit"):
            self.is_running = False
            return False

        self.output(f"Unknown command: {line.strip()!r} (type 'help')")
        return False

    def run(self, input_func: Callable[[str], str] = input):
        """Run the game loop until the players quit or input ends."""
        self.is_running = True
        self.output(HELP_TEXT)
        self.output("")
        self.show()

        while self.is_running:
            try:
                line = input_func(f"\n[{self.game_state.status()}] > ")
            except EOFError:
                break

            if self.handle_command(line):
                self.output("")
                self.show()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with move history")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
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

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI()
        ui.run()
        return

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60 + "\n")

    console = TicTacToeConsole()
    try:
        console.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
