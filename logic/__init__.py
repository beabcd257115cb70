"""
Logic module for TicTacToe.
Handles game state, move history, rules, and win detection.
"""

__version__ = "1.0.0"

from .move import Board, Move, Player
from .game_state import GameState, Outcome, get_status_message
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinInfo, calculate_winner, is_board_full
from .history_view import HistoryEntry, MoveHistoryView
