"""
View module for TicTacToe.
Display settings and text rendering shared by the UIs.
"""

from .config import DisplayConfig
from .text_render import render_board, render_game, render_history
