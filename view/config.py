"""
Display configuration for TicTacToe.
Colours, fonts and sizes used by the desktop and console UIs.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the game.
    """

    # ==================== WINDOW ====================
    WINDOW_TITLE = "TicTacToe"
    BACKGROUND = '#1a1a2e'
    PADDING = 10

    # ==================== FONTS ====================
    FONT_FAMILY = 'Segoe UI'
    TITLE_FONT = (FONT_FAMILY, 16, 'bold')
    STATUS_FONT = (FONT_FAMILY, 12)
    CELL_FONT = (FONT_FAMILY, 24, 'bold')
    HISTORY_FONT = (FONT_FAMILY, 10)
    HISTORY_CURRENT_FONT = (FONT_FAMILY, 10, 'bold')

    # ==================== BOARD ====================
    CELL_WIDTH = 4     # In characters
    CELL_HEIGHT = 2
    CELL_BG = '#16213e'
    WINNING_CELL_BG = 'yellow'

    # Mark colours
    PLAYER_COLORS = {
        "X": '#f87171',
        "O": '#10b981',
    }
    WINNING_CELL_FG = 'black'

    # ==================== STATUS ====================
    TITLE_COLOR = '#00d4ff'
    STATUS_COLOR = '#ffd700'
    HISTORY_COLOR = 'white'

    # ==================== CONSOLE ====================
    EMPTY_CELL_TEXT = " "
    # Marks on the winning line are wrapped like [X]
    CONSOLE_WIN_MARKERS = ("[", "]")
    CURRENT_ENTRY_MARKER = ">"
