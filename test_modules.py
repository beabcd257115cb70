"""
Tests for the TicTacToe logic modules.
Run with: pytest
"""

import itertools

import pytest

from logic.game_state import GameState, Outcome, get_status_message
from logic.history_view import MoveHistoryView, symbol_for_step
from logic.move import EMPTY_BOARD, Move, Player
from logic.move_validator import MoveValidator
from logic.win_checker import WINNING_LINES, WinInfo, calculate_winner, is_board_full

X, O = Player.X, Player.O


def play(*indices: int) -> GameState:
    game = GameState.new()
    for index in indices:
        game = game.handle_click(index)
    return game


def board(text: str):
    """Build a board from 9 characters, e.g. "XXXOO    "."""
    cells = {"X": X, "O": O, " ": None, ".": None}
    return tuple(cells[c] for c in text)


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line):
    squares = [None] * 9
    for index in line:
        squares[index] = O
    assert calculate_winner(squares) == WinInfo(O, line)


def test_row_win_reports_symbol_and_line():
    info = calculate_winner(board("XXXOO    "))
    assert info.winner == X
    assert info.line == (0, 1, 2)
    assert info.includes(1)
    assert not info.includes(3)


def test_no_winner_on_empty_or_mixed_board():
    assert calculate_winner(EMPTY_BOARD) is None
    assert calculate_winner(board("XOXXOOOXX")) is None
    assert calculate_winner(board("XXO      ")) is None


def test_first_line_in_order_wins():
    # Top row and left column both complete
    info = calculate_winner(board("XXXXOOXOO"))
    assert info.line == (0, 1, 2)


def test_winner_iff_line_matches_on_every_board():
    for squares in itertools.product((None, X, O), repeat=9):
        complete = [
            line for line in WINNING_LINES
            if squares[line[0]] is not None
            and squares[line[0]] == squares[line[1]] == squares[line[2]]
        ]
        info = calculate_winner(squares)
        if complete:
            assert info == WinInfo(squares[complete[0][0]], complete[0])
        else:
            assert info is None


def test_board_full():
    assert is_board_full(board("XOXXOOOXX"))
    assert not is_board_full(board("XOXXOOOX "))


# ==================== GAME STATE ====================

def test_new_game():
    game = GameState.new()
    assert len(game.history) == 1
    assert game.step_number == 0
    assert game.squares == EMPTY_BOARD
    assert game.current.is_start
    assert game.x_is_next
    assert game.status() == "Next player: X"


def test_click_places_mark_and_flips_turn():
    game = play(0)
    assert game.squares[0] == X
    assert not game.x_is_next
    assert game.current_player == O
    assert game.current == Move(game.squares, row=0, col=0)
    assert game.status() == "Next player: O"


def test_click_records_row_and_col():
    game = play(5)
    assert (game.current.row, game.current.col) == (1, 2)
    assert game.current.index == 5


def test_click_on_occupied_cell_is_ignored():
    game = play(0)
    assert game.handle_click(0) is game


@pytest.mark.parametrize("index", [-1, 9, 42, True, False])
def test_click_off_board_is_ignored(index):
    game = GameState.new()
    assert game.handle_click(index) is game


def test_click_after_win_is_ignored():
    game = play(0, 3, 1, 4, 2)
    assert game.outcome == Outcome.WON
    assert game.winner == X
    assert game.winning_line == (0, 1, 2)
    assert game.status() == "Winner: X"
    assert game.handle_click(8) is game


def test_every_free_cell_accepts_a_click():
    game = play(4, 0)
    for index in range(9):
        if game.squares[index] is not None:
            continue
        after = game.handle_click(index)
        assert after.squares[index] == game.current_player
        assert after.x_is_next != game.x_is_next
        assert len(after.history) == len(game.history) + 1


def test_tie():
    # X O X / X O O / O X X
    game = play(0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert game.winner is None
    assert game.outcome == Outcome.TIED
    assert game.is_game_over
    assert game.status() == "Tie"


def test_click_on_tied_board_is_ignored():
    game = play(0, 1, 2, 4, 3, 5, 7, 6, 8)
    for index in range(9):
        assert game.handle_click(index) is game


def test_win_on_last_move_is_not_a_tie():
    # X O X / O X O / O X X -> X wins on the diagonal with the 9th move
    game = play(0, 1, 2, 3, 4, 5, 7, 6, 8)
    assert game.step_number == 9
    assert game.status() == "Winner: X"


def test_status_message():
    assert get_status_message(None, 9, False) == "Tie"
    assert get_status_message(O, 6, True) == "Winner: O"
    assert get_status_message(None, 3, False) == "Next player: O"
    assert get_status_message(None, 0, True) == "Next player: X"


def test_states_are_not_changed_by_clicks():
    start = GameState.new()
    start.handle_click(4)
    assert start.squares == EMPTY_BOARD
    assert len(start.history) == 1


# ==================== TIME TRAVEL ====================

@pytest.mark.parametrize("step", range(6))
def test_jump_to_keeps_history(step):
    game = play(0, 3, 1, 4, 2)
    jumped = game.jump_to(step)
    assert jumped.step_number == step
    assert jumped.x_is_next == (step % 2 == 0)
    assert jumped.history == game.history


def test_jump_back_from_win_shows_game_in_progress():
    game = play(0, 3, 1, 4, 2).jump_to(4)
    assert game.outcome == Outcome.IN_PROGRESS
    assert game.status() == "Next player: X"
    # And forward again
    assert game.jump_to(5).status() == "Winner: X"


def test_click_after_jump_discards_later_moves():
    game = play(0, 3, 1, 4).jump_to(2)
    branched = game.handle_click(8)
    assert len(branched.history) == 4
    assert branched.step_number == 3
    assert branched.history[:3] == game.history[:3]
    assert branched.squares == board("X  O    X")


def test_jump_out_of_range_raises():
    game = play(0)
    with pytest.raises(ValueError):
        game.jump_to(2)
    with pytest.raises(ValueError):
        game.jump_to(-1)


def test_invalid_step_number_rejected():
    with pytest.raises(ValueError):
        GameState(step_number=1)


# ==================== MOVE VALIDATOR ====================

def test_validator_messages():
    validator = MoveValidator()
    game = play(0)

    assert validator.validate_click(game, 1).is_valid

    result = validator.validate_click(game, 0)
    assert not result.is_valid
    assert "occupied" in result.error_message

    result = validator.validate_click(game, 9)
    assert not result.is_valid
    assert "Invalid cell" in result.error_message

    won = play(0, 3, 1, 4, 2)
    result = validator.validate_click(won, 8)
    assert not result.is_valid
    assert "won" in result.error_message


def test_valid_moves():
    validator = MoveValidator()
    assert validator.get_valid_moves(play(0, 4)) == [1, 2, 3, 5, 6, 7, 8]
    assert validator.get_valid_moves(play(0, 3, 1, 4, 2)) == []


# ==================== MOVE HISTORY VIEW ====================

def test_history_entries_ascending():
    game = play(4, 0)
    entries = MoveHistoryView().entries(game)

    assert [e.step for e in entries] == [0, 1, 2]
    assert entries[0].label == "Go to game start"
    assert entries[0].coordinates_text() == "(C, R, P)"
    assert entries[1].label == "Go to Move #1"
    assert (entries[1].col, entries[1].row, entries[1].symbol) == (1, 1, X)
    assert entries[2].coordinates_text() == "(0, 0, O)"
    assert [e.is_current for e in entries] == [False, False, True]


def test_history_toggle_reverses_without_touching_state():
    game = play(4, 0).jump_to(1)
    view = MoveHistoryView()
    assert view.sort_button_label == "Sort descending"

    flipped = view.toggle()
    assert flipped.descending
    assert flipped.sort_button_label == "Sort ascending"
    assert [e.step for e in flipped.entries(game)] == [2, 1, 0]
    assert [e.is_current for e in flipped.entries(game)] == [False, True, False]
    assert game.step_number == 1
    assert len(game.history) == 3

    assert not flipped.toggle().descending


def test_symbol_for_step():
    assert symbol_for_step(0) is None
    assert symbol_for_step(1) == X
    assert symbol_for_step(2) == O
    assert symbol_for_step(9) == X
