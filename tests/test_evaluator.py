"""Tests for TicTacToe win evaluation."""

import numpy as np
import pytest

from tictactoe4.board import (
    BoardCell,
    ContradictoryBoardError,
    InvariantViolationError,
    NO_WINNER,
    Player,
    TicTacToe,
    WINNING_STATES,
    create_empty_board,
    parse_board,
)
from tictactoe4.board.utils import popcount


def _evaluate(board_str: str) -> TicTacToe:
    return TicTacToe(parse_board(board_str))


def test_empty_board():
    """Test a board with no moves."""
    game = _evaluate(
        """
         | | | \n
         | | | \n
         | | | \n
         | | | """
    )
    status = game.check_winner()
    assert not game.is_game_over()
    assert status.winner == Player.NONE
    # Literal win codes so the test fails if the underlying mask changes
    assert status.win_code == 0
    assert status.win_description == "No winner"
    assert len(game.any_moves_left()) == 16


def test_full_board_no_winner():
    """Test a full board where nobody completed a pattern."""
    game = _evaluate(
        """
        X|O|X|O\n
        X|O|X|O\n
        O|X|O|X\n
        O|X|O|X"""
    )
    status = game.check_winner()
    assert game.is_game_over()
    assert status.winner == Player.NONE
    assert status.win_code == 0
    assert len(game.any_moves_left()) == 0


def test_x_wins_row_0():
    game = _evaluate(
        """
        X|X|X|X
        O| | |O
         | | |
        O| | |O"""
    )
    status = game.check_winner()
    assert game.is_game_over()
    assert status.winner == Player.X
    assert status.win_code == 15
    assert status.win_description == "Row 0"
    assert len(game.any_moves_left()) == 8


def test_o_wins_four_corners():
    game = _evaluate(
        """
        O|X|X|O
        X| | |X
         | | |
        O| | |O"""
    )
    status = game.check_winner()
    assert game.is_game_over()
    assert status.winner == Player.O
    assert status.win_code == 36873
    assert status.win_description == "All four corners"
    assert len(game.any_moves_left()) == 8


def test_x_wins_center_box():
    game = _evaluate(
        """
         | | |
        O|X|X|O
         |X|X|
        O| | |O"""
    )
    status = game.check_winner()
    assert game.is_game_over()
    assert status.winner == Player.X
    assert status.win_code == 1632
    assert status.win_description == "2x2 box in the center"
    assert len(game.any_moves_left()) == 8


def test_o_wins_anti_diagonal():
    game = _evaluate(
        """
        X| | |O
        X| |O|
         |O|X|
        O| | |X"""
    )
    status = game.check_winner()
    assert status.winner == Player.O
    assert status.win_code == 4680
    assert status.win_description == "Upper right to lower left diagonal"


def test_first_matching_pattern_wins():
    """Test that table order decides between patterns held at once."""
    game = _evaluate(
        """
        X|X|X|X
        X|O| |
        X| |O|
        X|O| |O"""
    )
    status = game.check_winner()
    assert status.winner == Player.X
    assert status.win_code == 15
    assert status.win_description == "Row 0"


def test_extra_moves_do_not_prevent_win():
    game = _evaluate(
        """
        X| |O|
        O|O|O|O
        X|X| |
         |X| |X"""
    )
    status = game.check_winner()
    assert status.winner == Player.O
    assert status.win_code == 240


def test_win_on_last_open_cell():
    """Test a full board that also has a winner."""
    game = _evaluate(
        """
        X|X|X|X
        O|O|X|O
        X|O|O|X
        O|X|O|O"""
    )
    assert game.is_game_over()
    assert len(game.any_moves_left()) == 0
    assert game.check_winner().winner == Player.X
    assert game.check_winner().win_code == 15


def test_both_players_winning_is_rejected():
    with pytest.raises(ContradictoryBoardError) as exc_info:
        _evaluate(
            """
            X|X|X|X
             | | |
             | | |
            O|O|O|O"""
        )
    message = str(exc_info.value)
    assert 'Player X = "Row 0"' in message
    assert 'Player O = "Row 3"' in message
    assert exc_info.value.x_status.win_code == 15
    assert exc_info.value.o_status.win_code == 61440


def test_remaining_moves_row_major():
    game = _evaluate(
        """
        X| |O|X
        O|X|O|
        X|O|X|O
         |O|X|O"""
    )
    assert game.any_moves_left() == (
        BoardCell(row=0, column=1),
        BoardCell(row=1, column=3),
        BoardCell(row=3, column=0),
    )
    assert not game.is_game_over()
    assert game.check_winner() == NO_WINNER


def test_player_masks():
    game = _evaluate(
        """
        X| | |
         |O| |
         | | |
         | | |X"""
    )
    assert game.x_moves == (1 << 0) | (1 << 15)
    assert game.o_moves == 1 << 5


def test_unknown_cell_value():
    board = create_empty_board()
    board[2, 1] = 7
    with pytest.raises(InvariantViolationError, match="row 2, column 1: 7") as exc_info:
        TicTacToe(board)
    assert (exc_info.value.row, exc_info.value.column) == (2, 1)


def test_wrong_board_shape():
    with pytest.raises(InvariantViolationError, match="shape"):
        TicTacToe(np.zeros((3, 3), dtype=np.int8))


def test_ragged_board():
    """Test a board whose rows have different lengths."""
    ragged = [[0, 0, 0, 0], [0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
    with pytest.raises(InvariantViolationError, match="shape"):
        TicTacToe(ragged)


def test_player_masks_are_read_only():
    game = _evaluate("X| | | \n |O| | \n | | | \n | | |X")
    with pytest.raises(AttributeError):
        game.x_moves = 0
    with pytest.raises(AttributeError):
        game.o_moves = 0
    assert game.x_moves == (1 << 0) | (1 << 15)


def test_nested_list_board():
    game = TicTacToe([[1, 1, 1, 1], [2, 0, 0, 2], [0, 0, 0, 0], [2, 0, 0, 2]])
    assert game.check_winner().win_code == 15
    assert len(game.any_moves_left()) == 8


def test_evaluation_is_repeatable():
    board = parse_board("O|X|X|O\nX| | |X\n | | | \nO| | |O")
    first = TicTacToe(board)
    second = TicTacToe(board)
    assert first.check_winner() == second.check_winner()
    assert first.any_moves_left() == second.any_moves_left()
    assert first.is_game_over() == second.is_game_over()


def test_evaluation_does_not_modify_board():
    board = parse_board("X|X|X|X\nO| | |O\n | | | \nO| | |O")
    before = board.copy()
    TicTacToe(board)
    assert np.array_equal(board, before)


def _holds_pattern(moves: int) -> bool:
    return any(moves & state.bitmask == state.bitmask for state in WINNING_STATES)


def test_random_boards_consistent():
    """Test cell counts and winner detection on random boards."""
    rng = np.random.default_rng(0)
    for _ in range(500):
        board = rng.integers(0, 3, size=(4, 4)).astype(np.int8)
        x_mask = sum(1 << i for i, cell in enumerate(board.flatten()) if cell == Player.X)
        o_mask = sum(1 << i for i, cell in enumerate(board.flatten()) if cell == Player.O)
        x_wins = _holds_pattern(x_mask)
        o_wins = _holds_pattern(o_mask)

        if x_wins and o_wins:
            with pytest.raises(ContradictoryBoardError):
                TicTacToe(board)
            continue

        game = TicTacToe(board)
        status = game.check_winner()
        assert len(game.any_moves_left()) + popcount(game.x_moves) + popcount(game.o_moves) == 16
        assert game.x_moves == x_mask
        assert game.o_moves == o_mask
        if x_wins:
            assert status.winner == Player.X
        elif o_wins:
            assert status.winner == Player.O
        else:
            assert status == NO_WINNER
        assert (status.win_code != 0) == (status.winner != Player.NONE)
        assert game.is_game_over() == (x_wins or o_wins or len(game.any_moves_left()) == 0)
