"""Conversion between board text and boards."""

from __future__ import annotations

import re

import numpy as np

from .errors import ColumnCountError, InvalidTokenError, RowCountError
from .types import BOARD_SIZE, Board, Player

_LINE_SPLIT = re.compile(r"\r?\n")
_WHITESPACE = re.compile(r"\s+")

_TOKENS = {
    "": Player.NONE,
    "X": Player.X,
    "O": Player.O,
}


def create_empty_board() -> Board:
    """Create a board with every cell empty."""
    return np.full((BOARD_SIZE, BOARD_SIZE), Player.NONE, dtype=np.int8)


def parse_board(board_str: str) -> Board:
    """
    Parse board text into a board.

    The text holds four non-blank lines, each with four ``|``-separated
    fields. A field is empty, ``X`` or ``O`` (any case, whitespace ignored).
    Blank lines anywhere are skipped.

    Args:
        board_str: Board text.

    Returns:
        (4, 4) int8 array of Player values.

    Raises:
        RowCountError: Not exactly four non-blank lines.
        ColumnCountError: A line does not have exactly four fields.
        InvalidTokenError: A field is not empty, X or O.
    """
    row_strs = [line for line in _LINE_SPLIT.split(board_str.strip()) if line.strip()]
    if len(row_strs) != BOARD_SIZE:
        raise RowCountError(len(row_strs))

    board = create_empty_board()
    for row_index, row_str in enumerate(row_strs):
        column_strs = _WHITESPACE.sub("", row_str).upper().split("|")
        if len(column_strs) != BOARD_SIZE:
            raise ColumnCountError(row_index, len(column_strs))

        for column_index, move in enumerate(column_strs):
            if move not in _TOKENS:
                raise InvalidTokenError(row_index, column_index, move)
            board[row_index, column_index] = _TOKENS[move]

    return board


def format_board(board: Board) -> str:
    """Render a board as text that parse_board reads back."""
    lines = []
    for row in np.asarray(board):
        lines.append("|".join(Player(int(cell)).symbol or " " for cell in row))
    return "\n".join(lines)
