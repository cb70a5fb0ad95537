"""Errors raised while parsing and evaluating boards."""

from __future__ import annotations

from typing import Any, Optional

from .types import BOARD_SIZE, WinStatus


class BoardError(ValueError):
    """Base class for every board parsing or evaluation failure."""


class ParseError(BoardError):
    """The board text could not be turned into a board."""


class RowCountError(ParseError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Board contains an invalid number of rows: {count} != {BOARD_SIZE}"
        )


class ColumnCountError(ParseError):
    def __init__(self, row: int, count: int):
        self.row = row
        self.count = count
        super().__init__(
            f"Row {row} contains an invalid number of columns: {count} != {BOARD_SIZE}"
        )


class InvalidTokenError(ParseError):
    def __init__(self, row: int, column: int, token: str):
        self.row = row
        self.column = column
        self.token = token
        super().__init__(f"Invalid move at row {row}, column {column}: {token}")


class ContradictoryBoardError(BoardError):
    """Both players hold a complete winning pattern."""

    def __init__(self, x_status: WinStatus, o_status: WinStatus):
        self.x_status = x_status
        self.o_status = o_status
        super().__init__(
            "The board contains winning moves for both players: "
            f'Player X = "{x_status.win_description}" and '
            f'Player O = "{o_status.win_description}"'
        )


class InvariantViolationError(BoardError, TypeError):
    """A board holds something other than a 4x4 grid of Player values."""

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        column: Optional[int] = None,
        value: Any = None,
    ):
        self.row = row
        self.column = column
        self.value = value
        super().__init__(message)
