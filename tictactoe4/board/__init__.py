"""Board parsing and win evaluation."""

from .types import BOARD_SIZE, Board, BoardCell, Player, WinningState, WinStatus
from .errors import (
    BoardError,
    ColumnCountError,
    ContradictoryBoardError,
    InvalidTokenError,
    InvariantViolationError,
    ParseError,
    RowCountError,
)
from .patterns import NO_WINNING_STATE, UNIQUE_WINNING_STATES, WINNING_STATES
from .parser import create_empty_board, format_board, parse_board
from .utils import (
    FULL_MASK,
    NUM_CELLS,
    bit_to_position,
    board_to_masks,
    mask_to_cells,
    popcount,
    position_to_bit,
)
from .evaluator import NO_WINNER, TicTacToe
from ..registry import list_pattern_tables, register_pattern_table

if "standard" not in list_pattern_tables():
    register_pattern_table("standard", WINNING_STATES)
if "unique" not in list_pattern_tables():
    register_pattern_table("unique", UNIQUE_WINNING_STATES)

__all__ = [
    "BOARD_SIZE",
    "Board",
    "BoardCell",
    "BoardError",
    "ColumnCountError",
    "ContradictoryBoardError",
    "FULL_MASK",
    "InvalidTokenError",
    "InvariantViolationError",
    "NO_WINNER",
    "NO_WINNING_STATE",
    "NUM_CELLS",
    "ParseError",
    "Player",
    "RowCountError",
    "TicTacToe",
    "UNIQUE_WINNING_STATES",
    "WINNING_STATES",
    "WinStatus",
    "WinningState",
    "bit_to_position",
    "board_to_masks",
    "create_empty_board",
    "format_board",
    "mask_to_cells",
    "parse_board",
    "popcount",
    "position_to_bit",
]
