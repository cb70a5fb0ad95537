"""Win and game-over evaluation of a 4x4 board."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from .errors import ContradictoryBoardError, InvariantViolationError
from .patterns import NO_WINNING_STATE, WINNING_STATES
from .types import BOARD_SIZE, Board, BoardCell, Player, WinningState, WinStatus
from .utils import FULL_MASK, board_to_masks, mask_to_cells

_CELL_STATES = (Player.NONE, Player.X, Player.O)

NO_WINNER = WinStatus(
    winner=Player.NONE,
    win_code=NO_WINNING_STATE.bitmask,
    win_description=NO_WINNING_STATE.description,
)


class TicTacToe:
    """
    State of a 4x4 tic-tac-toe board.

    Everything is computed once at construction: the win status, the open
    cells and whether the game is over. The instance is read-only afterwards.

    Player moves are tracked as 16-bit masks (bit 0 = row 0, column 0,
    row-major) and a player wins when every bit of some winning pattern is
    set in their mask.
    """

    def __init__(self, board: Board, patterns: Sequence[WinningState] = WINNING_STATES):
        """
        Extract the state of a board.

        Args:
            board: (4, 4) array of Player values.
            patterns: Winning patterns, scanned in order.

        Raises:
            InvariantViolationError: The board is not a 4x4 grid of Player values.
            ContradictoryBoardError: Both players hold a winning pattern.
        """
        self._patterns = tuple(patterns)
        x_moves, o_moves, remaining_moves = self._process_board_state(board)

        self._x_moves = x_moves
        self._o_moves = o_moves
        self._remaining_moves = remaining_moves

        x_status = self._process_player_moves(Player.X, x_moves)
        o_status = self._process_player_moves(Player.O, o_moves)

        if x_status.win_code != NO_WINNER.win_code:
            if o_status.win_code != NO_WINNER.win_code:
                raise ContradictoryBoardError(x_status, o_status)
            self._win_status = x_status
        else:
            self._win_status = o_status

        self._game_over = (
            self._win_status.win_code != NO_WINNER.win_code or len(remaining_moves) == 0
        )

    def _process_board_state(self, board: Board) -> Tuple[int, int, Tuple[BoardCell, ...]]:
        """Build both players' move masks and the list of open cells."""
        try:
            board = np.asarray(board)
        except ValueError as e:
            raise InvariantViolationError(
                f"Board must have shape ({BOARD_SIZE}, {BOARD_SIZE}), got a ragged board: {e}"
            ) from e
        if board.shape != (BOARD_SIZE, BOARD_SIZE):
            raise InvariantViolationError(
                f"Board must have shape ({BOARD_SIZE}, {BOARD_SIZE}), got {board.shape}"
            )

        for row in range(BOARD_SIZE):
            for column in range(BOARD_SIZE):
                cell = board[row, column]
                if cell not in _CELL_STATES:
                    raise InvariantViolationError(
                        f"Unknown Player value at row {row}, column {column}: {cell}",
                        row=row,
                        column=column,
                        value=cell,
                    )

        x_moves, o_moves = board_to_masks(board)
        remaining_moves = mask_to_cells(FULL_MASK & ~(x_moves | o_moves))
        return x_moves, o_moves, remaining_moves

    def _process_player_moves(self, player: Player, moves: int) -> WinStatus:
        """First winning pattern fully covered by ``moves``, or NO_WINNER."""
        for state in self._patterns:
            if moves & state.bitmask == state.bitmask:
                return WinStatus(
                    winner=player,
                    win_code=state.bitmask,
                    win_description=state.description,
                )
        return NO_WINNER

    def check_winner(self) -> WinStatus:
        return self._win_status

    def any_moves_left(self) -> Tuple[BoardCell, ...]:
        """Open cells in row-major order."""
        return self._remaining_moves

    def is_game_over(self) -> bool:
        """True if a player has won or no cells are open."""
        return self._game_over

    @property
    def x_moves(self) -> int:
        """Mask of the cells held by X."""
        return self._x_moves

    @property
    def o_moves(self) -> int:
        """Mask of the cells held by O."""
        return self._o_moves
