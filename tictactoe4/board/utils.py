"""Bitmask helpers for 4x4 boards."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .types import BOARD_SIZE, Board, BoardCell, Player

NUM_CELLS = BOARD_SIZE * BOARD_SIZE
FULL_MASK = (1 << NUM_CELLS) - 1

# Weight of each cell in row-major order: (0, 0) -> 1, (3, 3) -> 1 << 15
_BIT_WEIGHTS = (1 << np.arange(NUM_CELLS, dtype=np.int64)).reshape(BOARD_SIZE, BOARD_SIZE)


def position_to_bit(row: int, column: int) -> int:
    """
    Get the mask bit of a board position.

    Args:
        row: Row index (0-3).
        column: Column index (0-3).

    Returns:
        Integer with only the bit for (row, column) set.
    """
    if not (0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE):
        raise ValueError(f"Invalid position ({row}, {column}). Must be 0-{BOARD_SIZE - 1}.")
    return 1 << (row * BOARD_SIZE + column)


def bit_to_position(bit: int) -> BoardCell:
    """Inverse of position_to_bit for a bit index 0-15."""
    if not 0 <= bit < NUM_CELLS:
        raise ValueError(f"Invalid bit index {bit}. Must be 0-{NUM_CELLS - 1}.")
    row, column = divmod(bit, BOARD_SIZE)
    return BoardCell(row=row, column=column)


def popcount(mask: int) -> int:
    return bin(mask).count("1")


def mask_to_cells(mask: int) -> Tuple[BoardCell, ...]:
    """
    List the positions set in a mask.

    Args:
        mask: 16-bit position mask.

    Returns:
        Positions in row-major order.
    """
    return tuple(bit_to_position(bit) for bit in range(NUM_CELLS) if mask & (1 << bit))


def board_to_masks(board: Board) -> Tuple[int, int]:
    """
    Compute the move masks of both players.

    Args:
        board: (4, 4) array of Player values.

    Returns:
        Tuple of (x_mask, o_mask).
    """
    board = np.asarray(board)
    x_mask = int(np.sum(_BIT_WEIGHTS[board == Player.X]))
    o_mask = int(np.sum(_BIT_WEIGHTS[board == Player.O]))
    return x_mask, o_mask
