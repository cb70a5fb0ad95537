"""Winning patterns of the 4x4 board.

Bit ``i`` of a mask is the row-major position ``i``: bit 0 is (0, 0),
bit 3 is (0, 3), bit 15 is (3, 3).
"""

from __future__ import annotations

from typing import Sequence, Tuple

from .types import WinningState

NO_WINNING_STATE = WinningState(bitmask=0b0000000000000000, description="No winner")

_FOUR_CORNERS = WinningState(bitmask=0b1001000000001001, description="All four corners")

# Scanned in order, first match wins. The four-corners entry appears five times;
# this is the historical table and win codes are identical to the unique one.
WINNING_STATES: Tuple[WinningState, ...] = (
    WinningState(0b0000000000001111, "Row 0"),
    WinningState(0b0000000011110000, "Row 1"),
    WinningState(0b0000111100000000, "Row 2"),
    WinningState(0b1111000000000000, "Row 3"),
    WinningState(0b0001000100010001, "Column 0"),
    WinningState(0b0010001000100010, "Column 1"),
    WinningState(0b0100010001000100, "Column 2"),
    WinningState(0b1000100010001000, "Column 3"),
    WinningState(0b1000010000100001, "Upper left to lower right diagonal"),
    WinningState(0b0001001001001000, "Upper right to lower left diagonal"),
    _FOUR_CORNERS,
    _FOUR_CORNERS,
    _FOUR_CORNERS,
    _FOUR_CORNERS,
    _FOUR_CORNERS,
    WinningState(0b0000000000110011, "2x2 box in the upper left corner"),
    WinningState(0b0000000001100110, "2x2 box in the top middle"),
    WinningState(0b0000000011001100, "2x2 box in the upper right corner"),
    WinningState(0b0000001100110000, "2x2 box in the middle left"),
    WinningState(0b0000011001100000, "2x2 box in the center"),
    WinningState(0b0000110011000000, "2x2 box in the middle right"),
    WinningState(0b0011001100000000, "2x2 box in the lower left corner"),
    WinningState(0b0110011000000000, "2x2 box in the bottom middle"),
    WinningState(0b1100110000000000, "2x2 box in the lower right corner"),
)


def unique_states(states: Sequence[WinningState]) -> Tuple[WinningState, ...]:
    """Drop repeated patterns, keeping the first occurrence of each."""
    seen = set()
    unique = []
    for state in states:
        if state in seen:
            continue
        seen.add(state)
        unique.append(state)
    return tuple(unique)


UNIQUE_WINNING_STATES = unique_states(WINNING_STATES)
