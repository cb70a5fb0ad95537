"""Board types shared by the parser and the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

# Size of a row or column
BOARD_SIZE = 4

# A board is a (BOARD_SIZE, BOARD_SIZE) int8 array of Player values
Board = np.ndarray


class Player(IntEnum):
    """Cell state: empty, or occupied by one of the two players."""

    NONE = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return "" if self is Player.NONE else self.name


@dataclass(frozen=True)
class BoardCell:
    row: int
    column: int


@dataclass(frozen=True)
class WinningState:
    """A winning pattern: a 16-bit mask of row-major positions and its name."""

    bitmask: int
    description: str


@dataclass(frozen=True)
class WinStatus:
    winner: Player
    win_code: int
    win_description: str
