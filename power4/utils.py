"""
utils.py - Constants, enumerations and helpers for Power4

This module provides the board dimensions, player and state enumerations,
direction vectors for win checking, and ASCII rendering of a grid.
"""

from enum import Enum, auto
from typing import Dict, NamedTuple, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
NB_CELLS = ROWS * COLS

EMPTY = 0  # Grid value of an unoccupied cell


class PlayerId(Enum):
    """The two seats of a match. Values double as grid markers."""
    P1 = 1    # Always moves first
    P2 = 2

    def other(self) -> 'PlayerId':
        """Get the other player."""
        return PlayerId.P2 if self is PlayerId.P1 else PlayerId.P1

    @property
    def symbol(self) -> str:
        return "O" if self is PlayerId.P1 else "X"

    def __str__(self):
        return self.name


class MatchState(Enum):
    """States of the match turn state machine."""
    AWAITING_MOVE = auto()
    WON = auto()
    DRAW = auto()
    ABORTED = auto()

    def is_terminal(self) -> bool:
        """Check if the match is over."""
        return self != MatchState.AWAITING_MOVE


class Direction(Enum):
    """Line directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right on screen
    DIAGONAL_UP = auto()    # Bottom-left to top-right on screen


# Direction vectors (dx, dy) for each direction, y grows downwards
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}


class Position(NamedTuple):
    """A grid cell: x is the column index, y the row index (0 is the top row)."""
    x: int
    y: int


def is_valid_position(x: int, y: int) -> bool:
    """Check if a position is within the board boundaries."""
    return 0 <= x < COLS and 0 <= y < ROWS


def empty_grid() -> np.ndarray:
    """Create an empty ROWS x COLS grid."""
    return np.full((ROWS, COLS), EMPTY, dtype=np.int8)


def open_columns(grid: np.ndarray) -> np.ndarray:
    """1-indexed columns of ``grid`` that still have an empty cell."""
    return np.flatnonzero(grid[0] == EMPTY) + 1


SEPARATOR = "|" + "+".join(["---"] * COLS) + "|"
HEADER = " " + "".join(f" {col}  " for col in range(1, COLS + 1))


def render_grid_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art, with 1-indexed column numbers on top.

    Args:
        grid: ROWS x COLS array of EMPTY or PlayerId values

    Returns:
        Multi-line string representation of the grid
    """
    symbols = {EMPTY: " "}
    symbols.update({player.value: player.symbol for player in PlayerId})

    lines = [HEADER, SEPARATOR]
    for row in grid:
        lines.append("|" + "|".join(f" {symbols[int(cell)]} " for cell in row) + "|")
        lines.append(SEPARATOR)
    return "\n".join(lines)
