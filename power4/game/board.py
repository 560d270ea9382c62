"""
board.py - Board representation and core game mechanics for Power4

This module implements the Board class which owns the grid, resolves where a
piece dropped into a column lands, commits pieces, and checks for four in a
row through a freshly placed piece.
"""

import numbers
import re
from typing import List, Optional, Tuple, Union

import numpy as np

from power4.debug import debug
from power4.game.errors import ColumnFull, ColumnOutOfRange, InvalidInput
from power4.utils import (ROWS, COLS, CONNECT_N, NB_CELLS, EMPTY, Direction,
                          DIRECTION_VECTORS, PlayerId, Position, empty_grid,
                          is_valid_position, open_columns, render_grid_ascii)

_INTEGER = re.compile(r"([+-]?)0*(\d+)", re.ASCII)
_MAX_DIGITS = 9

WinningLine = Tuple[Direction, List[Position]]


def parse_column(choice: Union[str, int]) -> int:
    """
    Turn a raw column choice into a 1-indexed column number.

    Args:
        choice: Raw text typed by a player, or an integer

    Returns:
        The column number, guaranteed to be within 1..COLS

    Raises:
        InvalidInput: if the choice is not an integer; it carries the raw
            text, or the repr of a non-text choice
        ColumnOutOfRange: if the integer is outside 1..COLS
    """
    if isinstance(choice, str):
        match = _INTEGER.fullmatch(choice.strip())
        if not match:
            raise InvalidInput(choice)
        sign, digits = match.groups()
        # Too many digits to be a column, and possibly too many for int()
        if len(digits) > _MAX_DIGITS:
            raise ColumnOutOfRange(sign + digits)
        number = int(sign + digits)
    elif isinstance(choice, numbers.Integral) and not isinstance(choice, bool):
        number = int(choice)
    else:
        raise InvalidInput(repr(choice))

    if not 1 <= number <= COLS:
        raise ColumnOutOfRange(number)
    return number


class Board:
    """
    Represents a Power4 game board.

    Cells hold EMPTY or the value of the PlayerId occupying them. Row 0 is the
    top row; pieces fall towards row ROWS - 1.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board, empty unless a grid is given.

        Args:
            grid: Optional ROWS x COLS array to start from (copied)
        """
        if grid is None:
            self.grid = empty_grid()
        else:
            if grid.shape != (ROWS, COLS):
                raise ValueError(f"Grid must have shape {(ROWS, COLS)}, got {grid.shape}")
            self.grid = np.array(grid, dtype=np.int8)
        debug.trace("Initialized board", "board")

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        return Board(self.grid)

    def drop(self, column: Union[str, int]) -> Position:
        """
        Find where a piece dropped into a column would land.

        The board is not modified; commit the result with place().

        Args:
            column: 1-indexed column, as raw text or an integer

        Returns:
            The lowest empty cell of the column

        Raises:
            InvalidInput, ColumnOutOfRange: see parse_column()
            ColumnFull: if the column has no empty cell
        """
        number = parse_column(column)
        x = number - 1
        for y in range(ROWS - 1, -1, -1):
            if self.grid[y, x] == EMPTY:
                debug.trace(f"Column {number} resolves to {(x, y)}", "board")
                return Position(x, y)

        debug.debug(f"Column {number} is full", "board")
        raise ColumnFull(number)

    def place(self, position: Position, player: PlayerId) -> None:
        """
        Mark a cell as occupied by a player.

        Args:
            position: A position obtained from drop() on the current board
            player: The player placing the piece
        """
        x, y = position
        if self.grid[y, x] != EMPTY:
            raise ValueError(f"Cell {(x, y)} is already occupied")
        self.grid[y, x] = player.value
        debug.debug(f"{player} placed at {(x, y)}", "board")

    def find_four(self, position: Position, player: PlayerId) -> Optional[WinningLine]:
        """
        Look for four in a row for a player through a position.

        Every direction is tried with each window of CONNECT_N cells that
        contains the position. Windows that leave the board are skipped.

        Args:
            position: The cell a piece was just placed on
            player: The player to check for

        Returns:
            (direction, cells) of the first complete window, or None
        """
        x, y = position
        for direction, (dx, dy) in DIRECTION_VECTORS.items():
            for offset in range(-(CONNECT_N - 1), 1):
                cells = [Position(x + (offset + i) * dx, y + (offset + i) * dy)
                         for i in range(CONNECT_N)]
                if all(is_valid_position(cx, cy) and self.grid[cy, cx] == player.value
                       for cx, cy in cells):
                    debug.debug(f"{player} has four {direction.name.lower()} at {cells}",
                                "board")
                    return direction, cells
        return None

    def has_four(self, position: Position, player: PlayerId) -> bool:
        """Check whether a player has four in a row through a position."""
        return self.find_four(position, player) is not None

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid != EMPTY))

    def is_full(self) -> bool:
        return self.occupied_count() == NB_CELLS

    def valid_columns(self) -> List[int]:
        """1-indexed columns that can still take a piece."""
        return [int(col) for col in open_columns(self.grid)]

    def snapshot(self) -> np.ndarray:
        """Copy of the grid, safe to hand to collaborators."""
        return self.grid.copy()

    def render(self) -> str:
        return render_grid_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
