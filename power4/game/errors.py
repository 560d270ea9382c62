"""
errors.py - Exceptions raised by the Power4 game engine
"""

from power4.utils import COLS


class Power4Error(Exception):
    """Base class for all Power4 errors."""


class ColumnError(Power4Error):
    """A column choice that cannot be played. Recoverable for human players."""


class InvalidInput(ColumnError):
    """The column choice is not an integer."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f'"{raw}" is an invalid proposition.')


class ColumnOutOfRange(ColumnError):
    """The column number is outside 1..COLS. Numbers too long to convert keep their text."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(
            f"{number} is not a correct column number.\n"
            f"You should choose a number between 1 and {COLS} (included).")


class ColumnFull(ColumnError):
    """The column has no empty cell left."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(f"Column {number} is full. You have to choose another one.")


class ComputerMoveError(Power4Error):
    """A computer player proposed a column that cannot be played."""


class InputExhausted(Power4Error):
    """The human input stream ended before a valid column was chosen."""


class MatchOverError(Power4Error):
    """A move was requested after the match reached a terminal state."""
