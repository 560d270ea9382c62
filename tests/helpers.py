"""Shared fixtures for the Power4 tests."""

from typing import Iterable, List

from power4.game.board import Board
from power4.game.errors import InputExhausted
from power4.game.match import MatchObserver
from power4.utils import ROWS, PlayerId, Position

# Playing these columns in order, P1 first, fills the board without any
# four in a row: rows alternate between OOXXOOX and XXOOXXO patterns.
DRAW_SEQUENCE = [1, 3, 2, 4, 5, 7, 6] * ROWS


def draw_grid_board() -> Board:
    board = Board()
    for index, column in enumerate(DRAW_SEQUENCE):
        player = PlayerId.P1 if index % 2 == 0 else PlayerId.P2
        board.place(board.drop(column), player)
    return board


def board_with(player: PlayerId, cells: Iterable) -> Board:
    board = Board()
    for x, y in cells:
        board.place(Position(x, y), player)
    return board


class ScriptedInput:
    """Human input returning canned lines, then reporting exhausted input."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.requests: List[PlayerId] = []

    def __call__(self, player: PlayerId) -> str:
        self.requests.append(player)
        if not self.lines:
            raise InputExhausted("script finished")
        return self.lines.pop(0)


class ScriptedComputer:
    """Computer move returning canned columns."""

    def __init__(self, columns: Iterable[int]):
        self.columns = list(columns)
        self.calls = []

    def __call__(self, grid, player: PlayerId) -> int:
        self.calls.append((grid, player))
        return self.columns.pop(0)


class RecordingObserver(MatchObserver):
    def __init__(self):
        self.events = []
        self.rejections = []
        self.grids = []
        self.outcomes = []

    def match_started(self, board):
        self.events.append("started")

    def turn_started(self, player):
        self.events.append(("turn", player.id))

    def move_rejected(self, player, error):
        self.rejections.append((player.id, error))

    def move_committed(self, player, position, grid):
        self.events.append(("move", player.id, position))
        self.grids.append(grid)

    def match_finished(self, outcome):
        self.outcomes.append(outcome)


def line_reader(lines: Iterable[str]):
    """read_line callable for the CLI, raising EOFError once lines run out."""
    pending = list(lines)

    def read_line() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line

