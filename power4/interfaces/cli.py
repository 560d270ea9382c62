"""
cli.py - Command-line interface for Power4

This module provides the text front end of the game: the setup dialogue
choosing the mode and seats, console input for human players, a renderer
printing the board and match events, and the argument parsing that wires
everything to the match controller.
"""

import argparse
import sys
from typing import Callable, List, Optional, TextIO

import numpy as np

from power4.ai.random_player import RandomComputer
from power4.debug import debug, DebugLevel
from power4.game.board import Board
from power4.game.config import Configuration, PlayerRecord
from power4.game.errors import ColumnError, ComputerMoveError, InputExhausted
from power4.game.match import Match, MatchObserver, MatchOutcome
from power4.utils import MatchState, PlayerId, Position, render_grid_ascii

# Process exit codes
EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_INTERNAL_ERROR = 2
EXIT_INTERRUPTED = 130

ReadLine = Callable[[], str]


def _read(read_line: ReadLine) -> str:
    try:
        return read_line()
    except EOFError as e:
        raise InputExhausted("Input stream closed") from e


def _invalid(out: TextIO, answer: str) -> None:
    print(f'"{answer}" is an invalid input. Please try again.\n', file=out)


def choose_mode(read_line: ReadLine, out: TextIO) -> str:
    """Ask for the game mode until the answer is 's' or 'm'."""
    while True:
        print("Please, choose your game mode\n"
              "s: solo player\n"
              "m: multi player\n", file=out)
        answer = _read(read_line).strip()
        if answer.lower() in ("s", "m"):
            return answer.lower()
        _invalid(out, answer)


def choose_seat(read_line: ReadLine, out: TextIO) -> PlayerId:
    """Ask which seat the human takes in solo mode."""
    while True:
        print("What player number do you want to be ?\n"
              "1: player 1\n"
              "2: player 2\n", file=out)
        answer = _read(read_line).strip()
        if answer == "1":
            return PlayerId.P1
        if answer == "2":
            return PlayerId.P2
        _invalid(out, answer)


def setup_dialogue(read_line: ReadLine = input, out: TextIO = sys.stdout) -> Configuration:
    """
    Run the pre-game dialogue.

    Raises:
        InputExhausted: if the input stream ends before setup is complete
    """
    print("Welcome to Power4 !\n", file=out)
    if choose_mode(read_line, out) == "m":
        config = Configuration.multi()
    else:
        config = Configuration.solo(human=choose_seat(read_line, out))
    debug.info(f"Setup chose {config.mode.name} mode", "cli")
    return config


class ConsoleInput:
    """Human input collaborator reading one line per request."""

    def __init__(self, read_line: ReadLine = input):
        self.read_line = read_line

    def __call__(self, player: PlayerId) -> str:
        line = _read(self.read_line)
        debug.trace(f"{player} typed {line!r}", "cli")
        return line.strip()


class TextRenderer(MatchObserver):
    """Prints the board and match events as text."""

    def __init__(self, out: TextIO = sys.stdout):
        self.out = out

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def show_grid(self, grid: np.ndarray) -> None:
        self._print()
        self._print(render_grid_ascii(grid))
        self._print()

    def match_started(self, board: Board) -> None:
        self._print("\nHere the game begins !")
        self.show_grid(board.snapshot())

    def turn_started(self, player: PlayerRecord) -> None:
        if not player.is_computer:
            self._print(f"{player.id}, it's your turn.\nPlease choose a column.\n")

    def move_rejected(self, player: PlayerRecord, error: ColumnError) -> None:
        self._print(f"{error}\nPlease try again.\n")

    def move_committed(self, player: PlayerRecord, position: Position,
                       grid: np.ndarray) -> None:
        if player.is_computer:
            self._print(f"{player.id} plays column {position.x + 1}.")
        self.show_grid(grid)

    def match_finished(self, outcome: MatchOutcome) -> None:
        if outcome.state is MatchState.WON:
            self._print(f"Congrats {outcome.winner}, you won !\n")
        elif outcome.state is MatchState.DRAW:
            self._print("It's a draw !\n")
        else:
            self._print("Game aborted.\n")


class Power4CLI:
    """Command-line interface for playing Power4."""

    def __init__(self, read_line: ReadLine = input, out: TextIO = sys.stdout):
        self.read_line = read_line
        self.out = out
        self.args: Optional[argparse.Namespace] = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='power4', description='Power4 (Connect Four) game')
        parser.add_argument('--mode', choices=['solo', 'multi', 'auto'],
                            help='Game mode; asked interactively when omitted')
        parser.add_argument('--player', type=int, choices=[1, 2], default=1,
                            help='Seat of the human player in solo mode')
        parser.add_argument('--seed', type=int, default=None,
                            help='Random seed for the computer player')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)
        return self.args

    def configuration(self) -> Configuration:
        """Configuration from the command line, or from the setup dialogue."""
        mode = self.args.mode
        if mode == 'multi':
            return Configuration.multi()
        if mode == 'solo':
            return Configuration.solo(human=PlayerId(self.args.player))
        if mode == 'auto':
            return Configuration.automated()
        return setup_dialogue(self.read_line, self.out)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Play one match and return the process exit code."""
        if self.args is None:
            self.parse_args(argv)

        try:
            config = self.configuration()
            match = Match(config,
                          human_input=ConsoleInput(self.read_line),
                          computer_move=RandomComputer(self.args.seed),
                          observer=TextRenderer(self.out))
            outcome = match.run()
        except InputExhausted:
            debug.warning("Input closed during setup", "cli")
            print("\nNo more input, quitting.", file=self.out)
            return EXIT_ABORTED
        except ComputerMoveError as e:
            debug.error(str(e), "cli")
            print(f"Internal error: {e}", file=sys.stderr)
            return EXIT_INTERNAL_ERROR
        except KeyboardInterrupt:
            print("\nInterrupted.", file=self.out)
            return EXIT_INTERRUPTED

        return EXIT_ABORTED if outcome.state is MatchState.ABORTED else EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return Power4CLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
