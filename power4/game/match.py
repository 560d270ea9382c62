"""
match.py - Match controller for Power4

This module drives a match turn by turn: it asks the acting player's
collaborator (human input or computer) for a column, resolves and commits the
move on the board, and decides whether the match is won, drawn or goes on.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import numpy as np

from power4.ai.random_player import RandomComputer
from power4.debug import debug
from power4.game.board import Board
from power4.game.config import Configuration, PlayerRecord
from power4.game.errors import (ColumnError, ComputerMoveError, InputExhausted,
                                MatchOverError)
from power4.utils import NB_CELLS, MatchState, PlayerId, Position

HumanInput = Callable[[PlayerId], str]
ComputerMove = Callable[[np.ndarray, PlayerId], int]


@dataclass(frozen=True)
class MatchOutcome:
    """Terminal result of a match."""
    state: MatchState
    winner: Optional[PlayerId] = None
    moves: int = 0
    winning_line: List[Position] = field(default_factory=list)


class MatchObserver:
    """
    Receives match events, typically to render them.

    Every hook is a no-op here; subclasses override the ones they need.
    """

    def match_started(self, board: Board) -> None:
        pass

    def turn_started(self, player: PlayerRecord) -> None:
        pass

    def move_rejected(self, player: PlayerRecord, error: ColumnError) -> None:
        pass

    def move_committed(self, player: PlayerRecord, position: Position,
                       grid: np.ndarray) -> None:
        pass

    def match_finished(self, outcome: MatchOutcome) -> None:
        pass


class Match:
    """
    Turn state machine of a single match.

    P1 always moves first and players alternate strictly. The match owns its
    board; collaborators only ever see copies of the grid.
    """

    def __init__(self, config: Configuration,
                 human_input: Optional[HumanInput] = None,
                 computer_move: Optional[ComputerMove] = None,
                 observer: Optional[MatchObserver] = None):
        """
        Create a match on an empty board.

        Args:
            config: Seats and mode of the match
            human_input: Returns one raw line per request for a human seat
            computer_move: Returns a 1-indexed column for a computer seat
            observer: Receives match events (no-op by default)
        """
        self.config = config.validate()
        if human_input is None and not (config.player1.is_computer and
                                        config.player2.is_computer):
            raise ValueError("A human seat needs a human_input collaborator")

        self.human_input = human_input
        self.computer_move = computer_move if computer_move is not None else RandomComputer()
        self.observer = observer if observer is not None else MatchObserver()

        self.board = Board()
        self.turn = PlayerId.P1
        self.move_count = 0
        self.history: List[Tuple[PlayerId, Position]] = []
        self.state = MatchState.AWAITING_MOVE
        self.winner: Optional[PlayerId] = None
        self.winning_line: List[Position] = []
        self._started = False
        debug.debug(f"New match: {config.mode.name}, P1={config.player1.kind.name}, "
                    f"P2={config.player2.kind.name}", "match")

    @property
    def current_player(self) -> PlayerRecord:
        return self.config.player(self.turn)

    @property
    def outcome(self) -> MatchOutcome:
        return MatchOutcome(self.state, self.winner, self.move_count, list(self.winning_line))

    def _start(self) -> None:
        if not self._started:
            self._started = True
            self.observer.match_started(self.board)

    def _computer_position(self, player: PlayerRecord) -> Position:
        debug.start_timer("computer_move")
        try:
            column = self.computer_move(self.board.snapshot(), player.id)
        finally:
            debug.end_timer("computer_move", "match")
        try:
            return self.board.drop(column)
        except ColumnError as e:
            debug.error(f"Computer {player.id} proposed column {column!r}: {e}", "match")
            raise ComputerMoveError(
                f"Computer {player.id} proposed an unplayable column {column!r}") from e

    def _human_position(self, player: PlayerRecord) -> Position:
        while True:
            raw = self.human_input(player.id)
            try:
                return self.board.drop(raw)
            except ColumnError as e:
                debug.debug(f"{player.id} rejected input {raw!r}: {type(e).__name__}", "match")
                self.observer.move_rejected(player, e)

    def _next_position(self, player: PlayerRecord) -> Position:
        if player.is_computer:
            return self._computer_position(player)
        if self.human_input is None:
            raise ValueError(f"No human_input collaborator for {player.id}")
        return self._human_position(player)

    def play_turn(self) -> MatchState:
        """
        Play one move for the current player.

        Returns:
            The state after the move: AWAITING_MOVE, WON or DRAW

        Raises:
            MatchOverError: if the match already reached a terminal state
            InputExhausted: if the human input stream ended
            ComputerMoveError: if a computer proposed an unplayable column
        """
        if self.state.is_terminal():
            raise MatchOverError(f"Match is over ({self.state.name})")
        self._start()

        player = self.current_player
        self.observer.turn_started(player)
        position = self._next_position(player)

        self.board.place(position, player.id)
        self.move_count += 1
        self.history.append((player.id, position))
        self.observer.move_committed(player, position, self.board.snapshot())

        line = self.board.find_four(position, player.id)
        if line is not None:
            self.state = MatchState.WON
            self.winner = player.id
            self.winning_line = line[1]
            debug.info(f"{player.id} wins after {self.move_count} moves", "match")
        elif self.move_count == NB_CELLS:
            self.state = MatchState.DRAW
            debug.info("Match ends in a draw", "match")
        else:
            self.turn = self.turn.other()
            debug.trace(f"Turn passes to {self.turn}", "match")
            return self.state

        self.observer.match_finished(self.outcome)
        return self.state

    def abort(self) -> MatchOutcome:
        """Stop the match without a result."""
        if self.state.is_terminal():
            raise MatchOverError(f"Match is over ({self.state.name})")
        self.state = MatchState.ABORTED
        debug.warning(f"Match aborted after {self.move_count} moves", "match")
        self.observer.match_finished(self.outcome)
        return self.outcome

    def run(self) -> MatchOutcome:
        """
        Play the match until it is won, drawn or aborted.

        Running out of human input aborts the match.
        """
        self._start()
        while not self.state.is_terminal():
            try:
                self.play_turn()
            except InputExhausted:
                return self.abort()
        return self.outcome
