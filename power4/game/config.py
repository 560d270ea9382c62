"""
config.py - Match configuration for Power4

A Configuration tells the match controller which seat is played by a human
and which by the computer.
"""

from dataclasses import dataclass
from enum import Enum

from power4.debug import debug
from power4.utils import PlayerId


class Mode(Enum):
    SOLO = "solo"     # One human against the computer
    MULTI = "multi"   # Two humans


class Kind(Enum):
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass(frozen=True)
class PlayerRecord:
    id: PlayerId
    kind: Kind = Kind.HUMAN

    @property
    def is_computer(self) -> bool:
        return self.kind is Kind.COMPUTER


@dataclass(frozen=True)
class Configuration:
    """Mode and seats of a match."""
    mode: Mode
    player1: PlayerRecord
    player2: PlayerRecord

    @classmethod
    def solo(cls, human: PlayerId = PlayerId.P1) -> 'Configuration':
        """One human seat, the other one played by the computer."""
        def kind(seat: PlayerId) -> Kind:
            return Kind.HUMAN if seat is human else Kind.COMPUTER

        return cls(Mode.SOLO,
                   PlayerRecord(PlayerId.P1, kind(PlayerId.P1)),
                   PlayerRecord(PlayerId.P2, kind(PlayerId.P2)))

    @classmethod
    def multi(cls) -> 'Configuration':
        return cls(Mode.MULTI, PlayerRecord(PlayerId.P1), PlayerRecord(PlayerId.P2))

    @classmethod
    def automated(cls) -> 'Configuration':
        """Computer against computer, for unattended games."""
        return cls(Mode.SOLO,
                   PlayerRecord(PlayerId.P1, Kind.COMPUTER),
                   PlayerRecord(PlayerId.P2, Kind.COMPUTER))

    def player(self, player_id: PlayerId) -> PlayerRecord:
        return self.player1 if player_id is PlayerId.P1 else self.player2

    def is_consistent(self) -> bool:
        """
        Check the seat rules of the mode: solo has exactly one computer,
        multi has none. Two computers are accepted for automated games.
        The match runs either way; this only drives a warning.
        """
        computers = sum(record.is_computer for record in (self.player1, self.player2))
        if self.mode is Mode.SOLO:
            return computers >= 1
        return computers == 0

    def validate(self) -> 'Configuration':
        """Check seat ids and warn about mode/kind mismatches."""
        if self.player1.id is not PlayerId.P1 or self.player2.id is not PlayerId.P2:
            raise ValueError("player1 must be P1 and player2 must be P2")
        if not self.is_consistent():
            debug.warning(f"{self.mode.name} mode with seats {self.player1.kind.name}/"
                          f"{self.player2.kind.name}; computer seats are played by "
                          f"the computer regardless of mode", "match")
        return self
