"""
power4.game - Core game mechanics for Power4

This package contains the board representation, the match configuration,
the error hierarchy and the match controller driving a game to its end.
"""

from power4.game.board import Board
from power4.game.config import Configuration, Kind, Mode, PlayerRecord
from power4.game.match import Match, MatchObserver, MatchOutcome

__all__ = ['Board', 'Configuration', 'Kind', 'Mode', 'PlayerRecord',
           'Match', 'MatchObserver', 'MatchOutcome']
