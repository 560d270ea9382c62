"""
power4 - Power4 (Connect Four) game played over a text interface

This package provides the game engine (board model, win detection and the
turn state machine), a placeholder computer player, and a command-line
interface for human-vs-human or human-vs-computer matches.
"""

# Version number
__version__ = '0.1.0'
