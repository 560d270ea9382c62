"""
power4/ai/__init__.py - Computer players for Power4

Computer players are plain callables taking a grid snapshot and the acting
player, and returning a 1-indexed column.
"""

from power4.ai.random_player import RandomComputer

__all__ = ['RandomComputer']
