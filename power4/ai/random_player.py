"""
random_player.py - Placeholder computer player for Power4

Picks uniformly among the columns that still have room. There is no strategy
behind it; it only honours the computer-move contract.
"""

import random
from typing import Optional

import numpy as np

from power4.debug import debug
from power4.utils import PlayerId, open_columns


class RandomComputer:
    """Computer player choosing a random open column."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def __call__(self, grid: np.ndarray, player: PlayerId) -> int:
        """
        Choose a column for a player.

        Args:
            grid: Snapshot of the board grid
            player: The player to move

        Returns:
            A 1-indexed column that is not full
        """
        columns = [int(col) for col in open_columns(grid)]
        if not columns:
            raise ValueError("No open column left on the grid")

        column = self.rng.choice(columns)
        debug.debug(f"{player} picks column {column} among {columns}", "ai")
        return column
