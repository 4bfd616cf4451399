"""A single square of the minefield."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

_ids = itertools.count()


@dataclass
class Cell:
    """One square: whether it holds a mine, and what the player has done to it."""

    id: int = field(default_factory=lambda: next(_ids))
    adjacent_mines: int = 0
    marker: str = "O"
    has_mine: bool = False
    is_guessed: bool = False
    is_flagged: bool = False

    def show(self) -> str:
        """Update the marker from the cell's state and return it.

        The marker keeps its last value when no rule applies, so a flag
        stays visible even after the flag itself is cleared.
        """
        if self.has_mine and self.is_guessed:
            self.marker = "X"
        elif self.is_guessed:
            self.marker = str(self.adjacent_mines)
        elif self.is_flagged:
            self.marker = "F"
        elif self.has_mine:
            self.marker = "M"
        return self.marker