"""The minefield: layout, coordinates, mines and game state."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable
from enum import Enum

from minegrid.cell import Cell

log = logging.getLogger(__name__)


class GameStatus(Enum):
    ACTIVE = "active"
    WIN = "win"
    LOSS = "loss"


class Placement(Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"
    CENTER = "center"


# (row offset, column offset) of the neighbours that exist for each placement.
_NEIGHBOURS: dict[Placement, tuple[tuple[int, int], ...]] = {
    Placement.LEFT: ((-1, 0), (-1, 1), (0, 1), (1, 0), (1, 1)),
    Placement.RIGHT: ((-1, -1), (-1, 0), (0, -1), (1, -1), (1, 0)),
    Placement.TOP_RIGHT: ((0, -1), (1, -1), (1, 0)),
    Placement.BOTTOM_RIGHT: ((-1, -1), (-1, 0), (0, -1)),
    Placement.TOP_LEFT: ((0, 1), (1, 0), (1, 1)),
    Placement.BOTTOM_LEFT: ((-1, 0), (-1, 1), (0, 1)),
    Placement.TOP: ((0, -1), (0, 1), (1, -1), (1, 0), (1, 1)),
    Placement.BOTTOM: ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1)),
    Placement.CENTER: (
        (-1, -1), (-1, 0), (-1, 1),
        (0, -1), (0, 1),
        (1, -1), (1, 0), (1, 1),
    ),
}


class GameBoard:
    """A square grid of cells with rows labelled A, B, ... and columns 1, 2, ..."""

    def __init__(
        self,
        num_cells: int,
        mines: Iterable[int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        grid_size = math.isqrt(num_cells) if num_cells > 0 else 0
        if grid_size * grid_size != num_cells or not 2 <= grid_size <= 26:
            raise ValueError(f"cannot build a square board of {num_cells} cells")
        self.num_cells = num_cells
        self.grid_size = grid_size
        self.num_mines = grid_size
        self.revealed_cells = 0
        self.placement: Placement | None = None
        self.columns = list(range(1, grid_size + 1))
        self.rows = [chr(ord("A") + i) for i in range(grid_size)]
        self.cells = [Cell() for _ in range(num_cells)]
        if mines is None:
            rng = rng or random.Random()
            mines = rng.sample(range(num_cells), self.num_mines)
        self.place_mines(mines)
        log.debug("game board constructed with %d cells", num_cells)

    def _cell(self, index: int) -> Cell:
        if not 0 <= index < self.num_cells:
            raise IndexError(f"cell {index} is outside the board")
        return self.cells[index]

    def place_mines(self, positions: Iterable[int]) -> None:
        """Put mines exactly on the given cell indices."""
        chosen = set(positions)
        for index in chosen:
            self._cell(index)
        for index, cell in enumerate(self.cells):
            cell.has_mine = index in chosen
        self.num_mines = len(chosen)

    def _separator(self) -> str:
        return "  |--" + "-|--" * (self.grid_size - 1) + "-|"

    def render(self) -> str:
        """Draw the board as text, one grid row per pair of lines."""
        lines = [" " + "".join(f"   {column}" for column in self.columns), self._separator()]
        for label, start in zip(self.rows, range(0, self.num_cells, self.grid_size)):
            row = self.cells[start:start + self.grid_size]
            lines.append(f"{label} | " + " | ".join(cell.show() for cell in row) + " |")
            lines.append(self._separator())
        return "\n".join(lines)

    def find_cell(self, coord: str) -> int:
        """Turn a coordinate such as 'B3' into a cell index.

        The last letter names the row and all digits together name the column.
        """
        row = None
        digits = []
        for char in coord:
            if char.isascii() and char.isalpha():
                row = char
            if char.isascii() and char.isdigit():
                digits.append(char)
        if not digits:
            raise ValueError(f"no column in coordinate {coord!r}")
        column = int("".join(digits))
        if row not in self.rows:
            raise ValueError(f"unknown row in coordinate {coord!r}")
        if column not in self.columns:
            raise ValueError(f"unknown column in coordinate {coord!r}")
        row_index = self.rows.index(row)
        col_index = self.columns.index(column)
        log.debug("row index %d, column index %d", row_index, col_index)
        self.placement = self.placement_of(row_index, col_index)
        return row_index * self.grid_size + col_index

    def placement_of(self, row_index: int, col_index: int) -> Placement:
        """Where a position lies relative to the board's edges."""
        last_row = len(self.rows) - 1
        last_col = len(self.columns) - 1
        if row_index == 0:
            placement = Placement.TOP
            if col_index == 0:
                placement = Placement.TOP_LEFT
            if col_index == last_col:
                placement = Placement.TOP_RIGHT
            return placement
        if row_index == last_row:
            placement = Placement.BOTTOM
            if col_index == 0:
                placement = Placement.BOTTOM_LEFT
            if col_index == last_col:
                placement = Placement.BOTTOM_RIGHT
            return placement
        if col_index == 0:
            return Placement.LEFT
        if col_index == last_col:
            return Placement.RIGHT
        return Placement.CENTER

    def count_adjacent_mines(self, cell: int) -> int:
        """Count mines around a cell, store the count on it and return it."""
        target = self._cell(cell)
        placement = self.placement_of(*divmod(cell, self.grid_size))
        count = sum(
            self.cells[cell + dr * self.grid_size + dc].has_mine
            for dr, dc in _NEIGHBOURS[placement]
        )
        log.debug("%s: %d adjacent mines", placement.name, count)
        target.adjacent_mines = count
        return count

    def flag_cell(self, cell: int) -> None:
        self._cell(cell).is_flagged = True

    def reveal_cell(self, cell: int) -> None:
        self._cell(cell).is_guessed = True
        self.revealed_cells += 1

    def check_status(self, cell: int) -> GameStatus:
        """The game's state after a move on the given cell."""
        status = GameStatus.LOSS if self._cell(cell).has_mine else GameStatus.ACTIVE
        if self.num_cells - self.num_mines == self.revealed_cells:
            status = GameStatus.WIN
        return status