"""A terminal minesweeper game on square grids: cells, the board and text menus."""

__version__ = "0.1.0"
__all__ = ["board", "cell", "cli"]