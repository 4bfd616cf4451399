"""Text menus for playing the game on a terminal."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from minegrid.board import GameBoard, GameStatus

Reader = Callable[[], str]
Writer = Callable[[str], object]

GRID_SIZES = {1: 9, 2: 36, 3: 81}


def _read_int(read: Reader) -> int | None:
    words = read().split()
    try:
        return int(words[0]) if words else None
    except ValueError:
        return None


def grid_size_menu(read: Reader, write: Writer) -> GameBoard | None:
    """Ask for a grid size and build the board; None when the player quits."""
    while True:
        write("--- NEW GAME ---")
        write("Please select grid size:")
        write("1. 3*3")
        write("2. 6*6")
        write("3. 9*9")
        write("0. QUIT")
        choice = _read_int(read)
        if choice == 0:
            return None
        if choice in GRID_SIZES:
            return GameBoard(GRID_SIZES[choice])


def play_turn(board: GameBoard, read: Reader, write: Writer) -> GameStatus:
    """Ask for one move, apply it and return the resulting game status."""
    write("What would you like to do?")
    write("1. Flag")
    write("2. Guess")
    choice = _read_int(read)
    write("Enter coordinate  : ")
    words = read().split()
    coord = words[0] if words else ""
    try:
        cell = board.find_cell(coord)
    except ValueError:
        write("INVALID COORDINATE!")
        return GameStatus.ACTIVE
    board.count_adjacent_mines(cell)
    if choice == 1:
        board.flag_cell(cell)
    elif choice == 2:
        board.reveal_cell(cell)
    return board.check_status(cell)


def game_menu(read: Reader, write: Writer) -> None:
    """Play one game from choosing the grid size to winning or losing."""
    board = grid_size_menu(read, write)
    if board is None:
        return
    status = GameStatus.ACTIVE
    while status is GameStatus.ACTIVE:
        write(board.render())
        status = play_turn(board, read, write)
    write("YOU HAVE WON!" if status is GameStatus.WIN else "YOU HAVE LOST!")


def main_menu(read: Reader, write: Writer) -> None:
    """Offer new games until the player quits."""
    while True:
        write("--- MAIN MENU ---")
        write("1. START NEW GAME")
        write("0. QUIT")
        choice = _read_int(read)
        if choice == 1:
            game_menu(read, write)
        elif choice == 0:
            return
        else:
            write("PLEASE ENTER A VALID CHOICE!")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minegrid", description="Play minesweeper in the terminal.")
    parser.parse_args(argv)
    try:
        main_menu(input, print)
    except (EOFError, KeyboardInterrupt):
        pass
    return 0