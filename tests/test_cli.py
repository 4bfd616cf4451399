from unittest.mock import patch

from minegrid.board import GameBoard, GameStatus
from minegrid.cli import game_menu, grid_size_menu, main, main_menu, play_turn


def scripted(*answers):
    it = iter(answers)
    return lambda: next(it)


def test_grid_size_menu_builds_boards():
    out = []
    assert grid_size_menu(scripted("1"), out.append).num_cells == 9
    assert grid_size_menu(scripted("3"), out.append).num_cells == 81
    assert "--- NEW GAME ---" in out


def test_grid_size_menu_quit():
    assert grid_size_menu(scripted("0"), [].append) is None


def test_grid_size_menu_reprompts_on_invalid():
    out = []
    board = grid_size_menu(scripted("7", "oops", "2"), out.append)
    assert board.num_cells == 36
    assert out.count("--- NEW GAME ---") == 3


def test_play_turn_reveal_mine_loses():
    board = GameBoard(9, mines=[0, 1, 2])
    assert play_turn(board, scripted("2", "A1"), [].append) is GameStatus.LOSS
    assert board.cells[0].is_guessed


def test_play_turn_flag():
    mines = [0, 1, 2]
    board = GameBoard(9, mines=mines)
    status = play_turn(board, scripted("1", "B2"), [].append)
    assert status is GameStatus.ACTIVE
    assert board.cells[4].is_flagged
    assert board.cells[4].adjacent_mines == len(mines)


def test_play_turn_invalid_coordinate():
    board = GameBoard(9, mines=[0, 1, 2])
    out = []
    assert play_turn(board, scripted("2", "Z9"), out.append) is GameStatus.ACTIVE
    assert "INVALID COORDINATE!" in out
    assert board.revealed_cells == 0


def test_game_menu_quit_from_grid_menu():
    out = []
    game_menu(scripted("0"), out.append)
    assert "YOU HAVE WON!" not in out and "YOU HAVE LOST!" not in out
    assert out[0] == "--- NEW GAME ---"


def test_game_menu_plays_to_an_end():
    answers = ["1"]
    for row in "ABC":
        for col in "123":
            answers += ["2", row + col]
    out = []
    game_menu(scripted(*answers), out.append)
    endings = [line for line in out if line in ("YOU HAVE WON!", "YOU HAVE LOST!")]
    assert len(endings) == 1
    assert out[-1] == endings[0]


def test_main_menu_invalid_then_quit():
    out = []
    main_menu(scripted("5", "0"), out.append)
    assert "PLEASE ENTER A VALID CHOICE!" in out
    assert out.count("--- MAIN MENU ---") == 2


def test_main_menu_returns_after_game():
    out = []
    main_menu(scripted("1", "0", "0"), out.append)
    assert out.count("--- MAIN MENU ---") == 2
    assert out.count("--- NEW GAME ---") == 1


def test_main_quits(capsys):
    with patch("builtins.input", side_effect=["0"]):
        assert main([]) == 0
    assert "--- MAIN MENU ---" in capsys.readouterr().out


def test_main_end_of_input():
    with patch("builtins.input", side_effect=EOFError):
        assert main([]) == 0