import io
import random

import pytest

from minesolve.app import MinesweeperApp, main
from minesolve.board import Board


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def play(app, limit=10_000):
    for _ in range(limit):
        if app.highlighter.finished:
            return
        app.update()
    raise AssertionError("playback did not finish")


def test_playback_leaves_solver_flags_on_board():
    board = Board.from_preset([[1, 0], [0, 0]])
    app = MinesweeperApp(board, clock=FakeClock(), out=io.StringIO(), delay=0)
    assert app.initialization() is True
    play(app)
    flagged_on_board = {(n.row, n.col) for n in board if n.number == -1}
    assert flagged_on_board == app.backtracking.flagged
    assert len(flagged_on_board) == 1


def test_initialization_loads_solver_script():
    board = Board.from_preset([[1, 1], [0, 0]])
    app = MinesweeperApp(board, clock=FakeClock(), out=io.StringIO(), delay=0)
    app.initialization()
    assert app.highlighter.steps == app.backtracking.steps
    assert [tuple(g) for g in app.highlighter.flags] == list(app.backtracking.flags)


def test_click_on_mine_and_blank():
    mines = Board.random(2, 2, 4, random.Random(3))
    app = MinesweeperApp(mines, clock=FakeClock(), out=io.StringIO())
    app.click(1, 1)
    assert mines.node(1, 1).number == -6

    empty = Board.random(2, 2, 0, random.Random(3))
    app = MinesweeperApp(empty, clock=FakeClock(), out=io.StringIO())
    app.click(0, 1)
    assert empty.node(0, 1).number == -2


def test_click_out_of_bounds():
    app = MinesweeperApp(Board.from_preset([[0]]), clock=FakeClock(), out=io.StringIO())
    with pytest.raises(IndexError):
        app.click(3, 3)


def test_render_marks_highlight():
    app = MinesweeperApp(Board.from_preset([[1, 0]]), clock=FakeClock(), out=io.StringIO())
    assert app.render() == "[1] . "


def test_render_has_one_line_per_row():
    board = Board.random(3, 4, 2, random.Random(7))
    app = MinesweeperApp(board, clock=FakeClock(), out=io.StringIO())
    lines = app.render().split("\n")
    assert len(lines) == board.rows
    assert all(len(line) == 3 * board.cols for line in lines)


def test_main_runs_to_completion(capsys):
    code = main(["--rows", "3", "--cols", "3", "--mines", "2", "--seed", "1", "--delay", "0"])
    assert code == 0
    assert "Step[0] at (" in capsys.readouterr().out


def test_main_rejects_too_many_mines():
    with pytest.raises(SystemExit) as info:
        main(["--rows", "2", "--cols", "2", "--mines", "9", "--delay", "0"])
    assert info.value.code == 2