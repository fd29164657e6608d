"""Text front end that solves a board and animates the solver's script."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable
from typing import TextIO

from .backtracking import BackTracking
from .board import Board
from .highlighter import Highlighter
from .node import FLAGGED, REVEALED_BLANK, REVEALED_MINE, Node

_SYMBOLS = {0: ".", FLAGGED: "F", REVEALED_BLANK: " ", REVEALED_MINE: "*"}


def _symbol(node: Node) -> str:
    if node.number > 0:
        return str(node.number)
    return _SYMBOLS.get(node.number, "?")


class MinesweeperApp:
    """Couples a board with its solver and the highlighter that replays it."""

    def __init__(
        self,
        board: Board,
        *,
        clock: Callable[[], float] = time.monotonic,
        out: TextIO | None = None,
        delay: float = 0.5,
    ) -> None:
        self.board = board
        self.backtracking = BackTracking(board)
        self.highlighter = Highlighter(board, clock=clock, out=out, delay=delay)

    def initialization(self) -> bool:
        """Run the solver and load its script; return whether it found a solution."""
        solved = self.backtracking.run()
        self.highlighter.load_script(self.backtracking.steps, self.backtracking.flags)
        return solved

    def click(self, row: int, col: int) -> None:
        """Reveal a cell: a mine shows as a mine, anything else as blank."""
        node = self.board.node(row, col)
        node.number = REVEALED_MINE if self.board.is_mine(row, col) else REVEALED_BLANK

    def update(self) -> None:
        self.highlighter.update()

    def render(self) -> str:
        """The board as text, one line per row; the highlighted cell is bracketed."""
        lines = []
        for r in range(self.board.rows):
            cells = []
            for c in range(self.board.cols):
                node = self.board.node(r, c)
                sym = _symbol(node)
                cells.append(f"[{sym}]" if node.highlighted else f" {sym} ")
            lines.append("".join(cells))
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minesolve",
        description="Generate a random board and replay a backtracking solve.",
    )
    parser.add_argument("--rows", type=int, default=5)
    parser.add_argument("--cols", type=int, default=5)
    parser.add_argument("--mines", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--delay", type=float, default=0.5, help="seconds per animation move")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")

    try:
        board = Board.random(args.rows, args.cols, args.mines, random.Random(args.seed))
    except ValueError as exc:
        parser.error(str(exc))

    app = MinesweeperApp(board, delay=args.delay)
    app.initialization()
    last = app.render()
    print(last, end="\n\n")
    while not app.highlighter.finished:
        app.update()
        frame = app.render()
        if frame != last:
            print(frame, end="\n\n")
            last = frame
        if args.delay > 0:
            time.sleep(min(args.delay, 0.05))
    return 0


if __name__ == "__main__":
    sys.exit(main())