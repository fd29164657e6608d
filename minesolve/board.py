"""A rectangular grid of nodes, built from a preset or with random mines."""

from __future__ import annotations

import random as _random
from collections.abc import Iterator, Sequence

from .node import Coord, Node


class Board:
    """A grid of :class:`Node` objects with optional known mine positions."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"board size must not be negative: {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._grid: list[list[Node]] = [
            [Node(r, c, rows, cols) for c in range(cols)] for r in range(rows)
        ]
        self.mine_positions: frozenset[Coord] = frozenset()

    @classmethod
    def from_preset(cls, preset: Sequence[Sequence[int]]) -> Board:
        """Build a board whose node values are taken from a rectangular grid."""
        rows = len(preset)
        cols = len(preset[0]) if rows else 0
        if any(len(line) != cols for line in preset):
            raise ValueError("preset rows must all have the same length")
        board = cls(rows, cols)
        for nodes, values in zip(board._grid, preset):
            for node, value in zip(nodes, values):
                node.number = value
        return board

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        num_mines: int,
        rng: _random.Random | None = None,
    ) -> Board:
        """Build a board with ``num_mines`` mines at random distinct cells.

        Non-mine nodes hold the count of adjacent mines; mine nodes hold 0.
        """
        if num_mines < 0 or num_mines > rows * cols:
            raise ValueError(f"cannot place {num_mines} mines on a {rows}x{cols} board")
        rng = rng if rng is not None else _random.Random()
        board = cls(rows, cols)
        placed: set[Coord] = set()
        while len(placed) < num_mines:
            placed.add((rng.randrange(rows), rng.randrange(cols)))
        board.mine_positions = frozenset(placed)
        board._calculate_numbers()
        return board

    def _calculate_numbers(self) -> None:
        mines = self.mine_positions
        for node in self:
            if (node.row, node.col) in mines:
                continue
            node.number = sum(1 for coord in node.neighbors if coord in mines)

    def node(self, row: int, col: int) -> Node:
        """Return the node at (row, col); raise IndexError when out of bounds."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} board")
        return self._grid[row][col]

    def is_mine(self, row: int, col: int) -> bool:
        return (row, col) in self.mine_positions

    def number_coords(self) -> list[Coord]:
        """Coordinates of nodes with a positive value, in row-major order."""
        return [(node.row, node.col) for node in self if node.number > 0]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def __iter__(self) -> Iterator[Node]:
        for line in self._grid:
            yield from line