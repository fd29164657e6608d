"""A single cell of a minesweeper board."""

from __future__ import annotations

from itertools import combinations as _index_combinations

Coord = tuple[int, int]

# Sprite-sheet cell shown for each value a node can hold.
_TILE_CELLS: dict[int, Coord] = {
    0: (0, 0),
    -1: (0, 2),
    -2: (0, 1),
    1: (1, 0),
    2: (1, 1),
    3: (1, 2),
    4: (1, 3),
    5: (1, 4),
    6: (1, 5),
    -6: (0, 6),
}

BLANK_TILE: Coord = (0, 0)

FLAGGED = -1
REVEALED_BLANK = -2
REVEALED_MINE = -6


def tile_cell(number: int) -> Coord | None:
    """Return the sprite-sheet (row, col) for a node value, or None if it has none."""
    return _TILE_CELLS.get(number)


class Node:
    """A board cell with its position, value, in-bounds neighbours and view state.

    The value is a mine count (0..8) or one of the markers FLAGGED,
    REVEALED_BLANK and REVEALED_MINE. Setting it updates ``tile`` when the
    value has a sprite; otherwise the previous tile stays.
    """

    __slots__ = ("row", "col", "neighbors", "highlighted", "tile", "_number")

    def __init__(self, row: int, col: int, rows: int, cols: int, number: int = 0) -> None:
        self.row = row
        self.col = col
        self.neighbors: tuple[Coord, ...] = tuple(
            (row + dr, col + dc)
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if (dr or dc) and 0 <= row + dr < rows and 0 <= col + dc < cols
        )
        self.highlighted = False
        self.tile: Coord = BLANK_TILE
        self._number = number

    @property
    def number(self) -> int:
        return self._number

    @number.setter
    def number(self, value: int) -> None:
        self._number = value
        cell = tile_cell(value)
        if cell is not None:
            self.tile = cell

    def combinations(self) -> list[tuple[Coord, ...]]:
        """All ways to place ``number`` mines among the neighbours.

        Combinations come in lexicographic order of neighbour position. A value
        outside 0..len(neighbors) yields no combinations.
        """
        if not 0 <= self._number <= len(self.neighbors):
            return []
        return list(_index_combinations(self.neighbors, self._number))

    def __repr__(self) -> str:
        return f"Node(row={self.row}, col={self.col}, number={self._number})"