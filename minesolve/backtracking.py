"""Backtracking search for a consistent mine layout behind a board's numbers."""

from __future__ import annotations

from .board import Board
from .node import Coord


class BackTracking:
    """Search for a set of flagged cells that satisfies every number on a board.

    Number nodes are visited in row-major order. For each one, every way of
    placing its count of mines among its neighbours is tried. A flag may only
    go on a cell whose value is 0, and only if no adjacent number would then
    see more flags than its value.

    The search records a script as it goes. ``steps`` holds the number node
    visited at each point. ``flags`` holds the cells toggled at that point: the
    cells placed when a combination is tried, the same cells again when it is
    undone, and an empty tuple when a node needs nothing new or has no
    combination left.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.steps: list[Coord] = []
        self.flags: list[tuple[Coord, ...]] = []
        self.flagged: set[Coord] = set()
        self.found_solution = False
        self._number_nodes: list[Coord] = []

    def run(self) -> bool:
        """Reset the script and search again; return whether a solution was found."""
        self.steps = []
        self.flags = []
        self.flagged = set()
        self.found_solution = False
        self._number_nodes = self.board.number_coords()
        self._backtrack(0)
        return self.found_solution

    def _record(self, coord: Coord, toggled: tuple[Coord, ...] = ()) -> None:
        self.steps.append(coord)
        self.flags.append(toggled)

    def _backtrack(self, index: int) -> None:
        if index >= len(self._number_nodes):
            if self._board_is_valid():
                self.found_solution = True
            return
        if self.found_solution:
            return

        coord = self._number_nodes[index]
        node = self.board.node(*coord)
        number = node.number
        combos = node.combinations()

        if combos:
            existing = sum(1 for c in combos[0] if c in self.flagged)
            if existing > number:
                return
            if existing == number:
                self._record(coord)
                self._backtrack(index + 1)
                return

        for combo in combos:
            to_add = self._placement(combo)
            if to_add is None or len(combo) - len(to_add) + len(to_add) != number:
                continue

            self._record(coord, to_add)
            self.flagged.update(to_add)

            self._backtrack(index + 1)
            if self.found_solution:
                return

            self._record(coord, to_add)
            self.flagged.difference_update(to_add)

        self._record(coord)

    def _placement(self, combo: tuple[Coord, ...]) -> tuple[Coord, ...] | None:
        """Cells of ``combo`` still to flag, or None if one of them cannot be flagged."""
        to_add: list[Coord] = []
        for coord in combo:
            if coord in self.flagged:
                continue
            if self.board.node(*coord).number != 0 or not self._is_safe_to_flag(*coord):
                return None
            to_add.append(coord)
        return tuple(to_add)

    def _block(self, row: int, col: int):
        """In-bounds cells of the 3x3 block centred on (row, col), centre included."""
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                r, c = row + dr, col + dc
                if self.board.in_bounds(r, c):
                    yield r, c

    def _board_is_valid(self) -> bool:
        return all(
            sum(1 for cell in self._block(*coord) if cell in self.flagged)
            == self.board.node(*coord).number
            for coord in self._number_nodes
        )

    def _is_safe_to_flag(self, row: int, col: int) -> bool:
        candidate = (row, col)
        for around in self._block(row, col):
            if around == candidate:
                continue
            number = self.board.node(*around).number
            if number <= 0:
                continue
            count = sum(
                1
                for cell in self._block(*around)
                if cell in self.flagged or cell == candidate
            )
            if count > number:
                return False
        return True