"""Minesweeper board solver using backtracking, with a text replay of the search."""

__version__ = "0.1.0"