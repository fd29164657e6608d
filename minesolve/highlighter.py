"""Step-by-step playback of a solver script over a board's number nodes."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from .board import Board
from .node import FLAGGED, Coord


class Highlighter:
    """Walks a highlight across the number nodes and toggles flags on cue.

    The highlight moves one number node at a time, no faster than once per
    ``delay`` seconds, until it reaches the node of the current script step.
    The step is then logged, and its flags are toggled one per ``delay``.
    Time is read from ``clock``, a callable returning seconds.
    """

    def __init__(
        self,
        board: Board,
        *,
        clock: Callable[[], float] = time.monotonic,
        out: TextIO | None = None,
        delay: float = 0.5,
    ) -> None:
        self.board = board
        self.delay = delay
        self._clock = clock
        self._out = out
        self._started = clock()
        self.index = 0
        self.number_coords: list[Coord] = board.number_coords()
        self.steps: list[Coord] = []
        self.flags: list[list[Coord]] = []
        self.current_step_index = 0
        self.current_flag_index = 0
        self.in_flag_phase = False
        if self.number_coords:
            self.highlight()

    @property
    def row(self) -> int:
        return self.number_coords[self.index][0]

    @property
    def col(self) -> int:
        return self.number_coords[self.index][1]

    @property
    def finished(self) -> bool:
        """True once every step of the loaded script has been played."""
        return self.current_step_index >= len(self.steps)

    def _elapsed(self) -> float:
        return self._clock() - self._started

    def _restart(self) -> None:
        self._started = self._clock()

    def load_script(
        self, steps: Sequence[Coord], flags: Sequence[Iterable[Coord]]
    ) -> None:
        """Replace the script and rewind playback to its start."""
        if len(steps) != len(flags):
            raise ValueError("steps and flags must have the same length")
        self.steps = [tuple(step) for step in steps]
        self.flags = [[tuple(coord) for coord in group] for group in flags]
        self.current_step_index = 0
        self.current_flag_index = 0
        self.in_flag_phase = False
        self._restart()

    def update(self) -> None:
        """Advance playback by at most one move or one flag toggle."""
        if self.finished:
            return
        step = self.steps[self.current_step_index]
        group = self.flags[self.current_step_index]
        if not self.in_flag_phase:
            if self.step_to_target(step, self.delay):
                self._log_step(step, group)
                self.in_flag_phase = True
                self.current_flag_index = 0
        elif self.current_flag_index < len(group):
            if self.wait_seconds(self.delay):
                self.inverse_flag(*group[self.current_flag_index])
                self.current_flag_index += 1
        else:
            self.current_step_index += 1
            self.in_flag_phase = False

    def _log_step(self, step: Coord, group: list[Coord]) -> None:
        if group:
            flags = " | Flags:" + "".join(f" ({r},{c})" for r, c in group)
        else:
            flags = " | Flags: (none)"
        out = self._out if self._out is not None else sys.stdout
        print(f"Step[{self.current_step_index}] at ({step[0]},{step[1]}){flags}", file=out)

    def step_to_target(self, target: Coord, delay: float) -> bool:
        """Move one node towards ``target`` once ``delay`` has passed.

        Return True when the highlight is on the target; False if it is not
        yet there or the target is not a number node.
        """
        if not self.number_coords:
            return False
        target = tuple(target)
        if self.number_coords[self.index] == target:
            return True
        try:
            target_index = self.number_coords.index(target)
        except ValueError:
            return False
        if self._elapsed() >= delay:
            self._restart()
            self.remove_highlight()
            if self.index < target_index:
                self.index += 1
            elif self.index > target_index:
                self.index -= 1
            self.highlight()
        return self.index == target_index

    def wait_seconds(self, seconds: float) -> bool:
        """Return True, restarting the timer, once ``seconds`` have passed."""
        if self._elapsed() >= seconds:
            self._restart()
            return True
        return False

    def _current_node(self):
        if not self.number_coords:
            raise IndexError("the board has no number nodes")
        return self.board.node(*self.number_coords[self.index])

    def highlight(self) -> None:
        self._current_node().highlighted = True

    def remove_highlight(self) -> None:
        self._current_node().highlighted = False

    def inverse_flag(self, r: int, c: int) -> None:
        """Flag an empty cell or clear a flagged one; other values stay."""
        node = self.board.node(r, c)
        if node.number == 0:
            node.number = FLAGGED
        elif node.number == FLAGGED:
            node.number = 0

    def move_next(self) -> None:
        if self.index + 1 < len(self.number_coords):
            self.remove_highlight()
            self.index += 1
            self.highlight()

    def move_prev(self) -> None:
        if self.index > 0:
            self.remove_highlight()
            self.index -= 1
            self.highlight()