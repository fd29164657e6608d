# minesolve

A small Minesweeper solver. Given a board of numbers, it searches for a set of
flagged cells that satisfies every number, using backtracking over the
possible mine combinations around each numbered cell. Every step of the
search, including the retreats, is recorded so the whole process can be
replayed cell by cell in the terminal.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
minesolve
```

This generates a random 5 × 5 board with 5 mines, solves it, and replays the
search as a series of text frames: the numbered cell being examined is shown
in brackets, and flags (`F`) are placed and removed as the solver tries
combinations. A frame is printed each time the board changes.

Options:

- `--rows N`, `--cols N`, `--mines N` — board size and mine count
  (defaults 5, 5, 5). Too many mines, or a negative count, is an error.
- `--seed N` — seed for the random board, for a repeatable run.
- `--delay SECONDS` — time per animation move (default 0.5; must not be
  negative; 0 plays back as fast as possible).

In a frame, `.` is an empty cell, `F` a flag, digits are mine counts, a space
is a revealed blank and `*` a revealed mine.

## Using it from Python

```python
from minesolve.board import Board
from minesolve.backtracking import BackTracking

board = Board.from_preset([
    [1, 0, 0],
    [0, 0, 0],
    [0, 0, 0],
])
solver = BackTracking(board)
solver.run()        # True
solver.flagged      # {(0, 1)}
solver.steps        # [(0, 0)]
solver.flags        # [((0, 1),)]
```

`BackTracking.run()` returns whether a solution was found. It does not change
the board: the solution is left in `flagged`, and the recorded script in
`steps` (the numbered cell visited at each point) and `flags` (the cells
toggled at that point — placed when a combination is tried, the same cells
again when it is undone, empty when nothing changes).

### Boards and nodes

- `Board.from_preset(grid)` builds a board from a rectangular list of rows;
  rows of unequal length raise `ValueError`.
- `Board.random(rows, cols, num_mines, rng=None)` places mines at random
  distinct cells, using a `random.Random` if one is given. Non-mine cells hold
  their count of adjacent mines; mine cells hold 0. `Board.is_mine(row, col)`
  tells where the mines went.
- `Board.node(row, col)` returns a `Node` (raising `IndexError` out of
  bounds), `Board.number_coords()` lists the cells with a positive value in
  row-major order, and iterating a board yields its nodes row by row.

A `Node` has `row`, `col`, `number`, its in-bounds `neighbors`, and a
`highlighted` state. `Node.combinations()` lists every way to place `number`
mines among the neighbours. Values other than counts are the markers
`FLAGGED`, `REVEALED_BLANK` and `REVEALED_MINE` from `minesolve.node`;
`tile_cell(number)` gives the sprite-sheet position for a value, which a node
keeps in `tile`.

### Replaying a search

```python
from minesolve.highlighter import Highlighter

player = Highlighter(board, delay=0.5)
player.load_script(solver.steps, solver.flags)
while not player.finished:
    player.update()
```

`update()` moves the highlight one numbered cell at a time towards the current
step's cell, at most once per `delay` seconds, prints a line such as
`Step[0] at (0,0) | Flags: (0,1)`, and then toggles that step's flags one per
`delay` with `inverse_flag`. `move_next()` and `move_prev()` move the highlight
by hand. The clock and output stream can be passed as `clock=` and `out=`.

`MinesweeperApp` ties the pieces together: `initialization()` solves the board
and loads the replay, `update()` advances it, `click(row, col)` reveals a cell
as a mine or a blank, and `render()` returns the board as text.

## What it does not do

There is no graphical window and no tile images; the board is shown only as
text. The `minesolve` command replays a solve of a random board and takes no
input while it runs, so cells cannot be clicked from it — `click` is only
available from Python. Preset boards can likewise only be used from Python.