from __future__ import annotations
import logging
from typing import FrozenSet, List, Optional, Set, Tuple

import numpy as np

from .render import render_field

Coordinate = Tuple[int, int]

MINE = -1

logger = logging.getLogger(__name__)


class GridEngine:
    """Game state for one session: mine layout, adjacency counts and opened cells.

    Cell values follow the classic encoding: ``-1`` is a mine, ``0..8`` is the
    number of mines in the cell's Moore neighborhood.
    """

    def __init__(self):
        self._rows = 0
        self._cols = 0
        self._mines = 0
        self._grid = np.zeros((0, 0), dtype=np.int8)
        self._opened: Set[Coordinate] = set()
        self._game_over = False

    def initialize(self, rows: int, cols: int, mines: int, rng=None) -> None:
        # Bounds are validated by GameConfig before we get here
        self._rows = rows
        self._cols = cols
        self._mines = mines
        if rng is None:
            rng = np.random.default_rng()
        picks = rng.choice(rows * cols, size=mines, replace=False)
        grid = np.zeros((rows, cols), dtype=np.int8)
        mine_cells = [divmod(int(idx), cols) for idx in picks]
        for r, c in mine_cells:
            grid[r, c] = MINE
        # Each mine bumps its non-mine neighbors; order does not matter
        for r, c in mine_cells:
            for nr, nc in self.neighbors(r, c):
                if grid[nr, nc] != MINE:
                    grid[nr, nc] += 1
        self._grid = grid
        self._opened = set()
        self._game_over = False
        logger.debug("initialized %dx%d grid with %d mines at %s", rows, cols, mines, self.mine_positions())

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def neighbors(self, row: int, col: int) -> List[Coordinate]:
        coords = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                if self.in_bounds(nr, nc):
                    coords.append((nr, nc))
        return coords

    def reveal(self, row: int, col: int) -> None:
        if self._game_over:
            return
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self._rows}x{self._cols} grid")
        if self._grid[row, col] == MINE:
            logger.debug("reveal (%d, %d): mine", row, col)
            self._game_over = True
        else:
            logger.debug("reveal (%d, %d): %d", row, col, self._grid[row, col])
            self._opened.add((row, col))
        if len(self._opened) + self._mines == self._rows * self._cols:
            self._game_over = True
        if self._game_over:
            logger.info("game over after %d opened cells: %s", len(self._opened), self.outcome())

    @property
    def grid(self) -> np.ndarray:
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def opened_cells(self) -> FrozenSet[Coordinate]:
        return frozenset(self._opened)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def mines(self) -> int:
        return self._mines

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def won(self) -> bool:
        return self._game_over and len(self._opened) + self._mines == self._rows * self._cols

    def outcome(self) -> Optional[str]:
        if not self._game_over:
            return None
        return 'win' if self.won else 'loss'

    def mine_positions(self) -> List[Coordinate]:
        return [(int(r), int(c)) for r, c in np.argwhere(self._grid == MINE)]

    def render(self) -> str:
        return render_field(self.grid, self.opened_cells, self._rows, self._cols, self._game_over)

