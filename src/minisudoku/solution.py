"""
Solution grid generation by randomized backtracking.

Cells are filled in row-major order. At each cell the values 1..4 are tried
in a random permutation; a value is placed only if it does not already occur
in the cell's row, column or 2x2 box. When no value leads to a full grid the
cell is cleared and the previous cell tries its next value.
"""

import logging
from typing import List, Optional

import numpy as np

from .constants import (
    GRID_SIZE,
    NUM_CELLS,
    SYMBOLS,
    Grid,
    box_cells,
    copy_grid,
    empty_grid,
)
from .errors import GenerationError

logger = logging.getLogger(__name__)


def is_candidate(grid: Grid, row: int, col: int, value: int) -> bool:
    """Check whether `value` may go at (row, col); the cell itself is ignored."""
    for c in range(GRID_SIZE):
        if c != col and grid[row][c] == value:
            return False

    for r in range(GRID_SIZE):
        if r != row and grid[r][col] == value:
            return False

    for r, c in box_cells(row, col):
        if (r, c) != (row, col) and grid[r][c] == value:
            return False

    return True


def _check_partial(grid: Grid):
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise ValueError("Grid must be 4x4.")

    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            value = grid[r][c]
            if value == 0:
                continue
            if value not in SYMBOLS:
                raise ValueError(f"Cell ({r}, {c}) contains invalid value {value}.")
            if not is_candidate(grid, r, c, value):
                raise ValueError(f"Duplicate value {value} detected at cell ({r}, {c}).")


class SolutionSolver:
    """Produces fully solved 4x4 grids; repeated calls give different grids."""

    def __init__(self, rng: Optional[np.random.RandomState] = None):
        self.rng = rng or np.random.RandomState()

    def solve(self) -> Grid:
        """Generate a fresh, fully populated solution grid."""
        grid = empty_grid()
        if not self._fill(grid, 0, given=set()):
            raise GenerationError("Backtracking found no solution for an empty grid")
        logger.debug("Generated solution %s", grid)
        return grid

    def complete(self, partial: Grid) -> Optional[Grid]:
        """
        Complete a partially filled grid.

        Args:
            partial: 4x4 grid, 0 = empty. Given cells are kept as they are.

        Returns:
            A completed copy, or None if the givens admit no completion.
        """
        _check_partial(partial)
        grid = copy_grid(partial)
        given = {
            r * GRID_SIZE + c
            for r in range(GRID_SIZE)
            for c in range(GRID_SIZE)
            if grid[r][c] != 0
        }
        if not self._fill(grid, 0, given):
            logger.debug("No completion exists for %s", partial)
            return None
        return grid

    def _candidate_order(self) -> List[int]:
        return [int(v) for v in self.rng.permutation(SYMBOLS)]

    def _fill(self, grid: Grid, index: int, given) -> bool:
        """
        Fill `grid` from cell `index` onwards.

        `grid` is owned by the caller for the duration of the search and is
        left completed on success. On failure every cell from `index` on that
        is not a given is reset to 0.
        """
        if index == NUM_CELLS:
            return True

        if index in given:
            return self._fill(grid, index + 1, given)

        row, col = divmod(index, GRID_SIZE)
        for value in self._candidate_order():
            if is_candidate(grid, row, col, value):
                grid[row][col] = value
                if self._fill(grid, index + 1, given):
                    return True

        grid[row][col] = 0
        return False
