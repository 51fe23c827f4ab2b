"""
Puzzle generation: a solution grid masked down to a six-clue start grid.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from .config import GeneratorConfig
from .constants import Grid, check_board_constants, copy_grid, empty_grid
from .mask import MaskBuilder
from .solution import SolutionSolver

logger = logging.getLogger(__name__)


@dataclass
class Puzzle:
    """One generation: the start grid plus the grids it was derived from."""

    start: Grid
    solution: Grid
    mask: Grid

    def to_dict(self) -> Dict:
        return {
            "start": self.start,
            "solution": self.solution,
            "mask": self.mask,
        }


class PuzzleGenerator:
    """
    Generates start grids and keeps the solution of the latest one.

    The stored solution is overwritten by every call to `generate`. Before
    the first call `current_solution` returns an all-zero grid.
    """

    def __init__(self, solution_solver: SolutionSolver, mask_builder: MaskBuilder):
        check_board_constants()
        self.solution_solver = solution_solver
        self.mask_builder = mask_builder
        self._solution: Optional[Grid] = None

    def generate_full(self) -> Puzzle:
        """Generate a puzzle and return start, solution and mask together."""
        solution = self.solution_solver.solve()
        self._solution = solution
        mask = self.mask_builder.build()

        start = (np.asarray(solution) * np.asarray(mask)).tolist()
        logger.debug("Generated start grid %s", start)
        return Puzzle(start=start, solution=copy_grid(solution), mask=mask)

    def generate(self) -> Grid:
        """Generate a new start grid (0 = blank, 1-4 = clue)."""
        return self.generate_full().start

    def current_solution(self) -> Grid:
        """Solution of the latest generated puzzle, or all zeros if none."""
        if self._solution is None:
            return empty_grid()
        return copy_grid(self._solution)

    # Names used by the front end
    def generate_puzzle(self) -> Grid:
        return self.generate()

    def get_solution(self) -> Grid:
        return self.current_solution()


def build_generator(config: Optional[GeneratorConfig] = None) -> PuzzleGenerator:
    """Wire solver, mask builder and generator around one shared RNG."""
    config = config or GeneratorConfig()
    rng = np.random.RandomState(config.seed)

    solution_solver = SolutionSolver(rng=rng)
    mask_builder = MaskBuilder(rng=rng, max_attempts=config.max_placement_attempts)
    return PuzzleGenerator(solution_solver, mask_builder)
