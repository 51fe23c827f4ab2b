"""
Deterministic checks for generated 4x4 grids.

Validates solution grids, reveal masks, and the start grid derived from them.
"""

from typing import List, Tuple

from .constants import (
    GRID_SIZE,
    MAX_CLUES_PER_ROW,
    NUM_CLUES,
    SYMBOLS,
    box_cells,
    box_origins,
)


def _is_4x4(grid: List[List[int]]) -> bool:
    return len(grid) == GRID_SIZE and all(len(row) == GRID_SIZE for row in grid)


class GridVerifier:
    """Deterministic grid verifier; every check returns (ok, message)."""

    @staticmethod
    def verify_solution(solution: List[List[int]]) -> Tuple[bool, str]:
        """Verify a grid is a complete, valid 4x4 sudoku."""
        if not _is_4x4(solution):
            return False, "Grid is not 4x4"

        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if solution[r][c] not in SYMBOLS:
                    return False, f"Invalid value at ({r},{c}): {solution[r][c]}"

        expected = list(SYMBOLS)

        for r in range(GRID_SIZE):
            if sorted(solution[r]) != expected:
                return False, f"Row {r} invalid: {solution[r]}"

        for c in range(GRID_SIZE):
            col_vals = [solution[r][c] for r in range(GRID_SIZE)]
            if sorted(col_vals) != expected:
                return False, f"Column {c} invalid: {col_vals}"

        for box_r, box_c in box_origins():
            box = [solution[r][c] for r, c in box_cells(box_r, box_c)]
            if sorted(box) != expected:
                return False, f"Box at ({box_r},{box_c}) invalid: {box}"

        return True, "Solution is valid"

    @staticmethod
    def verify_mask(mask: List[List[int]]) -> Tuple[bool, str]:
        """Verify clue count, box coverage and row cap of a reveal mask."""
        if not _is_4x4(mask):
            return False, "Mask is not 4x4"

        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if mask[r][c] not in (0, 1):
                    return False, f"Invalid mask value at ({r},{c}): {mask[r][c]}"

        total = sum(sum(row) for row in mask)
        if total != NUM_CLUES:
            return False, f"Mask reveals {total} cells, expected {NUM_CLUES}"

        for box_r, box_c in box_origins():
            if not any(mask[r][c] for r, c in box_cells(box_r, box_c)):
                return False, f"Box at ({box_r},{box_c}) has no clue"

        for r in range(GRID_SIZE):
            if sum(mask[r]) > MAX_CLUES_PER_ROW:
                return False, f"Row {r} has {sum(mask[r])} clues"

        return True, "Mask is valid"

    @staticmethod
    def verify_start_grid(
        start: List[List[int]],
        solution: List[List[int]],
        mask: List[List[int]],
    ) -> Tuple[bool, str]:
        """Verify start equals solution where the mask is 1 and 0 elsewhere."""
        if not (_is_4x4(start) and _is_4x4(solution) and _is_4x4(mask)):
            return False, "Grids are not 4x4"

        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                expected = solution[r][c] if mask[r][c] == 1 else 0
                if start[r][c] != expected:
                    return (
                        False,
                        f"Start grid mismatch at ({r},{c}): "
                        f"expected {expected}, got {start[r][c]}",
                    )

        return True, "Start grid matches solution and mask"

    @classmethod
    def verify_puzzle(cls, puzzle) -> Tuple[bool, str]:
        """Run every check on a generated Puzzle."""
        for ok, msg in (
            cls.verify_solution(puzzle.solution),
            cls.verify_mask(puzzle.mask),
            cls.verify_start_grid(puzzle.start, puzzle.solution, puzzle.mask),
        ):
            if not ok:
                return False, msg
        return True, "Puzzle is valid"
