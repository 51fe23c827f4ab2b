"""
Board constants, rules text, grid helpers, and display utilities.
"""

from typing import Iterator, List, Tuple


Grid = List[List[int]]


# ============================================================================
# Board geometry
# ============================================================================

GRID_SIZE = 4
BOX_SIZE = 2
NUM_CELLS = GRID_SIZE * GRID_SIZE
NUM_BOXES = (GRID_SIZE // BOX_SIZE) ** 2
SYMBOLS = tuple(range(1, GRID_SIZE + 1))

# Mask shape: one clue per box plus extras, capped per row
NUM_CLUES = 6
MAX_CLUES_PER_ROW = 2

DEFAULT_MAX_PLACEMENT_ATTEMPTS = 1000


SUDOKU_RULES = """4x4 Mini Sudoku Rules:
- The grid is 4x4, divided into four 2x2 boxes
- Fill each cell with a number from 1 to 4
- Each ROW must contain the numbers 1, 2, 3, 4 exactly once
- Each COLUMN must contain the numbers 1, 2, 3, 4 exactly once
- Each 2x2 BOX must contain the numbers 1, 2, 3, 4 exactly once
- Six cells are given as clues, at least one in every box
"""


def check_board_constants():
    """Fail fast if the board constants no longer describe a 4x4 mini sudoku."""
    assert GRID_SIZE == 4, "Grid must be 4x4"
    assert BOX_SIZE == 2, "Boxes must be 2x2"
    assert BOX_SIZE * BOX_SIZE == GRID_SIZE, "Box side squared must equal grid side"
    assert NUM_BOXES == 4, "Grid must tile into four boxes"
    assert NUM_CLUES == 6, "Start grid must reveal six clues"
    assert MAX_CLUES_PER_ROW == 2, "At most two clues per row"
    assert NUM_BOXES <= NUM_CLUES <= GRID_SIZE * MAX_CLUES_PER_ROW


# ============================================================================
# Grid helpers
# ============================================================================


def empty_grid() -> Grid:
    """Return a fresh all-zero 4x4 grid."""
    return [[0] * GRID_SIZE for _ in range(GRID_SIZE)]


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Snap a cell to the top-left cell of its box."""
    return row // BOX_SIZE * BOX_SIZE, col // BOX_SIZE * BOX_SIZE


def box_origins() -> Iterator[Tuple[int, int]]:
    """Box origins in row-major order: (0,0), (0,2), (2,0), (2,2)."""
    for row in range(0, GRID_SIZE, BOX_SIZE):
        for col in range(0, GRID_SIZE, BOX_SIZE):
            yield row, col


def box_cells(row: int, col: int) -> List[Tuple[int, int]]:
    """All cells of the box containing (row, col)."""
    start_row, start_col = box_origin(row, col)
    return [
        (r, c)
        for r in range(start_row, start_row + BOX_SIZE)
        for c in range(start_col, start_col + BOX_SIZE)
    ]


# ============================================================================
# Display Utility
# ============================================================================


def format_grid(grid: Grid, show_zeros: bool = True) -> str:
    """
    Format a 4x4 grid for display, with box boundaries.

    Args:
        grid: 4x4 list of ints (0 = blank)
        show_zeros: If True, show 0s as '.'; if False, show raw numbers.

    Returns:
        Formatted multi-line string.
    """
    lines = []
    for i, row in enumerate(grid):
        if show_zeros:
            cells = [str(cell) if cell != 0 else "." for cell in row]
        else:
            cells = [str(cell) for cell in row]
        lines.append(" ".join(cells[:BOX_SIZE]) + " | " + " ".join(cells[BOX_SIZE:]))
        if i == BOX_SIZE - 1:
            lines.append("----+----")
    return "\n".join(lines)
