"""
Reveal mask generation.

A mask is a 4x4 grid of 0/1 marking which solution cells are shown as clues.
Every box gets one clue first; the remaining clues go to boxes chosen by a
random cell anywhere on the grid. No row may hold more than two clues.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from .constants import (
    BOX_SIZE,
    DEFAULT_MAX_PLACEMENT_ATTEMPTS,
    GRID_SIZE,
    MAX_CLUES_PER_ROW,
    NUM_BOXES,
    NUM_CLUES,
    Grid,
    box_origin,
    box_origins,
)
from .errors import GenerationError

logger = logging.getLogger(__name__)


class MaskBuilder:
    """
    Builds reveal masks independent of any solution values.

    - Six cells set to 1, the rest 0.
    - Each 2x2 box holds at least one 1.
    - Each row holds at most two 1s.
    """

    def __init__(
        self,
        rng: Optional[np.random.RandomState] = None,
        max_attempts: int = DEFAULT_MAX_PLACEMENT_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.rng = rng or np.random.RandomState()
        self.max_attempts = max_attempts

    def build(self) -> Grid:
        """Generate a fresh mask grid."""
        mask = np.zeros((GRID_SIZE, GRID_SIZE), dtype=int)

        for row, col in box_origins():
            self._mark_in_box(mask, row, col)

        for _ in range(NUM_CLUES - NUM_BOXES):
            row = int(self.rng.randint(GRID_SIZE))
            col = int(self.rng.randint(GRID_SIZE))
            self._mark_in_box(mask, row, col)

        logger.debug("Generated mask %s", mask.tolist())
        return mask.tolist()

    def _mark_in_box(self, mask: np.ndarray, row: int, col: int) -> Tuple[int, int]:
        """
        Mark one random admissible cell in the box containing (row, col).

        A cell is admissible when it is unmarked and its row holds fewer than
        MAX_CLUES_PER_ROW marks. Random cells of the box are drawn until one
        is admissible, at most `max_attempts` times.
        """
        start_row, start_col = box_origin(row, col)

        for attempt in range(1, self.max_attempts + 1):
            r = start_row + int(self.rng.randint(BOX_SIZE))
            c = start_col + int(self.rng.randint(BOX_SIZE))
            if mask[r, c] == 0 and mask[r].sum() < MAX_CLUES_PER_ROW:
                mask[r, c] = 1
                if attempt > 1:
                    logger.debug("Placed (%d, %d) after %d attempts", r, c, attempt)
                return r, c

        raise GenerationError(
            f"No admissible cell in box at ({start_row}, {start_col}) "
            f"after {self.max_attempts} attempts"
        )
