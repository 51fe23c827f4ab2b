"""Batch sampling and mask diagnostics: clue distribution per box, row and cell."""

from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from tqdm.auto import tqdm

from .constants import GRID_SIZE, NUM_BOXES, box_cells, box_origins
from .generator import Puzzle, PuzzleGenerator
from .verifier import GridVerifier


# ============================================================================
# Sampling
# ============================================================================


def sample_puzzles(
    generator: PuzzleGenerator,
    num_puzzles: int = 1000,
    show_progress: bool = True,
) -> List[Puzzle]:
    """Generate `num_puzzles` puzzles in a row with the given generator."""
    if num_puzzles < 1:
        raise ValueError(f"num_puzzles must be >= 1, got {num_puzzles}")

    return [
        generator.generate_full()
        for _ in tqdm(range(num_puzzles), desc="Generating", disable=not show_progress)
    ]


# ============================================================================
# Tables
# ============================================================================

TABLE_COLUMNS = (
    ["clues"]
    + [f"box_{b}" for b in range(NUM_BOXES)]
    + [f"row_{r}" for r in range(GRID_SIZE)]
    + ["solution_valid", "mask_valid", "start_valid"]
)


def mask_table(puzzles: List[Puzzle]) -> pd.DataFrame:
    """
    One row per puzzle with clue counts and verifier results.

    Columns:
        clues, box_0..box_3 (row-major box order), row_0..row_3,
        solution_valid, mask_valid, start_valid
    """
    records = []
    for idx, puzzle in enumerate(puzzles):
        mask = np.asarray(puzzle.mask)
        record = {"puzzle_index": idx, "clues": int(mask.sum())}

        for b, (box_r, box_c) in enumerate(box_origins()):
            record[f"box_{b}"] = sum(
                puzzle.mask[r][c] for r, c in box_cells(box_r, box_c)
            )
        for r in range(GRID_SIZE):
            record[f"row_{r}"] = int(mask[r].sum())

        record["solution_valid"] = GridVerifier.verify_solution(puzzle.solution)[0]
        record["mask_valid"] = GridVerifier.verify_mask(puzzle.mask)[0]
        record["start_valid"] = GridVerifier.verify_start_grid(
            puzzle.start, puzzle.solution, puzzle.mask
        )[0]
        records.append(record)

    table = pd.DataFrame.from_records(records, columns=["puzzle_index"] + TABLE_COLUMNS)
    return table.set_index("puzzle_index")


def clue_frequency(puzzles: List[Puzzle]) -> np.ndarray:
    """Fraction of puzzles revealing each cell, as a 4x4 array."""
    if not puzzles:
        return np.zeros((GRID_SIZE, GRID_SIZE))
    masks = np.array([p.mask for p in puzzles], dtype=float)
    return masks.mean(axis=0)


def summarize_masks(table: pd.DataFrame) -> Dict:
    """
    Summarize a mask table.

    Returns:
        Dict with num_puzzles, mean clues per box, share of puzzles where one
        box holds three clues, and validity rates. All zeros for an empty table.
    """
    box_cols = [c for c in table.columns if c.startswith("box_")]
    if table.empty:
        return {
            "num_puzzles": 0,
            "mean_clues_per_box": {c: 0.0 for c in box_cols},
            "clustered_rate": 0.0,
            "solution_valid_rate": 0.0,
            "mask_valid_rate": 0.0,
            "start_valid_rate": 0.0,
        }

    return {
        "num_puzzles": int(len(table)),
        "mean_clues_per_box": {c: float(table[c].mean()) for c in box_cols},
        "clustered_rate": float((table[box_cols].max(axis=1) >= 3).mean()),
        "solution_valid_rate": float(table["solution_valid"].mean()),
        "mask_valid_rate": float(table["mask_valid"].mean()),
        "start_valid_rate": float(table["start_valid"].mean()),
    }


def print_mask_summary(summary: Dict):
    """Print a summary produced by summarize_masks."""
    print(f"\n{'=' * 50}")
    print(f"MASK SUMMARY ({summary['num_puzzles']} puzzles)")
    print(f"{'=' * 50}")
    for box, mean in summary["mean_clues_per_box"].items():
        print(f"  {box}: {mean:.3f} clues")
    print(f"  Boxes with 3 clues: {summary['clustered_rate']:.1%}")
    print(f"  Valid solutions: {summary['solution_valid_rate']:.1%}")
    print(f"  Valid masks: {summary['mask_valid_rate']:.1%}")
    print(f"  Valid start grids: {summary['start_valid_rate']:.1%}")


# ============================================================================
# Plotting
# ============================================================================


def plot_clue_frequency(
    freq: np.ndarray,
    save_path: Optional[str] = None,
    title: str = "Clue frequency per cell",
    show: bool = False,
):
    """Heatmap of per-cell reveal frequency with box boundaries."""
    fig, ax = plt.subplots(figsize=(5, 5))
    im = ax.imshow(freq, cmap="Blues", vmin=0.0, vmax=1.0)

    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            ax.text(c, r, f"{freq[r, c]:.2f}", ha="center", va="center", fontsize=12)

    ax.axhline(1.5, color="black", linewidth=2)
    ax.axvline(1.5, color="black", linewidth=2)
    ax.set_xticks(range(GRID_SIZE))
    ax.set_yticks(range(GRID_SIZE))
    ax.set_xlabel("Column")
    ax.set_ylabel("Row")
    ax.set_title(title)
    fig.colorbar(im, ax=ax, fraction=0.046)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
        print(f"✓ Saved clue heatmap to {save_path}")
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig
