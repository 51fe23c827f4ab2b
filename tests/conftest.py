import numpy as np
import pytest

from minisudoku.generator import PuzzleGenerator
from minisudoku.mask import MaskBuilder
from minisudoku.solution import SolutionSolver


@pytest.fixture
def rng():
    return np.random.RandomState(1234)


@pytest.fixture
def generator(rng):
    return PuzzleGenerator(SolutionSolver(rng=rng), MaskBuilder(rng=rng))


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ("MINI_SUDOKU_SEED", "MINI_SUDOKU_LOG_LEVEL", "MINI_SUDOKU_CONFIG"):
        monkeypatch.delenv(name, raising=False)
