import numpy as np

from minisudoku.config import GeneratorConfig
from minisudoku.generator import Puzzle, PuzzleGenerator, build_generator
from minisudoku.mask import MaskBuilder
from minisudoku.solution import SolutionSolver
from minisudoku.verifier import GridVerifier


class FixedSolver:
    def __init__(self, grid):
        self.grid = grid

    def solve(self):
        return [row[:] for row in self.grid]


class FixedMask:
    def __init__(self, mask):
        self.mask = mask

    def build(self):
        return [row[:] for row in self.mask]


SOLUTION = [[1, 2, 3, 4], [3, 4, 1, 2], [2, 1, 4, 3], [4, 3, 2, 1]]
MASK = [[1, 0, 0, 1], [0, 1, 0, 0], [0, 0, 1, 0], [1, 0, 0, 0]]


# ---------- Current solution ----------


def test_solution_before_generate_is_all_zeros(generator):
    assert generator.current_solution() == [[0] * 4 for _ in range(4)]


def test_get_solution_alias(generator):
    generator.generate()
    assert generator.get_solution() == generator.current_solution()


def test_current_solution_is_a_copy(generator):
    generator.generate()
    solution = generator.current_solution()
    solution[0][0] = 0
    assert generator.current_solution()[0][0] != 0


# ---------- Generate ----------


def test_generate_combines_solution_and_mask():
    gen = PuzzleGenerator(FixedSolver(SOLUTION), FixedMask(MASK))

    start = gen.generate()

    assert start == [[1, 0, 0, 4], [0, 4, 0, 0], [0, 0, 4, 0], [4, 0, 0, 0]]
    assert gen.current_solution() == SOLUTION


def test_generate_has_six_clues(generator):
    for _ in range(100):
        start = generator.generate()
        assert sum(1 for row in start for v in row if v != 0) == 6


def test_generate_full_is_consistent(generator):
    for _ in range(300):
        puzzle = generator.generate_full()
        ok, msg = GridVerifier.verify_puzzle(puzzle)
        assert ok, msg


def test_generate_full_stores_solution(generator):
    puzzle = generator.generate_full()

    assert isinstance(puzzle, Puzzle)
    assert generator.current_solution() == puzzle.solution


def test_generate_overwrites_solution(rng):
    gen = PuzzleGenerator(SolutionSolver(rng=rng), MaskBuilder(rng=rng))
    solutions = set()
    for _ in range(30):
        gen.generate()
        solutions.add(tuple(map(tuple, gen.current_solution())))
    assert len(solutions) > 1


def test_generate_then_reveal_solution(generator):
    start = generator.generate_puzzle()
    solution = generator.get_solution()

    assert sum(1 for row in start for v in row if v != 0) == 6
    assert GridVerifier.verify_solution(solution)[0]
    for r in range(4):
        for c in range(4):
            if start[r][c] != 0:
                assert start[r][c] == solution[r][c]


def test_puzzle_to_dict():
    puzzle = Puzzle(start=[[0] * 4] * 4, solution=SOLUTION, mask=MASK)
    d = puzzle.to_dict()
    assert set(d) == {"start", "solution", "mask"}
    assert d["solution"] == SOLUTION


# ---------- Front-end names ----------


class ReversedGenerator(PuzzleGenerator):
    def generate(self):
        return [row[::-1] for row in super().generate()]

    def current_solution(self):
        return [row[::-1] for row in super().current_solution()]


def test_front_end_names_follow_overrides():
    gen = ReversedGenerator(FixedSolver(SOLUTION), FixedMask(MASK))

    assert gen.generate_puzzle() == [[4, 0, 0, 1], [0, 0, 4, 0], [0, 4, 0, 0], [0, 0, 0, 4]]
    assert gen.get_solution() == [row[::-1] for row in SOLUTION]


# ---------- Wiring ----------


def test_build_generator_shares_rng():
    gen = build_generator(GeneratorConfig(seed=11))
    assert gen.solution_solver.rng is gen.mask_builder.rng


def test_build_generator_seed_is_reproducible():
    first = build_generator(GeneratorConfig(seed=5)).generate_full()
    second = build_generator(GeneratorConfig(seed=5)).generate_full()
    assert first == second


def test_build_generator_applies_attempt_bound():
    gen = build_generator(GeneratorConfig(seed=1, max_placement_attempts=50))
    assert gen.mask_builder.max_attempts == 50


def test_build_generator_default_config():
    gen = build_generator()
    assert isinstance(gen.solution_solver.rng, np.random.RandomState)
    assert GridVerifier.verify_puzzle(gen.generate_full())[0]
