from .config import GeneratorConfig, load_config, make_generator_config
from .constants import SUDOKU_RULES, empty_grid, format_grid
from .errors import GenerationError
from .generator import Puzzle, PuzzleGenerator, build_generator
from .mask import MaskBuilder
from .solution import SolutionSolver, is_candidate
from .verifier import GridVerifier
