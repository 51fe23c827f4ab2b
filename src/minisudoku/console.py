"""
Text front end for the puzzle generator.

Shows a game menu, prints a new start grid on "New Game" and the solution of
the current game on "Get Solution". It does not referee play.
"""

from typing import Callable

from .constants import SUDOKU_RULES, format_grid
from .generator import PuzzleGenerator


TITLE = "Sudoku"
GAME_MENU_TITLE = "Game Menu"

MENU_ITEMS = [
    ("n", "New Game"),
    ("s", "Get Solution"),
    ("q", "Quit"),
]


class SudokuConsole:
    """Menu loop; input and output callables can be swapped for tests."""

    def __init__(
        self,
        generator: PuzzleGenerator,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.generator = generator
        self.input_fn = input_fn
        self.output_fn = output_fn

    def render_menu(self) -> str:
        lines = [f"{GAME_MENU_TITLE}:"]
        lines += [f"  [{key}] {label}" for key, label in MENU_ITEMS]
        return "\n".join(lines)

    def new_game(self):
        start = self.generator.generate_puzzle()
        self.output_fn(f"\n{format_grid(start)}\n")

    def show_solution(self):
        solution = self.generator.get_solution()
        self.output_fn(f"\n{format_grid(solution)}\n")

    def handle(self, choice: str) -> bool:
        """Run one menu choice. Returns False when the loop should stop."""
        choice = choice.strip().lower()
        if choice == "n":
            self.new_game()
        elif choice == "s":
            self.show_solution()
        elif choice == "q":
            return False
        else:
            self.output_fn(f"Unknown choice: {choice!r}")
        return True

    def run(self):
        self.output_fn(TITLE)
        self.output_fn(SUDOKU_RULES)
        while True:
            self.output_fn(self.render_menu())
            try:
                choice = self.input_fn("> ")
            except EOFError:
                break
            if not self.handle(choice):
                break
        self.output_fn("Bye!")
