"""Program start: wire the generator from configuration and run the console."""

import logging
import os

from .config import make_generator_config
from .console import SudokuConsole
from .generator import build_generator


def main():
    config = make_generator_config(os.getenv("MINI_SUDOKU_CONFIG") or None)
    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    SudokuConsole(build_generator(config)).run()


if __name__ == "__main__":
    main()
