"""Exceptions raised by puzzle generation."""


class GenerationError(RuntimeError):
    """A generation step could not complete.

    Only reachable when the board constants were changed without adjusting
    the algorithms; a 4x4 board always yields a solution and a mask.
    """
