from harmony.engine.invalidity import DEFAULT_COORDINATOR, InvalidityTestCoordinator
from harmony.engine.puzzlegenerator import PuzzleGenerator
from harmony.engine.puzzleparser import Puzzle, PuzzleFormatError, PuzzleParser

__all__ = [
    "DEFAULT_COORDINATOR",
    "InvalidityTestCoordinator",
    "Puzzle",
    "PuzzleFormatError",
    "PuzzleGenerator",
    "PuzzleParser",
]
