from harmony.engine.puzzleparser.parser import Puzzle, PuzzleFormatError, PuzzleParser

__all__ = ["Puzzle", "PuzzleFormatError", "PuzzleParser"]
