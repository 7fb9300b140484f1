from harmony.engine.puzzlegenerator.generator import PuzzleGenerator, Scramble

__all__ = ["PuzzleGenerator", "Scramble"]
