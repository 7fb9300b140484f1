"""Harmony tile puzzle: board model and invalidity pruning engine."""

__version__ = "0.1.0"
