"""Moves: a swap of two tiles sharing a row or a column."""

from __future__ import annotations

import re
from dataclasses import dataclass

_POSITION = re.compile(r"^([A-Za-z])(\d+)$")


def position_to_notation(row: int, col: int) -> str:
    """``(0, 4)`` -> ``"A5"``.  Rows are lettered, columns numbered from 1."""
    return f"{chr(ord('A') + row)}{col + 1}"


def notation_to_position(text: str) -> tuple[int, int]:
    """``"A5"`` -> ``(0, 4)``."""
    m = _POSITION.match(text.strip())
    if m is None or int(m.group(2)) < 1:
        raise ValueError(f"Invalid position: {text!r}")
    return ord(m.group(1).upper()) - ord("A"), int(m.group(2)) - 1


@dataclass(frozen=True, slots=True)
class Move:
    row1: int
    col1: int
    row2: int
    col2: int

    @classmethod
    def parse(cls, notation: str) -> Move:
        """Parse ``"A1-B1"`` style notation."""
        parts = notation.split("-")
        if len(parts) != 2:
            raise ValueError(
                f"Invalid move notation: {notation!r} (expected P1-P2, e.g. A1-B1)"
            )
        r1, c1 = notation_to_position(parts[0])
        r2, c2 = notation_to_position(parts[1])
        move = cls(r1, c1, r2, c2)
        if not move.is_valid():
            raise ValueError(
                f"Invalid move: tiles not in same row or column: {notation!r}"
            )
        return move

    def is_valid(self) -> bool:
        """Exactly one of row or column is shared."""
        return (self.row1 == self.row2) != (self.col1 == self.col2)

    @property
    def is_vertical(self) -> bool:
        return self.col1 == self.col2 and self.row1 != self.row2

    def positions(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return (self.row1, self.col1), (self.row2, self.col2)

    def rows(self) -> tuple[int, ...]:
        """Distinct rows touched, first endpoint first."""
        if self.row1 == self.row2:
            return (self.row1,)
        return (self.row1, self.row2)

    @property
    def notation(self) -> str:
        return (
            f"{position_to_notation(self.row1, self.col1)}-"
            f"{position_to_notation(self.row2, self.col2)}"
        )

    def __str__(self) -> str:
        return self.notation
