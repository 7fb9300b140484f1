"""Immutable snapshot of a board and the moves that produced it."""

from __future__ import annotations

from dataclasses import dataclass

from harmony.models.board import Board
from harmony.models.move import Move


@dataclass(frozen=True)
class BoardState:
    """A node in the search space.

    The board is never mutated once wrapped; :meth:`apply` clones it.
    """

    board: Board
    moves: tuple[Move, ...] = ()

    @property
    def last_move(self) -> Move | None:
        return self.moves[-1] if self.moves else None

    @property
    def move_count(self) -> int:
        return len(self.moves)

    def apply(self, move: Move) -> BoardState:
        return BoardState(self.board.swap(move), self.moves + (move,))

    def is_solved(self) -> bool:
        return self.board.is_solved()
