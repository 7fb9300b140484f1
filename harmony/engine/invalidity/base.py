"""Shared contract for the invalidity filters."""

from __future__ import annotations

from harmony.models.board import Board
from harmony.models.move import Move
from harmony.models.state import BoardState


class InvalidityTest:
    """A sound necessary-condition check on a board state.

    ``is_invalid`` returning True is a proof that no sequence of legal moves
    can solve the board, so the search may drop the branch.  A False result
    proves nothing.

    Subclasses carry no instance state and are safe to share between
    threads.  They implement :meth:`scan_board`; those whose property only
    changes near the swapped cells also override :meth:`scan_move`, which
    must agree with :meth:`scan_board` whenever the parent state passed it.
    """

    __slots__ = ()

    name: str = "invalidity"

    def is_invalid(self, state: BoardState) -> bool:
        move = state.last_move
        if move is None:
            return self.scan_board(state.board)
        return self.scan_move(state.board, move)

    def scan_board(self, board: Board) -> bool:
        raise NotImplementedError

    def scan_move(self, board: Board, move: Move) -> bool:
        return self.scan_board(board)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
