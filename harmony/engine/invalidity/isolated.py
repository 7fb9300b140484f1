"""Tiles with moves left but nobody to swap with."""

from __future__ import annotations

from harmony.engine.invalidity.base import InvalidityTest
from harmony.models.board import Board
from harmony.models.move import Move


def is_isolated(board: Board, row: int, col: int) -> bool:
    """True if the tile can move but every other tile on its lines cannot."""
    if board.get_tile(row, col).remaining_moves == 0:
        return False

    for c in range(board.cols):
        if c != col and board.get_tile(row, c).remaining_moves > 0:
            return False
    for r in range(board.rows):
        if r != row and board.get_tile(r, col).remaining_moves > 0:
            return False
    return True


class IsolatedTileTest(InvalidityTest):
    """Invalid when some tile still has budget but no possible partner.

    A swap only lowers budgets, so a move can isolate a tile only if the tile
    shares a row or a column with one of the swapped cells.  The incremental
    scan therefore walks the lines through both endpoints.
    """

    __slots__ = ()

    name = "isolated-tile"

    def scan_board(self, board: Board) -> bool:
        return any(
            is_isolated(board, r, c)
            for r in range(board.rows)
            for c in range(board.cols)
        )

    def scan_move(self, board: Board, move: Move) -> bool:
        for row in move.rows():
            for c in range(board.cols):
                if is_isolated(board, row, c):
                    return True
        for col in {move.col1, move.col2}:
            for r in range(board.rows):
                if is_isolated(board, r, col):
                    return True
        return False


ISOLATED_TILE = IsolatedTileTest()
