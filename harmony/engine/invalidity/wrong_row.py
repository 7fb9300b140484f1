"""Tiles frozen outside their target row."""

from __future__ import annotations

from harmony.engine.invalidity.base import InvalidityTest
from harmony.models.board import Board
from harmony.models.move import Move


def _is_stuck_in_wrong_row(board: Board, row: int, col: int) -> bool:
    tile = board.get_tile(row, col)
    return tile.remaining_moves == 0 and tile.color != board.target_color(row)


class WrongRowZeroMovesTest(InvalidityTest):
    """Invalid when a tile with no moves left sits outside its target row.

    Every later swap needs budget from both tiles, so such a tile never
    moves again.  Only the two tiles of the last move can have just run out.
    """

    __slots__ = ()

    name = "wrong-row-zero-moves"

    def scan_board(self, board: Board) -> bool:
        return any(
            _is_stuck_in_wrong_row(board, r, c)
            for r in range(board.rows)
            for c in range(board.cols)
        )

    def scan_move(self, board: Board, move: Move) -> bool:
        return _is_stuck_in_wrong_row(
            board, move.row1, move.col1
        ) or _is_stuck_in_wrong_row(board, move.row2, move.col2)


WRONG_ROW_ZERO_MOVES = WrongRowZeroMovesTest()
