"""No legal swap left anywhere on the board."""

from __future__ import annotations

from harmony.engine.invalidity.base import InvalidityTest
from harmony.models.board import Board


class StalemateTest(InvalidityTest):
    """Invalid when no row or column holds two tiles that can still move.

    Needs global counts, so there is no last-move shortcut.
    """

    __slots__ = ()

    name = "stalemate"

    def scan_board(self, board: Board) -> bool:
        row_counts = [0] * board.rows
        col_counts = [0] * board.cols

        for r in range(board.rows):
            for c in range(board.cols):
                if board.get_tile(r, c).remaining_moves >= 1:
                    row_counts[r] += 1
                    col_counts[c] += 1
                    if row_counts[r] >= 2 or col_counts[c] >= 2:
                        return False

        # Nothing can move; that is only fine if there is nothing left to do.
        return not board.is_solved()


STALEMATE = StalemateTest()
