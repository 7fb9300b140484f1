"""Last moves that can never land.

A tile with one move left that is outside its target row has to spend that
move on a vertical swap straight into the target row, in its own column.  If
the tile sitting at that target cell has no moves left it never vacates the
cell, and the one-move tile is stranded.

The relation is checked from both ends:

* *blocked*: the tile is the one-move tile, look up the single target cell;
* *blocking*: the tile is the zero-move occupant, look for a one-move tile
  anywhere in its column whose target row is the occupant's row.
"""

from __future__ import annotations

from harmony.engine.invalidity.base import InvalidityTest
from harmony.models.board import Board
from harmony.models.move import Move


def is_blocked(board: Board, row: int, col: int) -> bool:
    tile = board.get_tile(row, col)
    if tile.remaining_moves != 1:
        return False

    target_row = board.target_row(tile.color)
    if target_row == row:
        return False

    return board.get_tile(target_row, col).remaining_moves == 0


def is_blocking(board: Board, row: int, col: int) -> bool:
    if board.get_tile(row, col).remaining_moves != 0:
        return False

    wanted = board.target_color(row)
    for other_row in range(board.rows):
        if other_row == row:
            continue
        other = board.get_tile(other_row, col)
        if other.remaining_moves == 1 and other.color == wanted:
            return True
    return False


class BlockedSwapTest(InvalidityTest):
    __slots__ = ()

    name = "blocked-swap"

    def scan_board(self, board: Board) -> bool:
        # Every blocked/blocking pair has a blocked end, so one direction
        # covers the whole board.
        return any(
            is_blocked(board, r, c)
            for r in range(board.rows)
            for c in range(board.cols)
        )

    def scan_move(self, board: Board, move: Move) -> bool:
        for row, col in move.positions():
            if is_blocked(board, row, col) or is_blocking(board, row, col):
                return True
        return False


BLOCKED_SWAP = BlockedSwapTest()
