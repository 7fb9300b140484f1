"""Rows whose own tiles can never spend their budgets evenly."""

from __future__ import annotations

from harmony.engine.invalidity.base import InvalidityTest
from harmony.engine.invalidity.parity import (
    MAX_PARITY_BUDGET,
    row_is_sealed,
    tiles_by_color,
)
from harmony.models.board import Board, Tile


def is_row_stuck(
    board: Board, row: int, color_tiles: list[tuple[int, int, Tile]]
) -> bool:
    """Parity check for *row* given every ``(row, col, tile)`` of its color.

    The color-C tiles are either all in the row, or all but one (``T1``).
    Tiles in the row contribute their budgets.  ``T1`` contributes its budget
    when the cell above it in the row, ``T2``, is also color C (it then needs
    exactly 2 moves), and nothing when ``T2`` is another color (its single
    move is the mixed swap that brings it home).  An odd total can never be
    worked off.
    """
    target = board.target_color(row)
    total = 0
    outside: tuple[int, int, Tile] | None = None

    for r, c, tile in color_tiles:
        if tile.remaining_moves > MAX_PARITY_BUDGET:
            return False
        if r == row:
            total += tile.remaining_moves
        elif outside is not None:
            return False
        else:
            outside = (r, c, tile)

    if outside is not None:
        _, col, t1 = outside
        if board.get_tile(row, col).color == target:
            if t1.remaining_moves != 2:
                return False
            total += t1.remaining_moves
        elif t1.remaining_moves != 1:
            return False

    if total % 2 == 0:
        return False
    return row_is_sealed(board, row)


class StuckTilesTest(InvalidityTest):
    """Invalid when some row's color has an odd budget it cannot spend.

    A single pass groups the whole board by color, so every row is checked
    on every call; the budget cap makes the verdict depend on tiles far from
    the last move.
    """

    __slots__ = ()

    name = "stuck-tiles-parity"

    def scan_board(self, board: Board) -> bool:
        groups, largest = tiles_by_color(board)
        if largest > MAX_PARITY_BUDGET:
            return False

        for row in range(board.rows):
            color_tiles = groups.get(board.target_color(row), [])
            if color_tiles and is_row_stuck(board, row, color_tiles):
                return True
        return False


STUCK_TILES = StuckTilesTest()
