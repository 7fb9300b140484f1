"""Colors that will strand a tile once everything has come home."""

from __future__ import annotations

from harmony.engine.invalidity.base import InvalidityTest
from harmony.engine.invalidity.parity import (
    MAX_PARITY_BUDGET,
    row_is_sealed,
    tiles_by_color,
)
from harmony.models.board import Board, Tile


def is_color_stuck(
    board: Board, color: int, color_tiles: list[tuple[int, int, Tile]]
) -> bool:
    """True if the tiles of *color* are bound to end with an odd budget.

    Conditions, all required:

    1. exactly one tile of the color in every column;
    2. those already in the target row have fewer than 3 moves;
    3. those outside it have exactly 1 move, the swap that brings them in;
    4. the summed budget minus the moves committed in (3) is odd.
    """
    target_row = board.target_row(color)
    per_column = [0] * board.cols
    total = 0
    outside = 0

    for r, c, tile in color_tiles:
        per_column[c] += 1
        moves = tile.remaining_moves
        total += moves
        if r == target_row:
            if moves > MAX_PARITY_BUDGET:
                return False
        else:
            if moves != 1:
                return False
            outside += 1

    if any(count != 1 for count in per_column):
        return False

    if (total - outside) % 2 == 0:
        return False
    return row_is_sealed(board, target_row)


class FutureStuckTilesTest(InvalidityTest):
    """Checks every color on every call; column uniqueness is global."""

    __slots__ = ()

    name = "future-stuck-tiles"

    def scan_board(self, board: Board) -> bool:
        groups, largest = tiles_by_color(board)
        if largest > MAX_PARITY_BUDGET:
            return False

        for color in board.targets:
            color_tiles = groups.get(color)
            if color_tiles and is_color_stuck(board, color, color_tiles):
                return True
        return False


FUTURE_STUCK_TILES = FutureStuckTilesTest()
