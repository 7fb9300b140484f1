"""Helpers shared by the move-parity filters.

Every swap spends one unit of budget from each of its two tiles.  Fix a
color C and sum the budgets of all C tiles: a swap between two C tiles takes
2 off the sum, a swap between a C tile and another color takes 1.  The sum
must reach zero, so its parity equals the parity of the number of mixed
swaps still to come.  The parity filters count the mixed swaps a solution is
forced to make and compare.

That count is only forced while no tile of another color can make a
horizontal swap inside C's target row.  Such a tile needs two moves after it
is in the row (the swap and its exit) or three if it still has to enter, so
the filters stay quiet unless every budget on the board is at most 2 and
every other-colored tile already in the target row has at most 1.
"""

from __future__ import annotations

from harmony.models.board import Board, Tile

MAX_PARITY_BUDGET = 2


def tiles_by_color(board: Board) -> tuple[dict[int, list[tuple[int, int, Tile]]], int]:
    """Group ``(row, col, tile)`` by color and return the largest budget seen."""
    groups: dict[int, list[tuple[int, int, Tile]]] = {}
    largest = 0
    for r in range(board.rows):
        for c in range(board.cols):
            tile = board.get_tile(r, c)
            groups.setdefault(tile.color, []).append((r, c, tile))
            if tile.remaining_moves > largest:
                largest = tile.remaining_moves
    return groups, largest


def row_is_sealed(board: Board, row: int) -> bool:
    """No foreign tile in *row* has budget for a sideways swap before leaving."""
    target = board.target_color(row)
    for c in range(board.cols):
        tile = board.get_tile(row, c)
        if tile.color != target and tile.remaining_moves > 1:
            return False
    return True
