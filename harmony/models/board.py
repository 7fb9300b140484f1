"""Board model for the Harmony puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from harmony.models.move import Move


@dataclass(frozen=True, slots=True)
class Tile:
    """A colored tile with a finite budget of swaps left."""

    color: int
    remaining_moves: int

    def decremented(self) -> Tile:
        return Tile(self.color, self.remaining_moves - 1)

    def __str__(self) -> str:
        return f"{self.color}:{self.remaining_moves}"


@dataclass
class Board:
    """Represents the puzzle grid.

    Tiles are stored as a 2D list indexed ``tiles[row][col]``.  ``targets``
    maps each row index to the color that must end up in that row; it is a
    bijection and defaults to the identity (row ``i`` wants color ``i``).
    """

    tiles: list[list[Tile]]
    targets: tuple[int, ...] = ()
    _target_rows: dict[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.targets:
            self.targets = tuple(range(len(self.tiles)))
        self._target_rows = {color: row for row, color in enumerate(self.targets)}

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[tuple[int, int] | Tile]],
        targets: Sequence[int] | None = None,
    ) -> Board:
        """Create a board from rows of ``(color, moves)`` pairs.

        Example::

            Board.from_rows([[(0, 1), (1, 0)], [(1, 1), (0, 0)]])
        """
        if not rows or not rows[0]:
            raise ValueError("A board needs at least one row and one column.")
        width = len(rows[0])
        tiles: list[list[Tile]] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {r} has {len(row)} tiles, expected {width}."
                )
            tiles.append([t if isinstance(t, Tile) else Tile(*t) for t in row])

        if targets is None:
            targets = range(len(tiles))
        targets = tuple(targets)
        if len(targets) != len(tiles):
            raise ValueError(
                f"Expected {len(tiles)} target colors, got {len(targets)}."
            )
        if len(set(targets)) != len(targets):
            raise ValueError(f"Target colors must be distinct, got {targets}.")
        for row in tiles:
            for tile in row:
                if tile.remaining_moves < 0:
                    raise ValueError(f"Negative move budget on tile {tile}.")
                if tile.color not in targets:
                    raise ValueError(f"Tile color {tile.color} has no target row.")
        return cls(tiles=tiles, targets=targets)

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.tiles)

    @property
    def cols(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    def get_tile(self, row: int, col: int) -> Tile:
        return self.tiles[row][col]

    def target_color(self, row: int) -> int:
        """Color that belongs in *row*."""
        return self.targets[row]

    def target_row(self, color: int) -> int:
        """Row that tiles of *color* must end up in."""
        return self._target_rows[color]

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if the tile at (row, col) is in its target row."""
        return self.tiles[row][col].color == self.targets[row]

    def is_solved(self) -> bool:
        """Every tile in its target row with its budget used up."""
        for r, row in enumerate(self.tiles):
            target = self.targets[r]
            for tile in row:
                if tile.color != target or tile.remaining_moves != 0:
                    return False
        return True

    def total_moves(self) -> int:
        return sum(tile.remaining_moves for row in self.tiles for tile in row)

    # -- transitions ----------------------------------------------------------

    def swap(self, move: Move) -> Board:
        """Return a new board with the move's tiles exchanged and decremented."""
        board = self.copy()
        t1 = self.tiles[move.row1][move.col1]
        t2 = self.tiles[move.row2][move.col2]
        if t1.remaining_moves < 1 or t2.remaining_moves < 1:
            raise ValueError(f"Move {move} uses a tile with no moves left.")
        board.tiles[move.row1][move.col1] = t2.decremented()
        board.tiles[move.row2][move.col2] = t1.decremented()
        return board

    def copy(self) -> Board:
        return Board(tiles=[row[:] for row in self.tiles], targets=self.targets)

    def __str__(self) -> str:
        lines: list[str] = []
        for r, row in enumerate(self.tiles):
            cells = " | ".join(f"{str(t):<5}" for t in row)
            lines.append(f"{chr(ord('A') + r)} | {cells} |")
        return "\n".join(lines)
