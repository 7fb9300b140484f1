"""Generates solvable Harmony boards."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from harmony.models.board import Board, Tile
from harmony.models.move import Move, position_to_notation


@dataclass(frozen=True)
class Scramble:
    """A generated board and a move sequence known to solve it."""

    board: Board
    solution: tuple[Move, ...]


class PuzzleGenerator:
    """Creates solvable puzzles by playing moves backwards from the solved state.

    A backward move swaps two tiles and *adds* one to both budgets, so the
    same moves played forwards in reverse order undo it exactly.
    """

    @staticmethod
    def solved(rows: int, cols: int, targets: Sequence[int] | None = None) -> Board:
        """Return the goal-state board (every row its target color, no moves)."""
        if targets is None:
            targets = range(rows)
        return Board.from_rows(
            [[Tile(color, 0)] * cols for color in targets], targets
        )

    @staticmethod
    def scramble(
        board: Board, num_moves: int, rng: random.Random | None = None
    ) -> Scramble:
        """Play *num_moves* random backward moves on a copy of *board*."""
        rng = rng or random.Random()
        board = board.copy()
        played: list[Move] = []

        for _ in range(num_moves):
            move = PuzzleGenerator._random_move(board, rng)
            if move is None:
                break
            PuzzleGenerator._unswap(board, move)
            played.append(move)

        return Scramble(board=board, solution=tuple(reversed(played)))

    @staticmethod
    def generate(
        rows: int,
        cols: int,
        num_moves: int,
        seed: int | None = None,
        targets: Sequence[int] | None = None,
    ) -> Scramble:
        """Return a random board solvable in exactly ``len(solution)`` moves."""
        rng = random.Random(seed)
        return PuzzleGenerator.scramble(
            PuzzleGenerator.solved(rows, cols, targets), num_moves, rng
        )

    @staticmethod
    def to_text(board: Board, color_names: Sequence[str]) -> str:
        """Render *board* as puzzle-file text the parser reads back."""
        lines = [
            "# Generated Harmony Puzzle",
            f"# Dimensions: {board.rows}x{board.cols}",
            "",
            f"ROWS {board.rows}",
            f"COLS {board.cols}",
            "",
        ]
        cells = [
            (r, c, board.get_tile(r, c))
            for r in range(board.rows)
            for c in range(board.cols)
        ]

        if board.targets == tuple(range(board.rows)):
            # BOARD layout: one line per color, in target-row order.
            lines.append("BOARD")
            for color in board.targets:
                parts = [color_names[color]]
                for r, c, tile in cells:
                    if tile.color == color:
                        parts.append(f"{position_to_notation(r, c)} {tile.remaining_moves}")
                lines.append(" ".join(parts))
        else:
            lines.append("COLORS")
            for color in sorted(board.targets):
                lines.append(f"{color_names[color]} {color}")
            lines.append("TARGETS " + " ".join(color_names[c] for c in board.targets))
            lines.append("TILES")
            for r, c, tile in cells:
                lines.append(
                    f"{position_to_notation(r, c)} {tile.color} {tile.remaining_moves}"
                )

        return "\n".join(lines) + "\n"

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _random_move(board: Board, rng: random.Random) -> Move | None:
        orientations: list[str] = []
        if board.cols > 1:
            orientations.append("row")
        if board.rows > 1:
            orientations.append("col")
        if not orientations:
            return None

        if rng.choice(orientations) == "row":
            row = rng.randrange(board.rows)
            c1, c2 = rng.sample(range(board.cols), 2)
            return Move(row, c1, row, c2)
        col = rng.randrange(board.cols)
        r1, r2 = rng.sample(range(board.rows), 2)
        return Move(r1, col, r2, col)

    @staticmethod
    def _unswap(board: Board, move: Move) -> None:
        t1 = board.tiles[move.row1][move.col1]
        t2 = board.tiles[move.row2][move.col2]
        board.tiles[move.row1][move.col1] = Tile(t2.color, t2.remaining_moves + 1)
        board.tiles[move.row2][move.col2] = Tile(t1.color, t1.remaining_moves + 1)
