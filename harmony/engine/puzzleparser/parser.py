"""Reads Harmony puzzle files.

Two layouts are accepted.  The ``TILES`` layout lists every cell::

    ROWS 2
    COLS 2
    COLORS
    RED 0
    BLUE 1
    TARGETS RED BLUE
    TILES
    A1 0 1
    A2 1 0
    B1 1 1
    B2 0 0

The ``BOARD`` layout lists, per color in row order, where its tiles are::

    ROWS 2
    COLS 2
    BOARD
    RED A1 1 B2 0
    BLUE A2 0 B1 1

Either may be followed by a ``MOVES`` section of ``P1-P2`` lines which are
played on the loaded board to produce the starting position.  ``#`` starts a
comment, and reading stops at a line containing ``End of Puzzle
Specification``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from harmony.models.board import Board, Tile
from harmony.models.move import Move, notation_to_position
from harmony.models.state import BoardState

LOGGER = logging.getLogger(__name__)

END_MARKER = "End of Puzzle Specification"


class PuzzleFormatError(ValueError):
    """The puzzle text is malformed or describes an inconsistent board."""


@dataclass(frozen=True)
class Puzzle:
    state: BoardState
    color_names: tuple[str, ...]

    @property
    def board(self) -> Board:
        return self.state.board


class PuzzleParser:
    """Stateless parser; all methods are static."""

    @staticmethod
    def parse_file(path: Path | str) -> Puzzle:
        path = Path(path)
        LOGGER.info("Loading puzzle from %s", path)
        return PuzzleParser.parse(path.read_text())

    @staticmethod
    def parse(text: str) -> Puzzle:
        rows = cols = 0
        color_ids: dict[str, int] = {}
        target_names: list[str] | None = None
        cells: list[tuple[str, int, int]] = []
        moves: list[Move] = []
        section: str | None = None
        board_layout = False

        for lineno, raw in enumerate(text.splitlines(), 1):
            if END_MARKER in raw:
                break
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            try:
                if line.startswith("ROWS "):
                    rows = int(line[5:])
                elif line.startswith("COLS "):
                    cols = int(line[5:])
                elif line.startswith("TARGETS "):
                    target_names = [n.upper() for n in line[8:].split()]
                    section = None
                elif line in ("COLORS", "TILES", "BOARD", "MOVES"):
                    section = line
                    board_layout = board_layout or line == "BOARD"
                elif section == "COLORS":
                    name, color_id = _split(line, 2, "color")
                    color_ids[name.upper()] = int(color_id)
                elif section == "TILES":
                    pos, color_id, budget = _split(line, 3, "tile")
                    cells.append((pos.upper(), int(color_id), int(budget)))
                elif section == "BOARD":
                    parts = line.split()
                    if len(parts) < 3 or len(parts) % 2 == 0:
                        raise PuzzleFormatError(f"Invalid BOARD line: {line!r}")
                    color_id = len(color_ids)
                    color_ids[parts[0].upper()] = color_id
                    for pos, budget in zip(parts[1::2], parts[2::2]):
                        cells.append((pos.upper(), color_id, int(budget)))
                elif section == "MOVES":
                    notation = line.split("#", 1)[0].strip()
                    if notation:
                        moves.append(Move.parse(notation))
                else:
                    raise PuzzleFormatError(f"Unexpected line: {line!r}")
            except PuzzleFormatError as exc:
                raise PuzzleFormatError(f"line {lineno}: {exc}") from None
            except ValueError as exc:
                raise PuzzleFormatError(f"line {lineno}: {exc}") from exc

        if board_layout or (target_names is None and color_ids):
            target_names = sorted(color_ids, key=color_ids.__getitem__)

        board, names = PuzzleParser._build(rows, cols, color_ids, target_names, cells)

        state = BoardState(board)
        if moves:
            LOGGER.debug("Applying %d setup moves", len(moves))
            for move in moves:
                try:
                    state = state.apply(move)
                except (ValueError, IndexError) as exc:
                    raise PuzzleFormatError(f"Cannot apply move {move}: {exc}") from exc
            # The setup moves only define the starting position.
            state = BoardState(state.board)

        return Puzzle(state=state, color_names=names)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _build(
        rows: int,
        cols: int,
        color_ids: dict[str, int],
        target_names: list[str] | None,
        cells: list[tuple[str, int, int]],
    ) -> tuple[Board, tuple[str, ...]]:
        if rows <= 0 or cols <= 0:
            raise PuzzleFormatError("Invalid board dimensions")
        if not color_ids:
            raise PuzzleFormatError("No colors defined")
        if target_names is None or len(target_names) != rows:
            raise PuzzleFormatError("Number of target colors must equal number of rows")
        if len(cells) != rows * cols:
            raise PuzzleFormatError(f"Expected {rows * cols} tiles, got {len(cells)}")

        unknown = [n for n in target_names if n not in color_ids]
        if unknown:
            raise PuzzleFormatError(f"Unknown color in targets: {unknown[0]}")
        targets = [color_ids[n] for n in target_names]

        grid: list[list[Tile | None]] = [[None] * cols for _ in range(rows)]
        for pos, color_id, budget in cells:
            try:
                r, c = notation_to_position(pos)
            except ValueError as exc:
                raise PuzzleFormatError(str(exc)) from exc
            if not (0 <= r < rows and 0 <= c < cols):
                raise PuzzleFormatError(f"Position off the board: {pos}")
            if grid[r][c] is not None:
                raise PuzzleFormatError(f"Duplicate tile position: {pos}")
            grid[r][c] = Tile(color_id, budget)

        try:
            board = Board.from_rows(grid, targets)  # type: ignore[arg-type]
        except ValueError as exc:
            raise PuzzleFormatError(str(exc)) from exc

        names = [f"C{i}" for i in range(max(color_ids.values()) + 1)]
        for name, color_id in color_ids.items():
            names[color_id] = name
        return board, tuple(names)


def _split(line: str, count: int, what: str) -> list[str]:
    parts = line.split()
    if len(parts) != count:
        raise PuzzleFormatError(f"Invalid {what} format: {line!r}")
    return parts
