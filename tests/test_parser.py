"""Puzzle file parsing.

Fixture files live under ``<project_root>/fixtures/``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from harmony.engine.invalidity import DEFAULT_COORDINATOR
from harmony.engine.puzzleparser import PuzzleFormatError, PuzzleParser
from harmony.models import Move, Tile
from tests.helpers import replay

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"


# -- fixtures -----------------------------------------------------------------


def test_board_layout() -> None:
    puzzle = PuzzleParser.parse_file(FIXTURES_DIR / "solvable_3x3.txt")
    board = puzzle.board

    assert (board.rows, board.cols) == (3, 3)
    assert puzzle.color_names == ("RED", "BLUE", "GREEN")
    assert board.targets == (0, 1, 2)
    assert board.get_tile(0, 0) == Tile(1, 1)
    assert board.get_tile(1, 2) == Tile(0, 2)
    assert board.total_moves() == 6
    assert puzzle.state.last_move is None


def test_board_layout_fixture_is_solvable() -> None:
    puzzle = PuzzleParser.parse_file(FIXTURES_DIR / "solvable_3x3.txt")
    solution = [Move.parse(m) for m in ("C2-A2", "B1-B3", "A1-B1")]
    states = replay(puzzle.state, solution)

    assert states[-1].is_solved()
    assert not any(DEFAULT_COORDINATOR.is_invalid(s) for s in states)


def test_tiles_layout_with_custom_targets() -> None:
    puzzle = PuzzleParser.parse_file(FIXTURES_DIR / "stuck_row.txt")
    board = puzzle.board

    assert puzzle.color_names == ("BLUE", "RED")
    assert board.targets == (1, 0)
    assert board.target_row(1) == 0
    assert board.get_tile(0, 1) == Tile(1, 2)

    fired = DEFAULT_COORDINATOR.first_failure(puzzle.state)
    assert fired is not None and fired.name == "stuck-tiles-parity"


def test_moves_section_sets_starting_position() -> None:
    puzzle = PuzzleParser.parse_file(FIXTURES_DIR / "with_moves.txt")

    assert puzzle.board.get_tile(0, 0) == Tile(0, 2)
    assert puzzle.board.get_tile(1, 0) == Tile(1, 2)
    assert puzzle.state.moves == ()


def test_parse_file_logs_path(caplog) -> None:
    with caplog.at_level("INFO", logger="harmony.engine.puzzleparser.parser"):
        PuzzleParser.parse_file(FIXTURES_DIR / "stuck_row.txt")
    assert "stuck_row.txt" in caplog.text


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        PuzzleParser.parse_file(tmp_path / "nope.txt")


# -- inline text --------------------------------------------------------------


def test_colors_without_targets_use_color_ids() -> None:
    text = """
    ROWS 2
    COLS 1
    COLORS
    GOLD 1
    TEAL 0
    TILES
    A1 0 0
    B1 1 0
    """
    puzzle = PuzzleParser.parse(text)
    assert puzzle.board.targets == (0, 1)
    assert puzzle.color_names == ("TEAL", "GOLD")
    assert puzzle.board.is_solved()


def test_names_are_case_insensitive() -> None:
    text = "ROWS 1\nCOLS 2\nBOARD\nred a1 1 a2 1\n"
    puzzle = PuzzleParser.parse(text)
    assert puzzle.color_names == ("RED",)
    assert puzzle.board.get_tile(0, 1) == Tile(0, 1)


def test_gaps_in_color_ids_get_placeholder_names() -> None:
    text = """
    ROWS 2
    COLS 1
    COLORS
    RED 0
    BLUE 2
    TARGETS BLUE RED
    TILES
    A1 2 0
    B1 0 0
    """
    puzzle = PuzzleParser.parse(text)
    assert puzzle.color_names == ("RED", "C1", "BLUE")
    assert puzzle.board.is_solved()


_GOOD_COLORS = "ROWS 2\nCOLS 2\nCOLORS\nRED 0\nBLUE 1\nTARGETS RED BLUE\n"


@pytest.mark.parametrize(
    "text, message",
    [
        ("COLS 2\nBOARD\nRED A1 0 A2 0\n", "Invalid board dimensions"),
        ("ROWS 1\nCOLS 1\nTILES\nA1 0 0\n", "No colors defined"),
        (
            "ROWS 2\nCOLS 1\nCOLORS\nRED 0\nBLUE 1\nTARGETS RED\nTILES\nA1 0 0\nB1 1 0\n",
            "Number of target colors",
        ),
        (_GOOD_COLORS + "TILES\nA1 0 0\nA2 0 0\nB1 1 0\n", "Expected 4 tiles, got 3"),
        (
            "ROWS 2\nCOLS 1\nCOLORS\nRED 0\nBLUE 1\nTARGETS RED PINK\nTILES\nA1 0 0\nB1 1 0\n",
            "Unknown color in targets: PINK",
        ),
        (_GOOD_COLORS + "TILES\nA1 0 0\nA2 0 0\nB1 1 0\nC1 1 0\n", "off the board: C1"),
        (_GOOD_COLORS + "TILES\nA1 0 0\nA1 0 0\nB1 1 0\nB2 1 0\n", "Duplicate tile position: A1"),
        (_GOOD_COLORS + "TILES\nA1 0 0\nA2 0 0\nB1 1 0\nB2 7 0\n", "no target row"),
        (_GOOD_COLORS + "TILES\nA1 0 0\nA2 0 0\nB1 1 0\nB2 1 -1\n", "Negative"),
        ("HELLO\n", "line 1: Unexpected line"),
        ("ROWS 1\nCOLS 2\nBOARD\nRED A1\n", "line 4: Invalid BOARD line"),
        (_GOOD_COLORS + "TILES\nA1 red 0\n", "line 8"),
        (_GOOD_COLORS + "TILES\nA1 0\n", "Invalid tile format"),
        ("ROWS two\n", "line 1"),
    ],
)
def test_rejects_bad_input(text: str, message: str) -> None:
    with pytest.raises(PuzzleFormatError, match=message):
        PuzzleParser.parse(text)


def test_rejects_bad_move_notation() -> None:
    text = "ROWS 2\nCOLS 2\nBOARD\nRED A1 1 B2 1\nBLUE A2 1 B1 1\nMOVES\nA1-B2\n"
    with pytest.raises(PuzzleFormatError, match="line 7"):
        PuzzleParser.parse(text)


def test_rejects_move_on_spent_tile() -> None:
    text = "ROWS 2\nCOLS 2\nBOARD\nRED A1 0 B2 1\nBLUE A2 1 B1 1\nMOVES\nA1-A2\n"
    with pytest.raises(PuzzleFormatError, match="Cannot apply move A1-A2"):
        PuzzleParser.parse(text)


def test_format_error_is_a_value_error() -> None:
    assert issubclass(PuzzleFormatError, ValueError)
