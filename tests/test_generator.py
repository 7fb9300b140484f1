from __future__ import annotations

import random

import pytest

from harmony.engine.puzzlegenerator import PuzzleGenerator
from harmony.engine.puzzleparser import PuzzleParser
from harmony.models import BoardState
from tests.helpers import replay


def test_solved_board() -> None:
    board = PuzzleGenerator.solved(3, 4)
    assert board.is_solved()
    assert board.total_moves() == 0
    assert board.targets == (0, 1, 2)


def test_solved_board_with_mapping() -> None:
    board = PuzzleGenerator.solved(2, 2, targets=[1, 0])
    assert board.get_tile(0, 0).color == 1
    assert board.is_solved()


@pytest.mark.parametrize("rows, cols, moves", [(2, 2, 4), (3, 3, 8), (4, 5, 15)])
def test_scramble_adds_two_moves_per_swap(rows, cols, moves) -> None:
    scramble = PuzzleGenerator.generate(rows, cols, moves, seed=3)

    assert len(scramble.solution) == moves
    assert scramble.board.total_moves() == 2 * moves
    assert all(m.is_valid() for m in scramble.solution)


@pytest.mark.parametrize("seed", range(10))
def test_solution_solves_the_board(seed) -> None:
    scramble = PuzzleGenerator.generate(3, 3, 9, seed=seed)
    states = replay(BoardState(scramble.board), scramble.solution)
    assert states[-1].is_solved()


def test_same_seed_same_puzzle() -> None:
    a = PuzzleGenerator.generate(3, 3, 6, seed=42)
    b = PuzzleGenerator.generate(3, 3, 6, seed=42)
    assert a == b


def test_scramble_does_not_touch_input() -> None:
    start = PuzzleGenerator.solved(2, 3)
    PuzzleGenerator.scramble(start, 5, random.Random(1))
    assert start.is_solved()


def test_single_cell_board_cannot_scramble() -> None:
    scramble = PuzzleGenerator.generate(1, 1, 5, seed=0)
    assert scramble.solution == ()
    assert scramble.board.is_solved()


def test_single_row_uses_horizontal_swaps() -> None:
    scramble = PuzzleGenerator.generate(1, 4, 6, seed=5)
    assert all(m.row1 == m.row2 == 0 for m in scramble.solution)


# -- text output --------------------------------------------------------------


def test_board_text_reads_back() -> None:
    scramble = PuzzleGenerator.generate(3, 4, 10, seed=11)
    text = PuzzleGenerator.to_text(scramble.board, ["RED", "BLUE", "GREEN"])

    assert "BOARD" in text
    puzzle = PuzzleParser.parse(text)
    assert puzzle.board == scramble.board
    assert puzzle.color_names == ("RED", "BLUE", "GREEN")


def test_mapped_board_uses_tiles_layout() -> None:
    scramble = PuzzleGenerator.generate(3, 2, 5, seed=2, targets=[2, 0, 1])
    text = PuzzleGenerator.to_text(scramble.board, ["RED", "BLUE", "GREEN"])

    assert "TARGETS GREEN RED BLUE" in text
    assert "TILES" in text
    puzzle = PuzzleParser.parse(text)
    assert puzzle.board == scramble.board
