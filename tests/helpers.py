from __future__ import annotations

import random
from collections.abc import Iterator, Sequence

from harmony.models.board import Board
from harmony.models.move import Move
from harmony.models.state import BoardState


def board(rows: Sequence[Sequence[tuple[int, int]]], targets=None) -> Board:
    """Shorthand: ``board([[(color, moves), ...], ...])``."""
    return Board.from_rows(rows, targets)


def legal_moves(b: Board) -> list[Move]:
    """Every swap of two tiles that both still have budget."""
    moves: list[Move] = []
    for r in range(b.rows):
        for c1 in range(b.cols):
            if b.get_tile(r, c1).remaining_moves == 0:
                continue
            for c2 in range(c1 + 1, b.cols):
                if b.get_tile(r, c2).remaining_moves > 0:
                    moves.append(Move(r, c1, r, c2))
    for c in range(b.cols):
        for r1 in range(b.rows):
            if b.get_tile(r1, c).remaining_moves == 0:
                continue
            for r2 in range(r1 + 1, b.rows):
                if b.get_tile(r2, c).remaining_moves > 0:
                    moves.append(Move(r1, c, r2, c))
    return moves


def random_walk(
    state: BoardState, rng: random.Random, max_steps: int
) -> Iterator[BoardState]:
    """Yield successive states reached by random legal moves."""
    for _ in range(max_steps):
        moves = legal_moves(state.board)
        if not moves:
            return
        state = state.apply(rng.choice(moves))
        yield state


def replay(state: BoardState, moves: Sequence[Move]) -> list[BoardState]:
    """Apply *moves* in order, returning every state including the first."""
    states = [state]
    for move in moves:
        states.append(states[-1].apply(move))
    return states
