"""Runs the invalidity filters in order and stops at the first hit."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from harmony.engine.invalidity.base import InvalidityTest
from harmony.engine.invalidity.blocked_swap import BLOCKED_SWAP
from harmony.engine.invalidity.future_stuck import FUTURE_STUCK_TILES
from harmony.engine.invalidity.isolated import ISOLATED_TILE
from harmony.engine.invalidity.stalemate import STALEMATE
from harmony.engine.invalidity.stuck_tiles import STUCK_TILES
from harmony.engine.invalidity.wrong_row import WRONG_ROW_ZERO_MOVES
from harmony.models.state import BoardState

LOGGER = logging.getLogger(__name__)


class InvalidityTestCoordinator:
    """Holds a fixed, ordered tuple of filters.

    Order matters only for speed: put the cheap, frequently firing filters
    first.  The verdict is the logical OR of all filters either way.
    """

    __slots__ = ("_tests",)

    def __init__(self, tests: Iterable[InvalidityTest]) -> None:
        self._tests = tuple(tests)

    @property
    def tests(self) -> tuple[InvalidityTest, ...]:
        return self._tests

    @property
    def test_count(self) -> int:
        return len(self._tests)

    def first_failure(self, state: BoardState) -> InvalidityTest | None:
        """Return the first filter that proves *state* unsolvable, if any."""
        for test in self._tests:
            if test.is_invalid(state):
                if LOGGER.isEnabledFor(logging.DEBUG):
                    LOGGER.debug(
                        "%s pruned state after %d moves", test.name, state.move_count
                    )
                return test
        return None

    def is_invalid(self, state: BoardState) -> bool:
        return self.first_failure(state) is not None


DEFAULT_COORDINATOR = InvalidityTestCoordinator(
    (
        WRONG_ROW_ZERO_MOVES,
        BLOCKED_SWAP,
        ISOLATED_TILE,
        STALEMATE,
        STUCK_TILES,
        FUTURE_STUCK_TILES,
    )
)
