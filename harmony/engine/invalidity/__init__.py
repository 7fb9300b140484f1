from harmony.engine.invalidity.base import InvalidityTest
from harmony.engine.invalidity.blocked_swap import BLOCKED_SWAP, BlockedSwapTest
from harmony.engine.invalidity.coordinator import (
    DEFAULT_COORDINATOR,
    InvalidityTestCoordinator,
)
from harmony.engine.invalidity.future_stuck import (
    FUTURE_STUCK_TILES,
    FutureStuckTilesTest,
)
from harmony.engine.invalidity.isolated import ISOLATED_TILE, IsolatedTileTest
from harmony.engine.invalidity.stalemate import STALEMATE, StalemateTest
from harmony.engine.invalidity.stuck_tiles import STUCK_TILES, StuckTilesTest
from harmony.engine.invalidity.wrong_row import (
    WRONG_ROW_ZERO_MOVES,
    WrongRowZeroMovesTest,
)

__all__ = [
    "BLOCKED_SWAP",
    "DEFAULT_COORDINATOR",
    "FUTURE_STUCK_TILES",
    "ISOLATED_TILE",
    "STALEMATE",
    "STUCK_TILES",
    "WRONG_ROW_ZERO_MOVES",
    "BlockedSwapTest",
    "FutureStuckTilesTest",
    "InvalidityTest",
    "InvalidityTestCoordinator",
    "IsolatedTileTest",
    "StalemateTest",
    "StuckTilesTest",
    "WrongRowZeroMovesTest",
]
