from harmony.models.board import Board, Tile
from harmony.models.move import Move, notation_to_position, position_to_notation
from harmony.models.state import BoardState

__all__ = [
    "Board",
    "BoardState",
    "Move",
    "Tile",
    "notation_to_position",
    "position_to_notation",
]
