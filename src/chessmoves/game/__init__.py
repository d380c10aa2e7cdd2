"""Movement rules module for chessmoves."""

from chessmoves.game.board import Board, Occupancy
from chessmoves.game.board_parser import board_to_string, parse_board_string
from chessmoves.game.moves import (
    blocking_squares,
    can_move,
    is_geometric_move,
    legal_destinations,
)
from chessmoves.game.pieces import Piece, PieceType, Side
from chessmoves.game.position import (
    MAX_COORDINATE,
    MIN_COORDINATE,
    Coordinate,
    Position,
    RangeError,
    all_positions,
)
from chessmoves.game.scoring import count_duplicated_files, duplicated_files

__all__ = [
    # Position
    "Coordinate",
    "Position",
    "RangeError",
    "MIN_COORDINATE",
    "MAX_COORDINATE",
    "all_positions",
    # Pieces
    "Piece",
    "PieceType",
    "Side",
    # Board
    "Board",
    "Occupancy",
    "parse_board_string",
    "board_to_string",
    # Moves
    "can_move",
    "is_geometric_move",
    "blocking_squares",
    "legal_destinations",
    # Scoring
    "count_duplicated_files",
    "duplicated_files",
]
