"""Board occupancy.

Movement rules only need to ask whether a square is occupied, and whether it
is occupied by the other side. ``Occupancy`` is that interface; ``Board`` is
a small in-memory implementation of it.
"""

from dataclasses import dataclass, field
from typing import Protocol

from chessmoves.game.pieces import Piece, PieceType, Side
from chessmoves.game.position import Position


class Occupancy(Protocol):
    """Read-only occupancy queries used by movement rules."""

    def is_occupied(self, position: Position) -> bool: ...

    def is_occupied_by_opponent(self, position: Position, side: Side) -> bool: ...


# Back rank from the a-file to the h-file
STANDARD_BACK_ROW = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]


@dataclass
class Board:
    """Pieces keyed by the square they stand on.

    Attributes:
        squares: Mapping of occupied positions to pieces
    """

    squares: dict[Position, Piece] = field(default_factory=dict)

    @classmethod
    def create_standard(cls) -> "Board":
        """Create a board with both armies on their starting squares."""
        board = cls()
        for x, piece_type in enumerate(STANDARD_BACK_ROW, start=1):
            board.place(Position(x, 1), Piece(piece_type, Side.WHITE))
            board.place(Position(x, 2), Piece(PieceType.PAWN, Side.WHITE))
            board.place(Position(x, 7), Piece(PieceType.PAWN, Side.BLACK))
            board.place(Position(x, 8), Piece(piece_type, Side.BLACK))
        return board

    @classmethod
    def create_empty(cls) -> "Board":
        """Create an empty board (useful for tests)."""
        return cls()

    def copy(self) -> "Board":
        return Board(squares=dict(self.squares))

    def place(self, position: Position, piece: Piece) -> None:
        """Put a piece on a square, replacing whatever stood there."""
        self.squares[position] = piece

    def remove(self, position: Position) -> Piece | None:
        """Clear a square. Returns the piece that was there, if any."""
        return self.squares.pop(position, None)

    def piece_at(self, position: Position) -> Piece | None:
        return self.squares.get(position)

    def is_occupied(self, position: Position) -> bool:
        return position in self.squares

    def is_occupied_by_opponent(self, position: Position, side: Side) -> bool:
        piece = self.squares.get(position)
        return piece is not None and piece.side == side.opponent

    def pieces_for_side(self, side: Side) -> dict[Position, Piece]:
        """Get all pieces of one side keyed by position."""
        return {pos: piece for pos, piece in self.squares.items() if piece.side == side}

    def positions_of(self, piece_type: PieceType, side: Side) -> list[Position]:
        """Squares holding pieces of the given type and side, file then rank."""
        return sorted(
            (
                pos
                for pos, piece in self.squares.items()
                if piece.type == piece_type and piece.side == side
            ),
            key=lambda pos: (pos.x, pos.y),
        )
