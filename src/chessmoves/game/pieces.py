"""Piece definitions."""

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Which army a piece belongs to."""

    WHITE = "W"
    BLACK = "B"

    def __str__(self) -> str:
        return self.value

    @property
    def forward(self) -> int:
        """Rank delta of a pawn step: white moves up the board, black down."""
        return 1 if self is Side.WHITE else -1

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE


class PieceType(Enum):
    """Chess piece types."""

    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value

    @property
    def is_sliding(self) -> bool:
        """Whether the piece travels along a line that other pieces can block."""
        return self in SLIDING_TYPES


SLIDING_TYPES = frozenset({PieceType.ROOK, PieceType.BISHOP, PieceType.QUEEN})


@dataclass(frozen=True)
class Piece:
    """A piece kind together with its side.

    Pieces carry no location; the board maps squares to pieces.

    Attributes:
        type: Type of piece
        side: Side the piece plays for
    """

    type: PieceType
    side: Side

    def __str__(self) -> str:
        return f"{self.type}{self.side}"

    @classmethod
    def from_code(cls, code: str) -> "Piece":
        """Create a piece from a two-character code such as ``"QW"``."""
        if len(code) != 2:
            raise ValueError(f"Invalid piece code: {code!r}")
        try:
            piece_type = PieceType(code[0].upper())
        except ValueError:
            raise ValueError(f"Unknown piece type: {code[0]}") from None
        try:
            side = Side(code[1].upper())
        except ValueError:
            raise ValueError(f"Invalid side: {code[1]}") from None
        return cls(piece_type, side)
