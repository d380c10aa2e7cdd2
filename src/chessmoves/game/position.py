"""Board coordinates and the geometry between two squares.

Files (``x``) and ranks (``y``) are both numbered 1-8. A file of 1 is the
a-file and a rank of 1 is white's back rank.
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MIN_COORDINATE = 1
MAX_COORDINATE = 8

# Pawns start on rank 2 (white) or rank 7 (black)
START_RANKS = frozenset({2, 7})

FILE_LETTERS = "abcdefgh"

# A file letter and a rank number written without leading zeros
SQUARE_PATTERN = re.compile(r"[a-z](?:0|[1-9][0-9]*)")


class RangeError(ValueError):
    """Raised when a coordinate falls outside the board."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(
            f"Position ({x}, {y}) is off the board; "
            f"both axes must be within [{MIN_COORDINATE}, {MAX_COORDINATE}]"
        )


def _in_range(value: int) -> bool:
    return MIN_COORDINATE <= value <= MAX_COORDINATE


def _between(a: int, b: int) -> list[int]:
    """Integers strictly between a and b, ascending."""
    return list(range(min(a, b) + 1, max(a, b)))


@dataclass(frozen=True)
class Coordinate:
    """A validated (file, rank) pair."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for value in (self.x, self.y):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Coordinates must be integers, got {value!r}")
        if not (_in_range(self.x) and _in_range(self.y)):
            logger.debug("Rejected off-board coordinate (%s, %s)", self.x, self.y)
            raise RangeError(self.x, self.y)


@dataclass(frozen=True, init=False)
class Position:
    """An immutable square on the board.

    Equality and hashing are structural over ``(x, y)``, so positions can be
    used as dict keys and set members.

    Attributes:
        coordinate: The validated coordinate this position wraps
    """

    coordinate: Coordinate

    def __init__(self, x: int, y: int) -> None:
        object.__setattr__(self, "coordinate", Coordinate(x, y))

    @property
    def x(self) -> int:
        """File, 1-8."""
        return self.coordinate.x

    @property
    def y(self) -> int:
        """Rank, 1-8."""
        return self.coordinate.y

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"

    def __str__(self) -> str:
        return f"{self.x}{self.y}"

    # Notation

    @property
    def algebraic(self) -> str:
        """Square name such as ``"e4"``."""
        return f"{FILE_LETTERS[self.x - 1]}{self.y}"

    @classmethod
    def from_algebraic(cls, square: str) -> "Position":
        """Parse a square name such as ``"e4"``.

        Raises:
            ValueError: If the text is not a letter followed by a number
            RangeError: If the square is not on the 8x8 board
        """
        text = square.strip().lower()
        if not SQUARE_PATTERN.fullmatch(text):
            raise ValueError(f"Invalid square: {square!r}")
        x = ord(text[0]) - ord("a") + 1
        return cls(x, int(text[1:]))

    # Relations

    def file_delta(self, other: "Position") -> int:
        return self.x - other.x

    def rank_delta(self, other: "Position") -> int:
        return self.y - other.y

    def same_file(self, other: "Position") -> bool:
        return self.x == other.x

    def same_rank(self, other: "Position") -> bool:
        return self.y == other.y

    def positive_diagonal(self, other: "Position") -> bool:
        """Whether both squares lie on a rising (a1-h8 direction) diagonal.

        True for the square itself, as is ``negative_diagonal``.
        """
        return self.rank_delta(other) == self.file_delta(other)

    def negative_diagonal(self, other: "Position") -> bool:
        """Whether both squares lie on a falling (a8-h1 direction) diagonal."""
        return self.rank_delta(other) + self.file_delta(other) == 0

    def squared_distance(self, other: "Position") -> int:
        """Squared euclidean distance; a knight hop is always 5."""
        return self.rank_delta(other) ** 2 + self.file_delta(other) ** 2

    def is_start_row(self) -> bool:
        """Whether this square is on a pawn starting rank for either side."""
        return self.y in START_RANKS

    def matches(self, x: int, y: int) -> bool:
        """Whether this position is at the raw pair (x, y)."""
        return self.x == x and self.y == y

    def route(self, other: "Position") -> list["Position"]:
        """Squares strictly between this position and ``other``.

        Routes for every relation that holds are concatenated in the order
        rank, file, positive diagonal, negative diagonal. Only coincident
        squares satisfy more than one relation, and their route is empty.
        Unaligned squares also give an empty route.
        """
        files = _between(self.x, other.x)
        ranks = _between(self.y, other.y)

        route: list[Position] = []
        if self.same_rank(other):
            route.extend(Position(x, self.y) for x in files)
        if self.same_file(other):
            route.extend(Position(self.x, y) for y in ranks)
        if self.positive_diagonal(other):
            route.extend(Position(x, y) for x, y in zip(files, ranks))
        if self.negative_diagonal(other):
            route.extend(Position(x, y) for x, y in zip(files, reversed(ranks)))
        return route


def all_positions() -> list[Position]:
    """Every square on the board, file-major then rank."""
    return [
        Position(x, y)
        for x in range(MIN_COORDINATE, MAX_COORDINATE + 1)
        for y in range(MIN_COORDINATE, MAX_COORDINATE + 1)
    ]
