"""Movement legality for each piece type."""

import logging

from chessmoves.game.board import Occupancy
from chessmoves.game.pieces import Piece, PieceType, Side
from chessmoves.game.position import Position, all_positions

logger = logging.getLogger(__name__)

# Squared distance of a (1, 2) offset
KNIGHT_SQUARED_DISTANCE = 5

# Squared distances of the eight neighbouring squares
KING_SQUARED_DISTANCES = frozenset({1, 2})


class _EmptyBoard:
    """Occupancy with nothing on it, used when no board is given."""

    def is_occupied(self, position: Position) -> bool:
        return False

    def is_occupied_by_opponent(self, position: Position, side: Side) -> bool:
        return False


EMPTY_BOARD: Occupancy = _EmptyBoard()


def is_geometric_move(piece_type: PieceType, from_pos: Position, to_pos: Position) -> bool:
    """Check whether a move has the right shape for a piece type.

    Ignores every other piece on the board. Pawns depend on their side, so
    this always returns False for them; use ``can_move``.
    """
    match piece_type:
        case PieceType.ROOK:
            return _is_rook_move(from_pos, to_pos)
        case PieceType.BISHOP:
            return _is_bishop_move(from_pos, to_pos)
        case PieceType.QUEEN:
            return _is_rook_move(from_pos, to_pos) or _is_bishop_move(from_pos, to_pos)
        case PieceType.KNIGHT:
            return _is_knight_move(from_pos, to_pos)
        case PieceType.KING:
            return _is_king_move(from_pos, to_pos)
        case _:
            return False


def can_move(
    piece: Piece,
    from_pos: Position,
    to_pos: Position,
    board: Occupancy | None = None,
) -> bool:
    """Check whether a piece may move between two squares.

    Sliding pieces also need every square on the route to be empty. Pawns
    need an empty destination to advance and an opponent there to capture.
    What stands on the destination is otherwise not checked.

    Args:
        piece: The moving piece
        from_pos: Square the piece stands on
        to_pos: Destination square
        board: Occupancy to consult; None means an empty board

    Returns:
        True if the move is legal
    """
    if board is None:
        board = EMPTY_BOARD

    if piece.type == PieceType.PAWN:
        return _can_pawn_move(piece, from_pos, to_pos, board)

    if not is_geometric_move(piece.type, from_pos, to_pos):
        return False

    if piece.type.is_sliding:
        blocking = blocking_squares(from_pos, to_pos, board)
        if blocking:
            logger.debug(
                "%s %s -> %s blocked at %s",
                piece, from_pos.algebraic, to_pos.algebraic,
                ", ".join(p.algebraic for p in blocking),
            )
            return False

    return True


def blocking_squares(from_pos: Position, to_pos: Position, board: Occupancy) -> list[Position]:
    """Occupied squares on the route between two positions, in route order."""
    return [pos for pos in from_pos.route(to_pos) if board.is_occupied(pos)]


def legal_destinations(
    piece: Piece,
    from_pos: Position,
    board: Occupancy | None = None,
) -> list[Position]:
    """All squares a piece may move to, file then rank order."""
    return [pos for pos in all_positions() if can_move(piece, from_pos, pos, board)]


def _is_rook_move(from_pos: Position, to_pos: Position) -> bool:
    if from_pos == to_pos:
        return False
    return from_pos.same_file(to_pos) or from_pos.same_rank(to_pos)


def _is_bishop_move(from_pos: Position, to_pos: Position) -> bool:
    # A square is on both diagonals with itself
    if from_pos == to_pos:
        return False
    return from_pos.positive_diagonal(to_pos) or from_pos.negative_diagonal(to_pos)


def _is_knight_move(from_pos: Position, to_pos: Position) -> bool:
    return from_pos.squared_distance(to_pos) == KNIGHT_SQUARED_DISTANCE


def _is_king_move(from_pos: Position, to_pos: Position) -> bool:
    return (
        from_pos.squared_distance(to_pos) in KING_SQUARED_DISTANCES
        and abs(from_pos.file_delta(to_pos)) <= 1
        and abs(from_pos.rank_delta(to_pos)) <= 1
    )


def _can_pawn_move(piece: Piece, from_pos: Position, to_pos: Position, board: Occupancy) -> bool:
    """Check pawn movement.

    Pawns can:
    - Move forward 1 square onto an empty square
    - Move forward 2 squares from a start row when both squares are empty
    - Capture diagonally forward (only onto an opponent piece)
    """
    direction = piece.side.forward
    rank_diff = to_pos.y - from_pos.y
    file_diff = to_pos.x - from_pos.x

    # Forward movement
    if file_diff == 0:
        if rank_diff == direction:
            return not board.is_occupied(to_pos)

        if rank_diff == 2 * direction and from_pos.is_start_row():
            middle = Position(from_pos.x, from_pos.y + direction)
            return not board.is_occupied(middle) and not board.is_occupied(to_pos)

        return False

    # Diagonal capture
    if abs(file_diff) == 1 and rank_diff == direction:
        return board.is_occupied_by_opponent(to_pos, piece.side)

    return False
