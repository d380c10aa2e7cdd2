"""Move legality endpoints."""

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from chessmoves.api.squares import parse_board, parse_square
from chessmoves.game.moves import blocking_squares, can_move, legal_destinations
from chessmoves.game.pieces import Piece, PieceType, Side

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/moves", tags=["moves"])


# Request models


class MoveCheckRequest(BaseModel):
    """A single move to check.

    ``board`` is an optional 8-line diagram (see ``parse_board_string``);
    without it the board is treated as empty.
    """

    piece: PieceType
    side: Side
    from_square: str = Field(alias="from")
    to_square: str = Field(alias="to")
    board: str | None = None

    model_config = {"populate_by_name": True}


class DestinationsRequest(BaseModel):
    """A piece on a square whose moves should be listed."""

    piece: PieceType
    side: Side
    from_square: str = Field(alias="from")
    board: str | None = None

    model_config = {"populate_by_name": True}


# Response models


class MoveCheckResponse(BaseModel):
    """Result of a move check."""

    legal: bool
    route: list[str]
    blocking: list[str]


class DestinationsResponse(BaseModel):
    """Squares a piece may move to."""

    destinations: list[str]


# Endpoints


@router.post("/check", response_model=MoveCheckResponse)
async def check_move(request: MoveCheckRequest) -> MoveCheckResponse:
    """Check whether a piece may move between two squares."""
    from_pos = parse_square(request.from_square)
    to_pos = parse_square(request.to_square)
    board = parse_board(request.board)
    piece = Piece(request.piece, request.side)

    legal = can_move(piece, from_pos, to_pos, board)
    route = from_pos.route(to_pos) if piece.type.is_sliding else []
    blocking = blocking_squares(from_pos, to_pos, board) if board is not None and route else []

    logger.debug(
        f"Checked {piece} {from_pos.algebraic} -> {to_pos.algebraic}: legal={legal}"
    )
    return MoveCheckResponse(
        legal=legal,
        route=[pos.algebraic for pos in route],
        blocking=[pos.algebraic for pos in blocking],
    )


@router.post("/destinations", response_model=DestinationsResponse)
async def list_destinations(request: DestinationsRequest) -> DestinationsResponse:
    """List every square a piece may move to."""
    from_pos = parse_square(request.from_square)
    board = parse_board(request.board)
    piece = Piece(request.piece, request.side)

    return DestinationsResponse(
        destinations=[pos.algebraic for pos in legal_destinations(piece, from_pos, board)]
    )
