"""Helpers shared by API endpoints."""

from fastapi import HTTPException

from chessmoves.game.board import Board
from chessmoves.game.board_parser import parse_board_string
from chessmoves.game.position import Position


def parse_square(square: str) -> Position:
    """Parse an algebraic square, answering 422 for bad input."""
    try:
        return Position.from_algebraic(square)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None


def parse_board(board: str | None) -> Board | None:
    """Parse an optional board diagram, answering 422 for bad input."""
    if board is None:
        return None
    try:
        return parse_board_string(board)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid board: {e}") from None
