"""Scoring endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from chessmoves.api.squares import parse_square
from chessmoves.game.scoring import count_duplicated_files, duplicated_files

router = APIRouter(prefix="/scoring", tags=["scoring"])


class DuplicatedFilesRequest(BaseModel):
    """Squares of one side's pawns."""

    positions: list[str]


class DuplicatedFilesResponse(BaseModel):
    """Pawns sharing a file.

    ``files`` maps each shared file (1-8) to the number of pawns on it.
    """

    count: int
    files: dict[int, int]


@router.post("/duplicated-files", response_model=DuplicatedFilesResponse)
async def get_duplicated_files(request: DuplicatedFilesRequest) -> DuplicatedFilesResponse:
    """Count pawns that share a file with another pawn."""
    positions = [parse_square(square) for square in request.positions]
    return DuplicatedFilesResponse(
        count=count_duplicated_files(positions),
        files=duplicated_files(positions),
    )
