"""Position geometry endpoints."""

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from chessmoves.api.squares import parse_square

router = APIRouter(prefix="/positions", tags=["positions"])


class RelationResponse(BaseModel):
    """How two squares relate to each other."""

    from_square: str = Field(alias="from")
    to_square: str = Field(alias="to")
    same_file: bool = Field(alias="sameFile")
    same_rank: bool = Field(alias="sameRank")
    positive_diagonal: bool = Field(alias="positiveDiagonal")
    negative_diagonal: bool = Field(alias="negativeDiagonal")
    squared_distance: int = Field(alias="squaredDistance")
    route: list[str]

    model_config = {"populate_by_name": True}


@router.get("/relation", response_model=RelationResponse, response_model_by_alias=True)
async def get_relation(
    from_square: str = Query(..., alias="from"),
    to_square: str = Query(..., alias="to"),
) -> RelationResponse:
    """Describe the geometry between two squares."""
    from_pos = parse_square(from_square)
    to_pos = parse_square(to_square)

    return RelationResponse(
        from_square=from_pos.algebraic,
        to_square=to_pos.algebraic,
        same_file=from_pos.same_file(to_pos),
        same_rank=from_pos.same_rank(to_pos),
        positive_diagonal=from_pos.positive_diagonal(to_pos),
        negative_diagonal=from_pos.negative_diagonal(to_pos),
        squared_distance=from_pos.squared_distance(to_pos),
        route=[pos.algebraic for pos in from_pos.route(to_pos)],
    )
