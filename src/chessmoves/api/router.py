"""Main API router."""

from fastapi import APIRouter

from chessmoves.api.moves import router as moves_router
from chessmoves.api.positions import router as positions_router
from chessmoves.api.scoring import router as scoring_router

api_router = APIRouter()
api_router.include_router(moves_router)
api_router.include_router(positions_router)
api_router.include_router(scoring_router)
