"""
Fashion Catalog API — Stats Route
==================================

GET /api/stats: product count, average price and per-category counts,
recomputed on every request.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.database import get_db_session
from catalog_api.schemas.common import StatsResponse
from catalog_api.services.stats_service import stats_service

router = APIRouter(prefix="/api/stats", tags=["Stats"])


@router.get("", response_model=StatsResponse, summary="Catalog statistics")
async def get_stats(db: AsyncSession = Depends(get_db_session)) -> StatsResponse:
    return await stats_service.compute(db)
