"""
Dashboard statistics route
"""

from fastapi import APIRouter, Depends

from qanyare.application.dtos.analytics_dtos import StatsResponse
from qanyare.application.use_cases.analytics_use_case import AnalyticsUseCase
from qanyare.presentation.api.dependencies import get_analytics_use_case

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    analytics: AnalyticsUseCase = Depends(get_analytics_use_case),
) -> StatsResponse:
    return await analytics.get_stats()
