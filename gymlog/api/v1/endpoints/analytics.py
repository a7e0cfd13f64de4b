"""
Analytics endpoints: muscle-group dashboard and training heatmap.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from gymlog.db.session import get_db
from gymlog.schemas.stats import DashboardResponse, HeatmapResponse
from gymlog.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get(
    "/dashboard",
    summary="Per-muscle-group recency/frequency and overall balance.",
    response_model=DashboardResponse,
)
def get_dashboard(
    as_of: Optional[datetime.date] = Query(
        None, description="Reference date (defaults to today)"
    ),
    db: Session = Depends(get_db),
):
    ref_date = as_of or datetime.date.today()
    return AnalyticsService(db).dashboard(ref_date)


@router.get(
    "/heatmap",
    summary="Training volume per day, optionally as a full-year calendar.",
    response_model=HeatmapResponse,
)
def get_heatmap(
    year: Optional[int] = Query(
        None, ge=1, le=9999, description="Calendar year to fill day by day"
    ),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).heatmap(year)
