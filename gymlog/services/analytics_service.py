"""
Analytics service.

Reads a snapshot of the session log and hands it to the pure engine
and presentation adapters.  Holds no state between calls.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from gymlog.presentation.dashboard import build_muscle_group_cards, describe_balance
from gymlog.presentation.heatmap import build_calendar, calendar_year_bounds
from gymlog.schemas.stats import DashboardResponse, HeatmapResponse
from gymlog.schemas.workout_session import WorkoutSessionResponse
from gymlog.services.workout_session_service import WorkoutSessionService
from gymlog.tracker.heatmap import compute_heatmap_points
from gymlog.tracker.stats import StatsConfig, compute_balance, compute_muscle_group_stats


class AnalyticsService:
    """Derived views over the session log."""

    def __init__(self, session: Session, config: Optional[StatsConfig] = None):
        self.sessions = WorkoutSessionService(session)
        self.config = config

    def _snapshot(self) -> list[WorkoutSessionResponse]:
        return self.sessions.get_all_sessions()

    def dashboard(self, as_of: datetime.date) -> DashboardResponse:
        stats = compute_muscle_group_stats(self._snapshot(), as_of, self.config)
        balance = compute_balance(stats, self.config)
        return DashboardResponse(as_of=as_of, stats=stats, balance=balance, balance_display=describe_balance(balance),
                                 cards=build_muscle_group_cards(stats), )

    def heatmap(self, year: Optional[int] = None) -> HeatmapResponse:
        points = compute_heatmap_points(self._snapshot())
        if year is None:
            return HeatmapResponse(points=points)

        start, end = calendar_year_bounds(year)
        return HeatmapResponse(points=points, year=year, calendar=build_calendar(points, start, end))
