"""Business logic services."""

from gymlog.services.analytics_service import AnalyticsService
from gymlog.services.workout_session_service import WorkoutSessionService

__all__ = [
    "AnalyticsService",
    "WorkoutSessionService",
]
