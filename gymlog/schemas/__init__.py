"""Pydantic schemas for request/response validation."""

from gymlog.schemas.muscle_group import MUSCLE_GROUP_NAMES, MUSCLE_GROUPS, MuscleGroup
from gymlog.schemas.stats import (
    BalanceDisplay,
    BalanceJudgment,
    BalanceLevel,
    CalendarDay,
    DashboardResponse,
    HeatmapPoint,
    HeatmapResponse,
    MuscleGroupCard,
    MuscleGroupStats,
    TrainingStatus,
)
from gymlog.schemas.workout_session import WorkoutSessionResponse, WorkoutSessionWrite

__all__ = [
    "MUSCLE_GROUP_NAMES",
    "MUSCLE_GROUPS",
    "MuscleGroup",
    "BalanceDisplay",
    "BalanceJudgment",
    "BalanceLevel",
    "CalendarDay",
    "DashboardResponse",
    "HeatmapPoint",
    "HeatmapResponse",
    "MuscleGroupCard",
    "MuscleGroupStats",
    "TrainingStatus",
    "WorkoutSessionResponse",
    "WorkoutSessionWrite",
]
