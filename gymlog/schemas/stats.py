"""
Derived statistics schemas.

Recomputed on every request from the session log, never persisted.

Status labels per muscle group:

- ``good``   : trained within the last 3 days
- ``warning``: last trained 4 to 7 days ago
- ``bad``    : last trained more than 7 days ago, or never

Balance levels over all six groups (7-day counts):

- ``excellent``: every group trained at least twice
- ``neutral``  : every group trained at least once
- ``poor``     : at least one group not trained
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from gymlog.schemas.muscle_group import MuscleGroup


class TrainingStatus(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"


class BalanceLevel(str, Enum):
    EXCELLENT = "excellent"
    NEUTRAL = "neutral"
    POOR = "poor"


class MuscleGroupStats(BaseModel):
    """Recency and frequency for a single muscle group."""

    days_since_last_trained: Optional[int] = Field(None, ge=0,
                                                   description="Whole days since the latest session (None = never)")
    sessions_last_7_days: int = Field(0, ge=0)
    sessions_last_30_days: int = Field(0, ge=0)
    status: TrainingStatus

    @property
    def never_trained(self) -> bool:
        return self.days_since_last_trained is None


class BalanceJudgment(BaseModel):
    level: BalanceLevel


class HeatmapPoint(BaseModel):
    """Training volume on one calendar day."""

    date: datetime.date
    intensity: int = Field(..., ge=1, description="Sum of muscle-group counts across the day's sessions")


# ----------------------------------------------------------------------
# Presentation payloads
# ----------------------------------------------------------------------


class MuscleGroupCard(BaseModel):
    """One dashboard card, ready to render."""

    muscle_group: MuscleGroup
    status: TrainingStatus
    last_trained: str = Field(..., examples=["Trained today", "3 days ago", "Never trained"])
    last_7_days: str = Field(..., examples=["2x"])
    last_30_days: str = Field(..., examples=["9x"])


class BalanceDisplay(BaseModel):
    level: BalanceLevel
    label: str
    mood: str
    emoji: str


class DashboardResponse(BaseModel):
    """Complete muscle-group dashboard returned by the analytics endpoint."""

    as_of: datetime.date
    stats: dict[MuscleGroup, MuscleGroupStats]
    balance: BalanceJudgment
    balance_display: BalanceDisplay
    cards: list[MuscleGroupCard]


class CalendarDay(BaseModel):
    date: datetime.date
    intensity: int = Field(0, ge=0)
    level: int = Field(0, ge=0, le=4, description="Colour bucket index into the heatmap palette")
    color: str


class HeatmapResponse(BaseModel):
    points: list[HeatmapPoint]
    year: Optional[int] = None
    calendar: Optional[list[CalendarDay]] = None
