"""
Muscle-group statistics engine.

Turns a snapshot of the session log into per-group recency/frequency
figures and an overall balance judgment.

Key design choices
------------------

1. **Explicit reference date**: ``now`` is always a parameter, never
   read from a clock here, so results are reproducible.
2. **Day granularity**: a ``datetime`` is reduced to its calendar date
   before any comparison; sessions carry no time of day.
3. **Inclusive windows**: a session dated exactly N days before ``now``
   still counts towards the N-day window.
4. **Balance from frequency, not status**: the judgment looks only at
   the 7-day counts.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Mapping, Optional, Protocol, Sequence, Union

from pydantic import BaseModel, Field

from gymlog.schemas.muscle_group import MUSCLE_GROUPS, MuscleGroup
from gymlog.schemas.stats import (BalanceJudgment, BalanceLevel, MuscleGroupStats, TrainingStatus, )


class SessionLike(Protocol):
    """Anything carrying a calendar date and the groups trained on it."""

    date: datetime.date
    muscle_groups: Sequence[MuscleGroup]


# ======================================================================
# Configuration
# ======================================================================


class StatsConfig(BaseModel):
    """Window lengths and status thresholds, in days."""

    short_window_days: int = Field(7, ge=1)
    long_window_days: int = Field(30, ge=1, le=30)
    good_max_days: int = Field(3, ge=0)
    warning_max_days: int = Field(7, ge=0)

    # Balance: minimum short-window sessions per group
    excellent_min_sessions: int = Field(2, ge=1)
    neutral_min_sessions: int = Field(1, ge=1)


DEFAULT_CONFIG = StatsConfig()


# ======================================================================
# Status labelling
# ======================================================================


def classify_status(days_since: Optional[int], config: Optional[StatsConfig] = None) -> TrainingStatus:
    """Map days since last training to a status bucket."""
    cfg = config or DEFAULT_CONFIG
    if days_since is None:
        return TrainingStatus.BAD
    if days_since <= cfg.good_max_days:
        return TrainingStatus.GOOD
    if days_since <= cfg.warning_max_days:
        return TrainingStatus.WARNING
    return TrainingStatus.BAD


# ======================================================================
# Per-group computation
# ======================================================================


def _as_date(now: Union[datetime.date, datetime.datetime]) -> datetime.date:
    # datetime is a subclass of date, so check it first
    if isinstance(now, datetime.datetime):
        return now.date()
    return now


def _compute_group_stats(dates: list[datetime.date], today: datetime.date, cfg: StatsConfig) -> MuscleGroupStats:
    if not dates:
        return MuscleGroupStats(days_since_last_trained=None, sessions_last_7_days=0, sessions_last_30_days=0,
                                status=TrainingStatus.BAD, )

    # Sessions logged in the future count as trained today
    days_since = max((today - max(dates)).days, 0)

    short_start = today - datetime.timedelta(days=cfg.short_window_days)
    long_start = today - datetime.timedelta(days=cfg.long_window_days)

    return MuscleGroupStats(days_since_last_trained=days_since,
                            sessions_last_7_days=sum(1 for d in dates if d >= short_start),
                            sessions_last_30_days=sum(1 for d in dates if d >= long_start),
                            status=classify_status(days_since, cfg), )


def compute_muscle_group_stats(sessions: Iterable[SessionLike], now: Union[datetime.date, datetime.datetime],
                               config: Optional[StatsConfig] = None, ) -> dict[MuscleGroup, MuscleGroupStats]:
    """Compute recency/frequency stats for every muscle group.

    Args:
        sessions: Validated session snapshot, in any order.
        now: Reference date (or datetime, reduced to its date).
        config: Optional :class:`StatsConfig` override.

    Returns:
        A mapping with one entry per :class:`MuscleGroup`, in display order.
    """
    cfg = config or DEFAULT_CONFIG
    today = _as_date(now)

    dates_by_group: dict[MuscleGroup, list[datetime.date]] = {group: [] for group in MUSCLE_GROUPS}
    for session in sessions:
        for group in MUSCLE_GROUPS:
            if group in session.muscle_groups:
                dates_by_group[group].append(session.date)

    return {group: _compute_group_stats(dates_by_group[group], today, cfg) for group in MUSCLE_GROUPS}


# ======================================================================
# Balance
# ======================================================================


def compute_balance(stats: Mapping[MuscleGroup, MuscleGroupStats],
                    config: Optional[StatsConfig] = None, ) -> BalanceJudgment:
    """Judge overall balance from the short-window counts of all groups.

    A group absent from *stats* counts as not trained.
    """
    cfg = config or DEFAULT_CONFIG
    counts = [stats[group].sessions_last_7_days if group in stats else 0 for group in MUSCLE_GROUPS]

    if all(count >= cfg.excellent_min_sessions for count in counts):
        return BalanceJudgment(level=BalanceLevel.EXCELLENT)
    if all(count >= cfg.neutral_min_sessions for count in counts):
        return BalanceJudgment(level=BalanceLevel.NEUTRAL)
    return BalanceJudgment(level=BalanceLevel.POOR)
