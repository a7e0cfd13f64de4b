"""
Heatmap aggregation.

Maps the session log to training volume per calendar day.  The output is
sparse (days without sessions are absent); filling gaps and colouring
is left to :mod:`gymlog.presentation.heatmap`.
"""

from __future__ import annotations

import datetime
from collections import defaultdict
from typing import Iterable

from gymlog.schemas.stats import HeatmapPoint
from gymlog.tracker.stats import SessionLike


def aggregate_intensity(sessions: Iterable[SessionLike]) -> dict[datetime.date, int]:
    """Sum the number of muscle groups trained per date.

    Sessions sharing a date accumulate; they do not overwrite each other.
    """
    totals: dict[datetime.date, int] = defaultdict(int)
    for session in sessions:
        totals[session.date] += len(session.muscle_groups)
    return dict(totals)


def compute_heatmap_points(sessions: Iterable[SessionLike]) -> list[HeatmapPoint]:
    """Return one :class:`HeatmapPoint` per trained date, oldest first."""
    totals = aggregate_intensity(sessions)
    return [HeatmapPoint(date=date, intensity=totals[date]) for date in sorted(totals)]
