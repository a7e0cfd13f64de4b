"""
Calendar heatmap presentation.

Fills the sparse date→intensity data into a dense day grid and assigns
each day a colour bucket using a threshold scale.
"""

import bisect
import datetime
from typing import Iterable

from gymlog.schemas.stats import CalendarDay, HeatmapPoint

# Bucket boundaries: intensity < 1 → 0, 1 → 1, 2 → 2, 3 → 3, >= 4 → 4
INTENSITY_THRESHOLDS: list[int] = [1, 2, 3, 4]
INTENSITY_COLORS: list[str] = ["#ebedf0", "#9be9a8", "#40c463", "#30a14e", "#216e39"]


def intensity_level(intensity: int) -> int:
    """Index of the colour bucket for *intensity*."""
    return bisect.bisect_right(INTENSITY_THRESHOLDS, intensity)


def calendar_year_bounds(year: int) -> tuple[datetime.date, datetime.date]:
    return datetime.date(year, 1, 1), datetime.date(year, 12, 31)


def build_calendar(points: Iterable[HeatmapPoint], start: datetime.date,
                   end: datetime.date, ) -> list[CalendarDay]:
    """Dense list of days in ``[start, end]``; days without data get 0.

    Points outside the range are ignored.
    """
    if end < start:
        raise ValueError(f"Calendar end {end} is before start {start}")

    by_date = {point.date: point.intensity for point in points}
    days: list[CalendarDay] = []
    current = start
    while current <= end:
        intensity = by_date.get(current, 0)
        level = intensity_level(intensity)
        days.append(CalendarDay(date=current, intensity=intensity, level=level, color=INTENSITY_COLORS[level]))
        current += datetime.timedelta(days=1)
    return days
