"""Presentation adapters: engine output → display-ready structures."""

from gymlog.presentation.dashboard import build_muscle_group_cards, describe_balance, describe_last_trained
from gymlog.presentation.heatmap import build_calendar, calendar_year_bounds, intensity_level

__all__ = [
    "build_calendar",
    "build_muscle_group_cards",
    "calendar_year_bounds",
    "describe_balance",
    "describe_last_trained",
    "intensity_level",
]
