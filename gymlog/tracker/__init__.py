"""Gym tracker core: session validation, muscle-group statistics, heatmap."""

from gymlog.tracker.heatmap import aggregate_intensity, compute_heatmap_points
from gymlog.tracker.stats import StatsConfig, classify_status, compute_balance, compute_muscle_group_stats
from gymlog.tracker.validation import is_valid_date, is_valid_muscle_groups

__all__ = [
    "StatsConfig",
    "aggregate_intensity",
    "classify_status",
    "compute_balance",
    "compute_heatmap_points",
    "compute_muscle_group_stats",
    "is_valid_date",
    "is_valid_muscle_groups",
]
