"""
Dashboard presentation.

Turns engine output into display-ready cards and the balance indicator.
"""

from typing import Mapping, Optional

from gymlog.schemas.muscle_group import MUSCLE_GROUPS, MuscleGroup
from gymlog.schemas.stats import (BalanceDisplay, BalanceJudgment, BalanceLevel, MuscleGroupCard, MuscleGroupStats, )

_BALANCE_DISPLAY: dict[BalanceLevel, tuple[str, str, str]] = {
    BalanceLevel.EXCELLENT: ("Excellent Balance", "happy", "\U0001F604"),
    BalanceLevel.NEUTRAL: ("Neutral Balance", "neutral", "\U0001F610"),
    BalanceLevel.POOR: ("Poor Balance", "angry", "\U0001F620"),
}


def describe_last_trained(days_since: Optional[int]) -> str:
    if days_since is None:
        return "Never trained"
    if days_since == 0:
        return "Trained today"
    if days_since == 1:
        return "1 day ago"
    return f"{days_since} days ago"


def build_muscle_group_cards(stats: Mapping[MuscleGroup, MuscleGroupStats]) -> list[MuscleGroupCard]:
    """One card per muscle group, in display order."""
    return [
        MuscleGroupCard(muscle_group=group, status=stats[group].status,
                        last_trained=describe_last_trained(stats[group].days_since_last_trained),
                        last_7_days=f"{stats[group].sessions_last_7_days}x",
                        last_30_days=f"{stats[group].sessions_last_30_days}x", )
        for group in MUSCLE_GROUPS if group in stats
    ]


def describe_balance(judgment: BalanceJudgment) -> BalanceDisplay:
    label, mood, emoji = _BALANCE_DISPLAY[judgment.level]
    return BalanceDisplay(level=judgment.level, label=label, mood=mood, emoji=emoji)
