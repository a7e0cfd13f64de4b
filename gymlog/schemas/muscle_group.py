"""
Muscle group enumeration.

The six literal values are part of the wire format: they appear in
request and response payloads and in the stored JSON column, so they
must never be renamed.
"""

from enum import Enum


class MuscleGroup(str, Enum):
    """The fixed set of tracked training categories, in display order."""

    CHEST = "Chest"
    LEGS = "Legs"
    DELTS = "Delts"
    LATS = "Lats"
    TRICEPS = "Triceps"
    BICEPS = "Biceps"


MUSCLE_GROUPS: list[MuscleGroup] = list(MuscleGroup)
MUSCLE_GROUP_NAMES: list[str] = [group.value for group in MuscleGroup]
