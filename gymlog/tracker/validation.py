"""
Session validator.

Pure predicates gating every write to the session store.  They never
raise: malformed input of any type simply yields ``False``.
"""

from __future__ import annotations

import datetime
import re
from typing import Any

from gymlog.schemas.muscle_group import MUSCLE_GROUP_NAMES, MuscleGroup

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_COLLECTION_TYPES = (list, tuple, set, frozenset)


def is_valid_date(value: Any) -> bool:
    """Return ``True`` iff *value* is a ``YYYY-MM-DD`` string naming a real day.

    ``2024-02-30`` matches the pattern but is rejected by the calendar.
    """
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_muscle_groups(value: Any) -> bool:
    """Return ``True`` iff *value* is a non-empty collection of known names.

    A bare string is not a collection here, even though it is iterable.
    """
    if not isinstance(value, _COLLECTION_TYPES) or len(value) == 0:
        return False
    return all(isinstance(group, str) and group in MUSCLE_GROUP_NAMES for group in value)


def parse_date(value: str) -> datetime.date:
    """Convert a string accepted by :func:`is_valid_date`."""
    return datetime.date.fromisoformat(value)


def parse_muscle_groups(value: Any) -> list[MuscleGroup]:
    """Convert a collection accepted by :func:`is_valid_muscle_groups`.

    Duplicates are collapsed, keeping the first occurrence.  Unordered
    inputs (sets) come back in display order.
    """
    if isinstance(value, (set, frozenset)):
        return [group for group in MuscleGroup if group in value or group.value in value]

    groups: list[MuscleGroup] = []
    for name in value:
        group = MuscleGroup(name)
        if group not in groups:
            groups.append(group)
    return groups
