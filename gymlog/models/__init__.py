"""SQLModel database models."""

from gymlog.models.workout_session import WorkoutSession

__all__ = [
    "WorkoutSession",
]
