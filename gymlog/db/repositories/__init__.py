"""Database repositories."""

from gymlog.db.repositories.workout_session import WorkoutSessionRepository

__all__ = [
    "WorkoutSessionRepository",
]
