"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from gymlog.models.workout_session import WorkoutSession  # noqa: F401
