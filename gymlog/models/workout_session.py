"""
Workout session database model.

Stores one logged workout: a calendar date and the muscle groups
trained, the latter as a JSON list of the enum's string values.
"""

import datetime
import uuid

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


def _new_session_id() -> str:
    return str(uuid.uuid4())


class WorkoutSession(SQLModel, table=True):
    """A single workout session.

    ``id`` is assigned by the store on creation and never changes.
    """

    __tablename__ = "workout_sessions"

    id: str = Field(default_factory=_new_session_id, primary_key=True, max_length=36)
    date: datetime.date = Field(nullable=False, index=True)
    muscle_groups: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
