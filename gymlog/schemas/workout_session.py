"""
Workout session API schemas.

Request bodies are deliberately loose (``Any``): the session service runs
the validator itself so that bad input is reported with the same
messages and status code whether it arrives over HTTP or from a script.
"""

import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gymlog.schemas.muscle_group import MuscleGroup


class WorkoutSessionWrite(BaseModel):
    """Body of a create or update request.

    A JSON body that is not an object (``[]``, ``"x"``) carries no fields
    and is read as an empty body.
    """

    date: Optional[Any] = Field(None, description="Calendar date, YYYY-MM-DD", examples=["2024-01-05"])
    muscle_groups: Optional[Any] = Field(None, description="Non-empty list of muscle group names",
                                         examples=[["Chest", "Triceps"]], )

    @model_validator(mode="before")
    @classmethod
    def _non_object_is_empty(cls, data: Any) -> Any:
        if isinstance(data, (dict, cls)):
            return data
        return {}


class WorkoutSessionResponse(BaseModel):
    """Schema for a workout session in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    date: datetime.date
    muscle_groups: list[MuscleGroup]
