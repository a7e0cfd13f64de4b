"""
Workout session service.

Validates every write through :mod:`gymlog.tracker.validation` before
the store is touched, and turns store results into response schemas.
"""

import logging
from typing import Any

from sqlmodel import Session

from gymlog.core.exceptions import SessionNotFoundError, SessionValidationError
from gymlog.db.repositories.workout_session import WorkoutSessionRepository
from gymlog.models.workout_session import WorkoutSession
from gymlog.schemas.muscle_group import MUSCLE_GROUP_NAMES, MuscleGroup
from gymlog.schemas.workout_session import WorkoutSessionResponse
from gymlog.tracker.validation import is_valid_date, is_valid_muscle_groups, parse_date, parse_muscle_groups

logger = logging.getLogger(__name__)

DATE_REQUIRED = "Date is required"
DATE_INVALID = "Invalid date format. Use YYYY-MM-DD"
MUSCLE_GROUPS_REQUIRED = "Muscle groups are required"
MUSCLE_GROUPS_INVALID = ("Invalid muscle groups. Must be a non-empty array containing: "
                         + ", ".join(MUSCLE_GROUP_NAMES))


def _is_missing(value: Any) -> bool:
    """``None`` or any empty scalar (``""``, ``0``, ``False``).

    Containers, even empty ones, count as present and are left to the
    validator, which rejects them with the "invalid" message.
    """
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return False
    return not value


def validate_session_input(date: Any, muscle_groups: Any) -> None:
    """Raise :class:`SessionValidationError` for the first problem found."""
    if _is_missing(date):
        raise SessionValidationError(DATE_REQUIRED)
    if not is_valid_date(date):
        raise SessionValidationError(DATE_INVALID)
    if _is_missing(muscle_groups):
        raise SessionValidationError(MUSCLE_GROUPS_REQUIRED)
    if not is_valid_muscle_groups(muscle_groups):
        raise SessionValidationError(MUSCLE_GROUPS_INVALID)


class WorkoutSessionService:
    """Service for workout session business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutSessionRepository(session)

    def create_session(self, date: Any, muscle_groups: Any) -> WorkoutSessionResponse:
        validate_session_input(date, muscle_groups)

        entry = WorkoutSession(date=parse_date(date), muscle_groups=self._stored_groups(muscle_groups))
        entry = self.repository.create(entry)
        logger.info("Created session %s on %s (%s)", entry.id, entry.date, ", ".join(entry.muscle_groups))
        return self._to_response(entry)

    def get_all_sessions(self) -> list[WorkoutSessionResponse]:
        return [self._to_response(e) for e in self.repository.get_all()]

    def get_session(self, session_id: str) -> WorkoutSessionResponse:
        return self._to_response(self._get_entry(session_id))

    def update_session(self, session_id: str, date: Any, muscle_groups: Any) -> WorkoutSessionResponse:
        validate_session_input(date, muscle_groups)

        entry = self._get_entry(session_id)
        entry.date = parse_date(date)
        entry.muscle_groups = self._stored_groups(muscle_groups)
        entry = self.repository.update(entry)
        logger.info("Updated session %s", entry.id)
        return self._to_response(entry)

    def delete_session(self, session_id: str) -> None:
        if not self.repository.delete(session_id):
            logger.info("Delete of unknown session %s", session_id)
            raise SessionNotFoundError(session_id)
        logger.info("Deleted session %s", session_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry(self, session_id: str) -> WorkoutSession:
        entry = self.repository.get_by_id(session_id)
        if not entry:
            logger.info("Session %s not found", session_id)
            raise SessionNotFoundError(session_id)
        return entry

    @staticmethod
    def _stored_groups(muscle_groups: Any) -> list[str]:
        return [group.value for group in parse_muscle_groups(muscle_groups)]

    @staticmethod
    def _to_response(entry: WorkoutSession) -> WorkoutSessionResponse:
        return WorkoutSessionResponse(id=entry.id, date=entry.date,
                                      muscle_groups=[MuscleGroup(name) for name in entry.muscle_groups], )
