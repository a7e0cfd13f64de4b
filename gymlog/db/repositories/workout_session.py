"""
Workout session repository.

Handles database operations for :class:`WorkoutSession`.  Every
SQLAlchemy failure is rolled back, logged and re-raised as
:class:`StorageError` so callers can tell it apart from not-found.
"""

import contextlib
import logging
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from gymlog.core.exceptions import StorageError
from gymlog.models.workout_session import WorkoutSession

logger = logging.getLogger(__name__)


class WorkoutSessionRepository:
    """Repository for WorkoutSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    @contextlib.contextmanager
    def _storage_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Storage failure while trying to %s", action)
            raise StorageError(f"Failed to {action}") from e

    def create(self, entry: WorkoutSession) -> WorkoutSession:
        with self._storage_errors("create session"):
            self.session.add(entry)
            self.session.commit()
            self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: str) -> Optional[WorkoutSession]:
        with self._storage_errors("fetch session"):
            return self.session.get(WorkoutSession, entry_id)

    def get_all(self) -> list[WorkoutSession]:
        """All sessions, newest date first."""
        statement = select(WorkoutSession).order_by(WorkoutSession.date.desc())
        with self._storage_errors("fetch sessions"):
            return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: WorkoutSession) -> WorkoutSession:
        with self._storage_errors("update session"):
            self.session.add(entry)
            self.session.commit()
            self.session.refresh(entry)
        return entry

    def delete(self, entry_id: str) -> bool:
        entry = self.get_by_id(entry_id)
        if not entry:
            return False
        with self._storage_errors("delete session"):
            self.session.delete(entry)
            self.session.commit()
        return True
