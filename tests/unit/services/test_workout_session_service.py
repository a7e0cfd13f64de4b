"""Tests for the session service and repository against in-memory SQLite."""

import datetime

import pytest
from sqlalchemy.exc import OperationalError

from gymlog.core.exceptions import SessionNotFoundError, SessionValidationError, StorageError
from gymlog.db.repositories.workout_session import WorkoutSessionRepository
from gymlog.schemas.muscle_group import MuscleGroup
from gymlog.services.workout_session_service import (
    DATE_INVALID,
    DATE_REQUIRED,
    MUSCLE_GROUPS_INVALID,
    MUSCLE_GROUPS_REQUIRED,
    WorkoutSessionService,
)


@pytest.fixture
def service(db):
    return WorkoutSessionService(db)


# ======================================================================
# Create / read
# ======================================================================


class TestCreateAndRead:
    def test_create_assigns_id(self, service):
        created = service.create_session("2024-01-05", ["Chest", "Triceps"])
        assert created.id
        assert created.date == datetime.date(2024, 1, 5)
        assert created.muscle_groups == [MuscleGroup.CHEST, MuscleGroup.TRICEPS]

    def test_ids_unique(self, service):
        a = service.create_session("2024-01-05", ["Chest"])
        b = service.create_session("2024-01-05", ["Chest"])
        assert a.id != b.id

    def test_duplicate_groups_collapsed(self, service):
        created = service.create_session("2024-01-05", ["Legs", "Legs", "Delts"])
        assert created.muscle_groups == [MuscleGroup.LEGS, MuscleGroup.DELTS]

    def test_get_all_newest_first(self, service):
        service.create_session("2024-01-01", ["Chest"])
        service.create_session("2024-03-01", ["Legs"])
        service.create_session("2024-02-01", ["Lats"])
        dates = [s.date.isoformat() for s in service.get_all_sessions()]
        assert dates == ["2024-03-01", "2024-02-01", "2024-01-01"]

    def test_get_session(self, service):
        created = service.create_session("2024-01-05", ["Biceps"])
        assert service.get_session(created.id) == created

    def test_get_unknown_session(self, service):
        with pytest.raises(SessionNotFoundError) as exc_info:
            service.get_session("missing")
        assert exc_info.value.session_id == "missing"


# ======================================================================
# Validation gate
# ======================================================================


class TestValidation:
    @pytest.mark.parametrize(
        "date, groups, message",
        [
            (None, ["Chest"], DATE_REQUIRED),
            ("", ["Chest"], DATE_REQUIRED),
            ("05/01/2024", ["Chest"], DATE_INVALID),
            ("2024-02-30", ["Chest"], DATE_INVALID),
            ("2024-01-05", None, MUSCLE_GROUPS_REQUIRED),
            ("2024-01-05", "", MUSCLE_GROUPS_REQUIRED),
            ("2024-01-05", 0, MUSCLE_GROUPS_REQUIRED),
            (0, ["Chest"], DATE_REQUIRED),
            ([], ["Chest"], DATE_INVALID),
            ("2024-01-05", [], MUSCLE_GROUPS_INVALID),
            ("2024-01-05", ["Abs"], MUSCLE_GROUPS_INVALID),
            ("2024-01-05", "Chest", MUSCLE_GROUPS_INVALID),
        ],
    )
    def test_create_rejected_without_write(self, service, date, groups, message):
        with pytest.raises(SessionValidationError) as exc_info:
            service.create_session(date, groups)
        assert exc_info.value.message == message
        assert service.get_all_sessions() == []

    def test_invalid_update_leaves_session_untouched(self, service):
        created = service.create_session("2024-01-05", ["Chest"])
        with pytest.raises(SessionValidationError):
            service.update_session(created.id, "2024-01-06", ["Back"])
        assert service.get_session(created.id) == created

    def test_invalid_update_of_unknown_id_reports_validation_first(self, service):
        with pytest.raises(SessionValidationError):
            service.update_session("missing", "bad", ["Chest"])


# ======================================================================
# Update / delete
# ======================================================================


class TestMutation:
    def test_update(self, service):
        created = service.create_session("2024-01-05", ["Chest"])
        updated = service.update_session(created.id, "2024-01-07", ["Legs", "Lats"])
        assert updated.id == created.id
        assert updated.date == datetime.date(2024, 1, 7)
        assert updated.muscle_groups == [MuscleGroup.LEGS, MuscleGroup.LATS]
        assert service.get_session(created.id) == updated

    def test_update_unknown(self, service):
        with pytest.raises(SessionNotFoundError):
            service.update_session("missing", "2024-01-07", ["Legs"])

    def test_delete(self, service):
        created = service.create_session("2024-01-05", ["Chest"])
        service.delete_session(created.id)
        assert service.get_all_sessions() == []

    def test_delete_twice(self, service):
        created = service.create_session("2024-01-05", ["Chest"])
        service.delete_session(created.id)
        with pytest.raises(SessionNotFoundError):
            service.delete_session(created.id)


# ======================================================================
# Storage failures
# ======================================================================


class TestStorageErrors:
    def test_commit_failure_becomes_storage_error(self, db, monkeypatch):
        def _fail():
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(db, "commit", _fail)
        service = WorkoutSessionService(db)
        with pytest.raises(StorageError):
            service.create_session("2024-01-05", ["Chest"])

    def test_storage_error_is_not_not_found(self, db, monkeypatch):
        def _fail(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(db, "get", _fail)
        repo = WorkoutSessionRepository(db)
        with pytest.raises(StorageError):
            repo.delete("any-id")
