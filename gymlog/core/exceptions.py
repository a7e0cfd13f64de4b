"""
Domain errors raised by the session service and store.

The API layer maps each class to an HTTP status code in
:mod:`gymlog.main`; nothing below the API imports FastAPI for errors.
"""


class GymLogError(Exception):
    """Base class for all application errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SessionValidationError(GymLogError):
    """Missing or malformed date / muscle groups. The write is never attempted."""

    status_code = 400


class SessionNotFoundError(GymLogError):
    """Read, update or delete on an unknown session id."""

    status_code = 404

    def __init__(self, session_id: str, message: str = "Session not found"):
        super().__init__(message)
        self.session_id = session_id


class StorageError(GymLogError):
    """Underlying database failure."""

    status_code = 500
