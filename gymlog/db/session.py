"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlmodel import Session, create_engine

from gymlog.core.config import settings

DATABASE_URL: str = settings.DATABASE_URL

# SQLite connections are used from FastAPI's threadpool
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    DATABASE_URL,
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    pool_pre_ping=True,   # Verify connections before using
    connect_args=_connect_args,
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance

    Example:
        @router.get("/sessions")
        def list_sessions(db: Session = Depends(get_db)):
            return WorkoutSessionService(db).get_all_sessions()
    """
    with Session(engine) as session:
        yield session
