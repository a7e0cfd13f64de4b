"""
Database initialization.

Creates all tables, and the data directory for file-backed SQLite.
"""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from gymlog.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(engine: Engine) -> None:
    url = engine.url
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    - Creates the SQLite data directory if needed
    - Creates all SQLModel tables
    """
    engine = engine or default_engine

    # Import all models so SQLModel.metadata has them
    import gymlog.db.base  # noqa: F401

    _ensure_sqlite_directory(engine)

    logger.info("Creating database tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
