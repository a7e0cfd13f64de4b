"""
Alembic environment for the workout session store.

The database URL always comes from :mod:`gymlog.core.config`, never from
``alembic.ini``.  A caller that already holds a connection (tests,
``init_db``-style scripts) can hand it over through
``config.attributes["connection"]`` and the migrations run on it.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Connection
from sqlmodel import SQLModel

from gymlog.core.config import settings
# Register every table on SQLModel.metadata for autogenerate
import gymlog.db.base  # noqa: F401

config = context.config

# Skip logging setup when embedded: the host already configured it
if config.config_file_name is not None and "connection" not in config.attributes:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _configure(**kwargs) -> None:
    # SQLite cannot ALTER most things in place, so it needs batch mode
    url = str(kwargs.get("url") or kwargs["connection"].engine.url)
    context.configure(target_metadata=target_metadata, render_as_batch=_is_sqlite(url),
                      compare_type=True, **kwargs)


def _run_on(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    """Emit SQL for ``settings.DATABASE_URL`` to the script output."""
    _configure(url=settings.DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Migrate a shared connection if one was passed in, else a fresh engine."""
    shared = config.attributes.get("connection")
    if shared is not None:
        _run_on(shared)
        return

    engine = create_engine(settings.DATABASE_URL, poolclass=pool.NullPool)
    with engine.connect() as connection:
        _run_on(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
