"""Shared fixtures: an in-memory SQLite store and a FastAPI test client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import gymlog.db.base  # noqa: F401
from gymlog.db.session import get_db
from gymlog.main import app


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_test_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    # No context manager: the lifespan (file-backed init_db) stays off
    yield TestClient(app)
    app.dependency_overrides.clear()
