"""In-memory SQLite session for the service tests."""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from fitcoach.db.base import metadata


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    with Session(engine) as s:
        yield s
    metadata.drop_all(engine)
