"""Fixtures shared by the persistence tests."""

from typing import Generator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from src.db.database import create_db_engine


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """A fresh in-memory SQLite database per test, tables included."""
    engine = create_db_engine("sqlite://")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
