"""Generate database session"""

import logging
import os
from functools import lru_cache
from typing import Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///tictactoe.db"


def database_url() -> str:
    return os.getenv("TICTACTOE_DATABASE_URL", DEFAULT_DATABASE_URL)


def create_db_engine(url: Optional[str] = None) -> Engine:
    """Build the engine from the given URL (or from the environment) and make sure all tables exist."""
    url = url or database_url()
    echo = os.getenv("TICTACTOE_DATABASE_ECHO", "0") == "1"
    engine = create_engine(url, echo=echo)
    Base.metadata.create_all(bind=engine)
    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    return engine


@lru_cache
def get_engine(url: str) -> Engine:
    """One engine (and connection pool) per database URL for the whole process."""
    return create_db_engine(url)


def get_db(engine: Optional[Engine] = None) -> Generator[Session, None, None]:
    SessionLocal = sessionmaker(bind=engine or get_engine(database_url()))
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
