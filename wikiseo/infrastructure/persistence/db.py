"""Database setup helpers (SQLAlchemy engine/session)."""
from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from wikiseo.config import get_settings

Base = declarative_base()


@lru_cache()
def get_engine(database_url: Optional[str] = None) -> Engine:
    """Create the engine on first use; the URL defaults to the settings."""
    url = database_url or get_settings().get_database_url()
    return create_engine(url, future=True, pool_pre_ping=True)


def get_session_factory(engine: Optional[Engine] = None) -> sessionmaker:
    """Session factory bound to the given engine or the default one."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine or get_engine(), future=True)


def init_db(engine: Optional[Engine] = None) -> None:
    """Create the page_props table if it does not exist."""
    # Import models so they register on Base.metadata
    from wikiseo.infrastructure.persistence import models  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())
