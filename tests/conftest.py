"""
Pytest configuration and shared fixtures for pipeline tests.

This module provides test fixtures for:
- Database sessions (in-memory SQLite for fast tests)
- Settings without .env influence
- Pages, output sinks and page property stores
- A ready-to-use WikiSEO pipeline
"""

import os
from datetime import datetime
from typing import Generator

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from wikiseo.config import Settings
from wikiseo.domain.entities.page import Page, PageFile
from wikiseo.infrastructure.output.output_page import OutputPage
from wikiseo.infrastructure.persistence.db import Base
from wikiseo.infrastructure.persistence import models  # noqa: F401
from wikiseo.infrastructure.persistence.repositories.in_memory_page_props_repository import (
    InMemoryPagePropsRepository,
)
from wikiseo.infrastructure.persistence.repositories.sqlalchemy_page_props_repository import (
    SQLAlchemyPagePropsRepository,
)
from wikiseo.services.wiki_seo import WikiSEO


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def sql_store(test_db_session):
    """Page props store backed by the test database."""
    return SQLAlchemyPagePropsRepository(test_db_session)


# ==============================================================================
# PIPELINE FIXTURES
# ==============================================================================

@pytest.fixture
def settings():
    """Settings with only the built-in generators and no verification keys."""
    return Settings(
        _env_file=None,
        METADATA_GENERATORS=["OpenGraph"],
        DEFAULT_IMAGE="//wiki.example.org/resources/assets/wiki.png",
    )


@pytest.fixture
def page():
    """Sample existing page with two revisions and one attached file."""
    return Page(
        id=42,
        title="Bar",
        full_url="//wiki.example.org/wiki/Bar",
        protocol="https",
        first_revision_at=datetime(2020, 1, 1, 0, 0, 0),
        latest_revision_at=datetime(2024, 5, 6, 7, 8, 9),
        files={
            "Bar.jpg": PageFile(name="Bar.jpg", url="//wiki.example.org/images/Bar.jpg", width=1200, height=630),
        },
    )


@pytest.fixture
def out():
    """Empty output sink."""
    return OutputPage()


@pytest.fixture
def store():
    return InMemoryPagePropsRepository()


@pytest.fixture
def cache():
    return InMemoryPagePropsRepository()


@pytest.fixture
def seo(settings, store, cache):
    """Pipeline with in-memory page property store and cache."""
    return WikiSEO(settings=settings, store=store, cache=cache)


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
