"""Service test fixtures — async DB, FastAPI test client and fake author stores.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - FakeAuthorStore records every find_all call so tests can assert the sort
"""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from catalog.db.base import Base
from catalog.infrastructure.database import get_db, DatabaseSessionManager
from catalog.models.author import Author
import catalog.infrastructure.database as db_module
from catalog.main import app


class FakeAuthorStore:
    """In-memory AuthorStore returning canned records or raising on await."""

    def __init__(self, records=None, error: Exception | None = None):
        self.records = list(records or [])
        self.error = error
        self.calls: list = []

    async def find_all(self, sort=None):
        self.calls.append(sort)
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def fake_store():
    """Factory for FakeAuthorStore instances."""
    return FakeAuthorStore


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_authors(test_db):
    """Insert three authors, deliberately out of family-name order."""
    authors = [
        Author(
            first_name="Rabindranath", family_name="Tagore",
            date_of_birth=date(1812, 2, 7), date_of_death=date(1870, 6, 9),
        ),
        Author(
            first_name="Jane", family_name="Austen",
            date_of_birth=date(1775, 12, 16), date_of_death=date(1817, 7, 18),
        ),
        Author(
            first_name="Amitav", family_name="Ghosh",
            date_of_birth=date(1835, 11, 30), date_of_death=date(1910, 4, 21),
        ),
    ]
    test_db.add_all(authors)
    await test_db.commit()
    return authors
