"""
CashCard Service — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh for each test):
    ├── db_engine:        in-memory SQLite engine with the cash_cards table
    ├── session_factory:  sessions bound to db_engine
    ├── seeded_db:        db_engine with the three sample cards inserted
    ├── db_session:       one session on the seeded database
    ├── memory_store:     InMemoryCashCardStore holding the sample cards
    ├── mock_store:       AsyncMock standing in for a CashCardStore
    └── test_client:      HTTPX AsyncClient against a fresh app on seeded_db

Sample data (ids and amounts every API test relies on):
    99  → 123.45
    100 → 1.00
    101 → 150.00
"""

import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock

# Override settings for testing BEFORE any cashcard imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["STORE_BACKEND"] = "sql"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from cashcard.database import create_tables, get_db_session
from cashcard.models.cash_card import CashCard
from cashcard.repositories import InMemoryCashCardStore

SAMPLE_CARDS = [
    (99, 123.45),
    (100, 1.00),
    (101, 150.00),
]


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Provides an in-memory SQLite engine with the schema created.

    StaticPool keeps one connection for the whole test, so every session
    sees the same in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def seeded_db(db_engine, session_factory):
    """Inserts the sample cards and returns the engine."""
    async with session_factory() as session:
        session.add_all([CashCard(id=card_id, amount=amount) for card_id, amount in SAMPLE_CARDS])
        await session.commit()
    return db_engine


@pytest_asyncio.fixture
async def db_session(seeded_db, session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# Store Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_cards():
    """Fresh, unattached CashCard instances for the sample data."""
    return [CashCard(id=card_id, amount=amount) for card_id, amount in SAMPLE_CARDS]


@pytest.fixture
def memory_store(sample_cards):
    return InMemoryCashCardStore(sample_cards)


@pytest.fixture
def mock_store():
    """
    Provides a mock Record Store.

    Usage:
        mock_store.lookup.return_value = CashCard(id=1, amount=5.0)
        mock_store.save.side_effect = SQLAlchemyError("connection lost")
    """
    store = AsyncMock()
    store.lookup = AsyncMock(return_value=None)
    store.save = AsyncMock()
    store.delete = AsyncMock(return_value=False)
    store.list_page = AsyncMock(return_value=[])
    store.count = AsyncMock(return_value=0)
    return store


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_app(seeded_db, session_factory):
    """
    Provides a fresh app whose request sessions use the seeded test database.

    The override keeps get_db_session's commit/rollback behavior.
    """
    from cashcard.main import create_app

    app = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_get(test_client):
            response = await test_client.get("/cashcards/99")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
