"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - The completion client is always a FakeCompletionProvider (never the real SDK)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import card_assistant.infrastructure.database as db_module
import card_assistant.models  # noqa: F401
from card_assistant.db.base import Base
from card_assistant.infrastructure.anthropic_client import get_completion_client
from card_assistant.infrastructure.database import get_db, DatabaseSessionManager
from card_assistant.main import app
from card_assistant.models.card import CreditCard

from tests.services.fakes import FakeCompletionProvider


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
def fake_provider():
    return FakeCompletionProvider()


@pytest.fixture
async def client(test_engine, test_session_factory, fake_provider):
    """FastAPI test client with DB and completion dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_completion_client] = lambda: fake_provider

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
async def seed_cards(test_db):
    """Insert cards out of issuer order."""
    cards = [
        CreditCard(
            issuer="Standard Chartered", card_name="Smart Card",
            spend_category="Online Shopping", reward_value="5%", region="Local",
        ),
        CreditCard(
            issuer="DBS", card_name="Eminent Card",
            spend_category="Dining", reward_value=0.05, region="Local",
        ),
        CreditCard(
            issuer="HSBC", card_name="Red Card",
            spend_category="Fine Dining & Cafes", reward_value=4, region="Overseas",
        ),
        CreditCard(
            issuer="Citibank", card_name="Cash Back Card",
            spend_category="Overseas Spending", reward_value="2%", region="Overseas",
        ),
    ]
    test_db.add_all(cards)
    await test_db.commit()
    return cards
