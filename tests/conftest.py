"""
Goose Quotes Backend: Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the test suite.
How:   Environment variables are set before any `goose_quotes` import so the
       settings singleton and the engine point at a throwaway SQLite file.

Fixture Hierarchy:
    Function-scoped:
    ├── mock_db_session: AsyncMock session (service unit tests)
    ├── make_goose: builds unsaved Goose rows
    ├── fake_llm: AsyncMock standing in for the LLM provider
    └── app_client: HTTPX AsyncClient against the app, with fresh tables
                    and the LLM dependency overridden by fake_llm
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

_db_dir = tempfile.mkdtemp(prefix="goose_quotes_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_db_dir}/test.db"
os.environ["LLM_PROVIDER"] = "openai"
os.environ["OPENAI_API_KEY"] = "test-key-not-real"
os.environ["GEMINI_API_KEY"] = "test-key-not-real"
os.environ["RETRY_MAX_ATTEMPTS"] = "2"
os.environ["RETRY_MIN_WAIT"] = "0"
os.environ["RETRY_MAX_WAIT"] = "1"
os.environ["LOG_LEVEL"] = "WARNING"

from goose_quotes.database import Base, engine  # noqa: E402
from goose_quotes.models.goose import Goose  # noqa: E402
from goose_quotes.services.llm_base import LLMService  # noqa: E402
from goose_quotes.services.providers import get_llm_service  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession.

    Usage:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = goose
        mock_db_session.execute.return_value = mock_result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def make_goose():
    """Factory for Goose instances that were never added to a session."""

    def _make(**overrides) -> Goose:
        now = datetime.now(timezone.utc)
        fields = {
            "id": 1,
            "name": "Nietzsche",
            "description": "A person named Nietzsche who talks like a Goose",
            "is_flock_leader": False,
            "programming_language": None,
            "motivations": None,
            "location": None,
            "bio": None,
            "created_at": now,
            "updated_at": now,
        }
        fields.update(overrides)
        return Goose(**fields)

    return _make


@pytest.fixture
def fake_llm():
    """An LLMService double; tests set complete/generate_image return values."""
    llm = AsyncMock(spec=LLMService)
    llm.provider_name = "fake"
    llm.complete.return_value = "Honk is dead. Honk remains dead. And we have honked him."
    llm.generate_image.return_value = "https://images.example.com/goose.png"
    llm.health_check.return_value = True
    return llm


@pytest_asyncio.fixture
async def app_client(fake_llm):
    """
    HTTPX AsyncClient talking to the app over ASGITransport.

    Tables are created before and dropped after each test. ASGITransport
    does not run the lifespan, so table creation happens here.
    """
    from goose_quotes.main import app

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    app.dependency_overrides[get_llm_service] = lambda: fake_llm
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()
