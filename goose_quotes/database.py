"""
Goose Quotes Backend: Database Session Management
==================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   One engine per process (built from `settings.database_url` at import),
       one session per request. The session dependency commits on success and
       rolls back on error.
Who:   Route handlers receive sessions via `Depends(get_db_session)`.

Connection Pooling:
    Server databases (PostgreSQL via asyncpg) get a bounded pool with
    pre-ping and hourly recycling. SQLite (tests, local hacking) uses the
    dialect's default pool, which does not accept sizing arguments.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from goose_quotes.config import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        # SQL echo only when debugging
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit, so response
# serialization never triggers a lazy load outside the session.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object, which `init_models()` uses to create tables.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits
        4. On error: rolls back and re-raises for the global handlers
        5. Always: closes the session (returns the connection to the pool)

    Example usage in a route:
        @router.get("/geese")
        async def list_geese(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_models() -> None:
    """
    Creates any missing tables from the ORM metadata.

    Idempotent: existing tables are left untouched, so this is safe on every
    startup. It does not alter existing columns.
    """
    # Register models on Base.metadata before create_all runs
    from goose_quotes.models import goose  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Closes all pooled connections. Called during application shutdown."""
    await engine.dispose()
