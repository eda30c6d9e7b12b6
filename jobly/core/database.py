"""
Database engine and session management.

Repositories receive an AsyncSession per request via ``get_db`` and run
plain SQL through it.
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from jobly.core.config import settings


class Base(DeclarativeBase):
    """Declarative base; table definitions live in jobly.models."""


def _engine_kwargs() -> dict:
    # SQLite (local runs and tests) uses a static/null pool that rejects sizing args
    if settings.is_sqlite:
        return {}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
    }


engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_kwargs(),
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a session that is closed after the request."""
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """Create tables that do not exist yet."""
    from jobly import models  # noqa: F401  (registers tables on Base.metadata)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Release pooled connections on shutdown."""
    await engine.dispose()
