"""
Database configuration and session management.

The engine and session factory are built once at startup from the
application settings and kept on ``app.state``.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from card_deck.data.models import Base
from card_deck.infra.config.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by the settings."""
    options = {"echo": settings.debug_sql, "pool_pre_ping": True}
    if not settings.database_url.startswith("sqlite"):
        options["pool_recycle"] = 300
    return create_async_engine(settings.database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_models(engine: AsyncEngine) -> None:
    """Create all database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database session.

    Yields an async database session and ensures proper cleanup.
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
