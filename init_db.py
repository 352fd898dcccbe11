#!/usr/bin/env python3
"""
Initialize database tables for development.
"""
import asyncio

from card_deck.infra.config.database import create_engine, init_models
from card_deck.infra.config.settings import get_settings


async def init_db():
    """Create all database tables."""
    settings = get_settings()
    engine = create_engine(settings)
    await init_models(engine)
    await engine.dispose()
    print(f"Database tables created at {settings.database_url}")


if __name__ == "__main__":
    asyncio.run(init_db())
