"""Global test configuration and fixtures."""

import random
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from card_deck.domain.entities.deck import Deck
from card_deck.domain.value_objects.card import DeckSize
from card_deck.infra.assets.card_presenter import CardPresenter
from card_deck.infra.config.database import (
    create_engine,
    create_session_factory,
    init_models,
)
from card_deck.infra.config.settings import Settings

ASSET_URL = "https://assets.example.test"


# ---------- DOMAIN FIXTURES ----------


@pytest.fixture
def normal_deck() -> Deck:
    return Deck.new(DeckSize.NORMAL)


@pytest.fixture
def small_deck() -> Deck:
    return Deck.new(DeckSize.SMALL)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def presenter() -> CardPresenter:
    return CardPresenter(asset_url=ASSET_URL)


# ---------- DATABASE FIXTURES ----------


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway sqlite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'cards.db'}",
        asset_url=ASSET_URL,
        default_locale="en",
        log_format="console",
        deck_update_max_attempts=3,
    )


@pytest_asyncio.fixture
async def test_engine(test_settings):
    """Create test database engine."""
    engine = create_engine(test_settings)
    await init_models(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for testing."""
    session_factory = create_session_factory(test_engine)
    async with session_factory() as session:
        yield session


# ---------- API TESTING FIXTURES ----------


@pytest.fixture
def app(test_settings):
    """FastAPI application instance for testing."""
    from card_deck.main import create_app

    return create_app(test_settings)


@pytest.fixture
def client(app):
    """FastAPI test client; runs the lifespan so tables exist."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_prefix() -> str:
    return "/api/v1/cards"
