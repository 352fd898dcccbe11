"""
FastAPI dependency injection configuration.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from card_deck.application.services.deck_service import DeckService
from card_deck.application.unit_of_work import UnitOfWork
from card_deck.data.repositories.deck_repository import DeckRepository
from card_deck.infra.assets.card_presenter import CardPresenter
from card_deck.infra.config.database import get_db_session
from card_deck.infra.config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


async def get_deck_repository(
    session: AsyncSession = Depends(get_db_session),
) -> DeckRepository:
    return DeckRepository(session)


async def get_unit_of_work(
    session: AsyncSession = Depends(get_db_session),
    deck_repo: DeckRepository = Depends(get_deck_repository),
) -> UnitOfWork:
    """
    Create a Unit of Work instance with repositories.

    Both dependencies resolve to the same request-scoped session.
    """
    return UnitOfWork(session=session, deck_repo=deck_repo)


async def get_deck_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings: Settings = Depends(get_app_settings),
) -> DeckService:
    return DeckService(uow=uow, max_attempts=settings.deck_update_max_attempts)


def get_card_presenter(request: Request) -> CardPresenter:
    """Dependency for the card presenter built at startup."""
    return request.app.state.card_presenter


# Type aliases for cleaner dependency injection
DeckServiceDep = Annotated[DeckService, Depends(get_deck_service)]
CardPresenterDep = Annotated[CardPresenter, Depends(get_card_presenter)]
