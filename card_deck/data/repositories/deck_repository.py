"""
Deck repository for data access operations.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from card_deck.application.ports import DeckRepositoryPort, StaleDeckError
from card_deck.data.models.deck_model import DeckModel
from card_deck.domain.entities.deck import Deck
from card_deck.domain.exceptions import DeckIntegrityError
from card_deck.domain.value_objects.card import DeckSize
from card_deck.infra.config.logging_config import get_logger


class DeckRepository(DeckRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.deck")

    async def insert(self, deck: Deck) -> Deck:
        """Insert a new deck."""
        deck_model = DeckModel(
            id=deck.id,
            size=deck.size.card_count,
            draw=list(deck.draw),
            discard=list(deck.discard),
            version=deck.version,
            created_at=deck.created_at,
            updated_at=deck.updated_at,
        )

        self.session.add(deck_model)
        await self.session.flush()

        self._log.info("deck.insert", deck_id=str(deck.id), size=deck.size.card_count)
        return deck

    async def find_by_id(self, deck_id: UUID) -> Optional[Deck]:
        """Get deck by ID."""
        result = await self.session.execute(
            select(DeckModel)
            .where(DeckModel.id == deck_id)
            .execution_options(populate_existing=True)
        )
        deck_model = result.scalar_one_or_none()

        if not deck_model:
            self._log.info("deck.get.not_found", deck_id=str(deck_id))
            return None

        entity = self._to_entity(deck_model)
        entity.check_integrity()
        self._log.info("deck.get", deck_id=str(deck_id), version=entity.version)
        return entity

    async def update(self, deck: Deck) -> Deck:
        """Overwrite both piles if the stored version is still ``deck.version``."""
        updated_at = deck.updated_at or datetime.now(timezone.utc)
        result = await self.session.execute(
            update(DeckModel)
            .where(DeckModel.id == deck.id, DeckModel.version == deck.version)
            .values(
                draw=list(deck.draw),
                discard=list(deck.discard),
                version=DeckModel.version + 1,
                updated_at=updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            self._log.info(
                "deck.update.stale", deck_id=str(deck.id), version=deck.version
            )
            raise StaleDeckError(deck.id, deck.version)

        deck.version += 1
        deck.updated_at = updated_at
        self._log.info("deck.update", deck_id=str(deck.id), version=deck.version)
        return deck

    async def delete(self, deck_id: UUID) -> bool:
        """Delete a deck."""
        result = await self.session.execute(
            delete(DeckModel)
            .where(DeckModel.id == deck_id)
            .execution_options(synchronize_session=False)
        )
        deleted = result.rowcount > 0
        self._log.info("deck.delete", deck_id=str(deck_id), deleted=deleted)
        return deleted

    def _to_entity(self, model: DeckModel) -> Deck:
        """Convert SQLAlchemy model to domain entity."""
        try:
            size = DeckSize(model.size)
        except ValueError:
            raise DeckIntegrityError(model.id, f"unknown deck size {model.size}")

        return Deck(
            id=model.id,
            size=size,
            draw=list(model.draw or []),
            discard=list(model.discard or []),
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
