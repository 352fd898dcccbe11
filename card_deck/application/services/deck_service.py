"""
Deck service - the operation surface over persisted decks.

Each mutation is a load -> mutate -> save cycle inside one unit of work.
Saves are version-checked; when another request saved the same deck first,
the whole cycle is replayed on the fresh state, up to ``max_attempts`` times.
"""

import random
from typing import Callable, Optional, Tuple, TypeVar
from uuid import UUID

from card_deck.application.ports import StaleDeckError
from card_deck.application.unit_of_work import UnitOfWork
from card_deck.domain.entities.deck import Deck
from card_deck.domain.exceptions import (
    ConcurrentModificationError,
    DeckNotFoundError,
)
from card_deck.domain.value_objects.card import DeckSize
from card_deck.infra.config.logging_config import bind_context, get_logger

T = TypeVar("T")


class DeckService:
    """
    Application service for creating, reading, mutating and deleting decks.

    Args:
        uow: Unit of work giving access to the deck repository
        max_attempts: How many times a mutation is tried before giving up
            on a deck that keeps changing underneath it
        rng: Random source for shuffles; defaults to the system source
    """

    def __init__(
        self,
        uow: UnitOfWork,
        max_attempts: int = 3,
        rng: Optional[random.Random] = None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.uow = uow
        self.max_attempts = max_attempts
        self.rng = rng
        self._log = get_logger("service.deck")

    async def create(self, size: DeckSize = DeckSize.NORMAL) -> Deck:
        deck = Deck.new(size)
        async with self.uow:
            await self.uow.deck_repo.insert(deck)
            await self.uow.commit()

        bind_context(deck_id=str(deck.id))
        self._log.info("deck.create", size=size.card_count)
        return deck

    async def get(self, deck_id: UUID) -> Deck:
        async with self.uow:
            deck = await self.uow.deck_repo.find_by_id(deck_id)
        if deck is None:
            raise DeckNotFoundError(deck_id)
        return deck

    async def shuffle(self, deck_id: UUID, shuffle_discard: bool = False) -> Deck:
        deck, _ = await self._mutate(
            deck_id, lambda deck: deck.shuffle(shuffle_discard, rng=self.rng)
        )
        self._log.info(
            "deck.shuffle", pile="discard" if shuffle_discard else "draw"
        )
        return deck

    async def take(
        self, deck_id: UUID, lifo: bool = False, length: int = 1, move_as_block: bool = False
    ) -> Deck:
        """Move up to ``length`` cards from the draw pile to the discard pile."""
        deck, moved = await self._mutate(
            deck_id, lambda deck: deck.take(lifo, length, move_as_block)
        )
        self._log.info(
            "deck.take",
            lifo=lifo,
            requested=length,
            moved=moved,
            move_as_block=move_as_block,
        )
        return deck

    async def put(
        self, deck_id: UUID, lifo: bool = False, length: int = 1, move_as_block: bool = False
    ) -> Deck:
        """Move up to ``length`` cards from the discard pile to the draw pile."""
        deck, moved = await self._mutate(
            deck_id, lambda deck: deck.put(lifo, length, move_as_block)
        )
        self._log.info(
            "deck.put",
            lifo=lifo,
            requested=length,
            moved=moved,
            move_as_block=move_as_block,
        )
        return deck

    async def delete(self, deck_id: UUID) -> None:
        async with self.uow:
            deleted = await self.uow.deck_repo.delete(deck_id)
            if not deleted:
                raise DeckNotFoundError(deck_id)
            await self.uow.commit()
        self._log.info("deck.delete")

    async def _mutate(
        self, deck_id: UUID, operation: Callable[[Deck], T]
    ) -> Tuple[Deck, T]:
        bind_context(deck_id=str(deck_id))
        for attempt in range(1, self.max_attempts + 1):
            async with self.uow:
                deck = await self.uow.deck_repo.find_by_id(deck_id)
                if deck is None:
                    raise DeckNotFoundError(deck_id)

                result = operation(deck)
                try:
                    await self.uow.deck_repo.update(deck)
                except StaleDeckError:
                    self._log.warning(
                        "deck.update.stale",
                        attempt=attempt,
                        max_attempts=self.max_attempts,
                    )
                    continue
                await self.uow.commit()
                return deck, result

        raise ConcurrentModificationError(deck_id, self.max_attempts)
