"""
Application ports - abstract interfaces for external dependencies.

These interfaces define the contracts that the application layer needs
from external systems, following the Dependency Inversion Principle.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from card_deck.domain.entities.deck import Deck
from card_deck.domain.value_objects.card import Card


class StaleDeckError(Exception):
    """Raised by ``update`` when the stored version no longer matches."""

    def __init__(self, deck_id: UUID, expected_version: int):
        self.deck_id = deck_id
        self.expected_version = expected_version
        super().__init__(
            f"Deck {deck_id} is no longer at version {expected_version}"
        )


class DeckRepositoryPort(ABC):
    """Abstract repository interface for Deck operations."""

    @abstractmethod
    async def insert(self, deck: Deck) -> Deck:
        """Insert a new deck."""
        pass

    @abstractmethod
    async def find_by_id(self, deck_id: UUID) -> Optional[Deck]:
        """Get deck by ID, or None when absent."""
        pass

    @abstractmethod
    async def update(self, deck: Deck) -> Deck:
        """
        Overwrite both piles of a deck.

        The write only applies if the stored version still equals
        ``deck.version``; the deck's version is then incremented.

        Raises:
            StaleDeckError: If the stored deck changed or disappeared
        """
        pass

    @abstractmethod
    async def delete(self, deck_id: UUID) -> bool:
        """Delete a deck."""
        pass


@dataclass(frozen=True)
class CardRepresentation:
    """Human-readable view of a single card."""

    name: str
    value: Card
    image: str


class CardPresenterPort(ABC):
    """Abstract interface mapping card ids to their display form."""

    @abstractmethod
    def present(self, card: Card, locale: Optional[str] = None) -> CardRepresentation:
        """Describe a card; deterministic for a given card and locale."""
        pass
