"""
Deck domain entity with core business rules.

A deck owns two piles, ``draw`` and ``discard``. The end of each list is the
top of the pile. Cards only ever move between the two piles, so together
they always hold exactly the canonical card set of the deck's size.
"""

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from card_deck.domain.exceptions import DeckIntegrityError
from card_deck.domain.value_objects.card import Card, DeckSize, canonical_cards

_system_random = random.SystemRandom()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Deck:
    id: UUID
    size: DeckSize
    draw: List[Card]
    discard: List[Card] = field(default_factory=list)
    version: int = 1
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: Optional[datetime] = None

    @classmethod
    def new(cls, size: DeckSize = DeckSize.NORMAL) -> "Deck":
        """
        Create a fresh deck with every card of its size in the draw pile.

        Args:
            size: SMALL for a 32 card deck, NORMAL for a 52 card deck

        Returns:
            Deck: draw pile in ascending card order, empty discard pile
        """
        return cls(id=uuid4(), size=size, draw=canonical_cards(size))

    def shuffle(
        self, shuffle_discard: bool = False, rng: Optional[random.Random] = None
    ) -> None:
        """Randomly permute the discard pile if asked to, the draw pile otherwise."""
        pile = self.discard if shuffle_discard else self.draw
        (rng or _system_random).shuffle(pile)
        self._touch()

    def take(self, lifo: bool, length: int, move_as_block: bool) -> int:
        """
        Move cards from the top of the draw pile to the discard pile.

        Args:
            lifo: If true, the cards go on top of the discard pile,
                otherwise underneath it
            length: Number of cards to move, clamped to the draw pile size
            move_as_block: If true, the cards keep their order; otherwise
                they are placed one by one, which reverses them for lifo

        Returns:
            int: Number of cards actually moved
        """
        moved = self._move(self.draw, self.discard, lifo, length, move_as_block)
        if moved:
            self._touch()
        return moved

    def put(self, lifo: bool, length: int, move_as_block: bool) -> int:
        """Move cards from the top of the discard pile to the draw pile.

        Same rules as ``take`` with the two piles swapped.
        """
        moved = self._move(self.discard, self.draw, lifo, length, move_as_block)
        if moved:
            self._touch()
        return moved

    def card_count(self) -> int:
        return len(self.draw) + len(self.discard)

    def check_integrity(self) -> None:
        """
        Business rule: both piles together hold the canonical set exactly once.

        Raises:
            DeckIntegrityError: If a card is duplicated, missing or foreign
        """
        cards = self.draw + self.discard
        unique = set(cards)
        if len(unique) != len(cards):
            raise DeckIntegrityError(self.id, "duplicated cards")
        if self.card_count() != self.size.card_count:
            raise DeckIntegrityError(
                self.id,
                f"{self.card_count()} cards for a deck of {self.size.card_count}",
            )
        if unique != set(canonical_cards(self.size)):
            raise DeckIntegrityError(self.id, "cards outside of the deck size")

    @staticmethod
    def _move(
        source: List[Card],
        destination: List[Card],
        lifo: bool,
        length: int,
        move_as_block: bool,
    ) -> int:
        if length < 0:
            raise ValueError(f"Cannot move a negative number of cards: {length}")
        if not source or length == 0:
            return 0

        cut = 0 if length >= len(source) else len(source) - length
        cards = source[cut:]
        del source[cut:]

        if lifo:
            if not move_as_block:
                cards.reverse()
            destination.extend(cards)
        else:
            # fifo keeps the run's order whatever move_as_block says
            destination[:0] = cards
        return len(cards)

    def _touch(self) -> None:
        self.updated_at = _utcnow()
