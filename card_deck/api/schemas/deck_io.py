"""
Deck input/output schemas for API requests and responses.
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from card_deck.application.ports import CardPresenterPort
from card_deck.domain.entities.deck import Deck


# ---------- DECK REQUEST SCHEMAS ----------
class MoveCardsParams(BaseModel):
    """Query parameters shared by the take and put endpoints."""

    lifo: bool = Field(
        False,
        description="Place the cards on top of the destination pile instead of underneath",
    )
    length: int = Field(1, ge=0, description="Number of cards to move")
    move_as_block: bool = Field(
        False, description="Move the cards as one block, keeping their order"
    )


# ---------- DECK RESPONSE SCHEMAS ----------
class CardResponse(BaseModel):
    """A card as shown to clients."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    value: int = Field(..., ge=0, lt=52)
    image: str


class DeckResponse(BaseModel):
    """
    Both piles of a deck, in pile order (last item = top of the pile).
    """

    id: UUID
    size: int
    version: int
    draw: List[CardResponse]
    discard: List[CardResponse]

    @classmethod
    def from_deck(
        cls, deck: Deck, presenter: CardPresenterPort, locale: Optional[str] = None
    ) -> "DeckResponse":
        """Project a deck through the card presenter."""

        def translate(cards: List[int]) -> List[CardResponse]:
            return [
                CardResponse.model_validate(presenter.present(card, locale))
                for card in cards
            ]

        return cls(
            id=deck.id,
            size=deck.size.card_count,
            version=deck.version,
            draw=translate(deck.draw),
            discard=translate(deck.discard),
        )
