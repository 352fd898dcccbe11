"""
Card presenter - maps card ids to display names and image URLs.
"""

from typing import Dict, Optional, Tuple

from card_deck.application.ports import CardPresenterPort, CardRepresentation
from card_deck.domain.value_objects.card import (
    FULL_DECK_SIZE,
    Card,
    Rank,
    Suit,
    rank_of,
    suit_of,
)

_SUIT_NAMES: Dict[str, Dict[Suit, str]] = {
    "en": {
        Suit.CLUBS: "Clubs",
        Suit.DIAMONDS: "Diamonds",
        Suit.HEARTS: "Hearts",
        Suit.SPADES: "Spades",
    },
    "fr": {
        Suit.CLUBS: "Trèfle",
        Suit.DIAMONDS: "Carreau",
        Suit.HEARTS: "Coeur",
        Suit.SPADES: "Pique",
    },
}

_RANK_NAMES: Dict[str, Dict[Rank, str]] = {
    "en": {
        Rank.ACE: "Ace",
        Rank.JACK: "Jack",
        Rank.QUEEN: "Queen",
        Rank.KING: "King",
    },
    "fr": {
        Rank.ACE: "As",
        Rank.JACK: "Valet",
        Rank.QUEEN: "Reine",
        Rank.KING: "Roi",
    },
}

_NAME_FORMATS: Dict[str, str] = {
    "en": "{rank} of {suit}",
    "fr": "{rank} de {suit}",
}

SUPPORTED_LOCALES: Tuple[str, ...] = tuple(_NAME_FORMATS)


class CardPresenter(CardPresenterPort):
    """
    Presents cards with localized names and SVG image URLs.

    Images live at ``{asset_url}/cards/{card + 1}.svg``.
    """

    def __init__(self, asset_url: str, default_locale: str = "en"):
        if default_locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale: {default_locale}")
        self.asset_url = asset_url.rstrip("/")
        self.default_locale = default_locale

    def present(self, card: Card, locale: Optional[str] = None) -> CardRepresentation:
        if not 0 <= card < FULL_DECK_SIZE:
            raise ValueError(f"Card id out of range: {card}")

        return CardRepresentation(
            name=self.card_name(card, locale),
            value=card,
            image=self.image_url(card),
        )

    def card_name(self, card: Card, locale: Optional[str] = None) -> str:
        locale = self._resolve_locale(locale)
        rank = rank_of(card)
        rank_name = _RANK_NAMES[locale].get(rank, str(rank.value + 1))
        suit_name = _SUIT_NAMES[locale][suit_of(card)]
        return _NAME_FORMATS[locale].format(rank=rank_name, suit=suit_name)

    def image_url(self, card: Card) -> str:
        return f"{self.asset_url}/cards/{card + 1}.svg"

    def _resolve_locale(self, locale: Optional[str]) -> str:
        if locale in SUPPORTED_LOCALES:
            return locale
        return self.default_locale
