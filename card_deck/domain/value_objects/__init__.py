"""
Domain value objects - immutable objects that represent concepts.
"""

from .card import (
    Card,
    DeckSize,
    Rank,
    Suit,
    FULL_DECK_SIZE,
    SUIT_LENGTH,
    canonical_cards,
    rank_of,
    suit_of,
)

__all__ = [
    "Card",
    "DeckSize",
    "Rank",
    "Suit",
    "FULL_DECK_SIZE",
    "SUIT_LENGTH",
    "canonical_cards",
    "rank_of",
    "suit_of",
]
