"""
Card identifier space - card ids, suits, ranks and deck sizes.

A card is a plain integer in [0, 52). The suit is ``card // 13`` and the
rank is ``card % 13``; naming suits and ranks is a presentation concern.
"""

from enum import Enum, IntEnum
from typing import List

Card = int

SUIT_LENGTH = 13
SUIT_COUNT = 4
FULL_DECK_SIZE = SUIT_LENGTH * SUIT_COUNT

# Ranks 1..5 (the 2 to the 6) are left out of a small deck.
_SMALL_DECK_LOWEST_RANK = 6


class Suit(IntEnum):
    """Suits in card id order."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


class Rank(IntEnum):
    """Ranks in card id order, the Ace first."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12


class DeckSize(int, Enum):
    """
    Supported deck sizes, valued by their card count.

    SMALL keeps the Ace and the 7 to the King of every suit (32 cards);
    NORMAL is the full 52 card deck.
    """

    SMALL = 32
    NORMAL = 52

    @property
    def card_count(self) -> int:
        return int(self.value)

    @classmethod
    def from_requested_count(cls, card_count: int) -> "DeckSize":
        """A request for 32 cards gets a small deck, any other count a normal one."""
        if card_count == cls.SMALL.card_count:
            return cls.SMALL
        return cls.NORMAL

    def contains(self, card: Card) -> bool:
        """Business rule: whether a card id belongs to a deck of this size."""
        if not 0 <= card < FULL_DECK_SIZE:
            return False
        if self is DeckSize.NORMAL:
            return True
        rank = card % SUIT_LENGTH
        return rank == Rank.ACE or rank >= _SMALL_DECK_LOWEST_RANK


def canonical_cards(size: DeckSize) -> List[Card]:
    """Return the canonical card set of a deck size, in ascending order."""
    return [card for card in range(FULL_DECK_SIZE) if size.contains(card)]


def suit_of(card: Card) -> Suit:
    return Suit(card // SUIT_LENGTH)


def rank_of(card: Card) -> Rank:
    return Rank(card % SUIT_LENGTH)
