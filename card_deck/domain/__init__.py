"""
Domain layer - Core business entities and logic.

This package contains the deck state machine and the card identifier space,
independent of any external concerns like databases or APIs.
"""

from .entities import Deck
from .value_objects import Card, DeckSize, canonical_cards
from .exceptions import (
    DomainError,
    ErrorKind,
    DeckNotFoundError,
    InvalidDeckIdError,
    ConcurrentModificationError,
    DeckIntegrityError,
)

__all__ = [
    "Deck",
    "Card",
    "DeckSize",
    "canonical_cards",
    "DomainError",
    "ErrorKind",
    "DeckNotFoundError",
    "InvalidDeckIdError",
    "ConcurrentModificationError",
    "DeckIntegrityError",
]
