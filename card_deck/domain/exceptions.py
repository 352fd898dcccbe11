"""
Domain exceptions.

Every domain error carries an ``ErrorKind``; the API layer maps kinds to
HTTP status codes and localized messages, so nothing here holds user-facing
text.
"""

from enum import Enum
from typing import Optional
from uuid import UUID


class ErrorKind(str, Enum):
    """Structured error kinds surfaced at the request boundary."""

    NOT_FOUND = "not_found"
    INVALID_IDENTIFIER = "invalid_identifier"
    MISSING_PARAMETER = "missing_parameter"
    INVALID_PARAMETER = "invalid_parameter"
    CONFLICT = "conflict"
    CORRUPTED_STATE = "corrupted_state"
    PERSISTENCE_UNAVAILABLE = "persistence_unavailable"
    INTERNAL = "internal"


class DomainError(Exception):
    """Base class for domain-specific errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, deck_id: Optional[str] = None):
        self.message = message
        self.deck_id = deck_id
        super().__init__(self.message)


class DeckNotFoundError(DomainError):
    """Raised when a deck is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, deck_id: UUID):
        super().__init__(f"Deck {deck_id} not found", str(deck_id))


class InvalidDeckIdError(DomainError):
    """Raised when a deck identifier cannot be parsed."""

    kind = ErrorKind.INVALID_IDENTIFIER

    def __init__(self, raw_id: str):
        super().__init__(f"Invalid deck identifier: {raw_id!r}", raw_id)


class ConcurrentModificationError(DomainError):
    """Raised when a deck kept changing under a load-mutate-save cycle."""

    kind = ErrorKind.CONFLICT

    def __init__(self, deck_id: UUID, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Deck {deck_id} was modified concurrently ({attempts} attempts)",
            str(deck_id),
        )


class DeckIntegrityError(DomainError):
    """Raised when a deck's piles break card conservation."""

    kind = ErrorKind.CORRUPTED_STATE

    def __init__(self, deck_id: UUID, reason: str):
        self.reason = reason
        super().__init__(f"Deck {deck_id} is corrupted: {reason}", str(deck_id))
