"""Repository implementations backed by SQLAlchemy."""

from .deck_repository import DeckRepository

__all__ = ["DeckRepository"]
