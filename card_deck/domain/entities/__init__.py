"""Domain entities exports."""

from .deck import Deck

__all__ = ["Deck"]
