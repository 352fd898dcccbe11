"""
Application services for orchestrating deck operations.
"""

from .deck_service import DeckService

__all__ = ["DeckService"]
