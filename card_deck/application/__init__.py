"""
Application layer - Use cases and business orchestration.

This package contains the application services and the coordination logic
that drives the deck entity against its repository.
"""

from .services.deck_service import DeckService
from .unit_of_work import UnitOfWork

__all__ = ["DeckService", "UnitOfWork"]
