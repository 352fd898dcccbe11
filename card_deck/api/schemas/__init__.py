"""
API Schemas package.

Import organization:
- base: error and health responses
- deck_io: deck and card representations, move parameters
"""

from __future__ import annotations

from .base import ErrorResponse, HealthCheckResponse
from .deck_io import CardResponse, DeckResponse, MoveCardsParams

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "CardResponse",
    "DeckResponse",
    "MoveCardsParams",
]
