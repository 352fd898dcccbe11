"""SQLAlchemy models."""

from .base import Base
from .deck_model import DeckModel

__all__ = ["Base", "DeckModel"]
