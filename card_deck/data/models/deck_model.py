"""
SQLAlchemy model for Deck entity.
"""

from sqlalchemy import Column, Integer, DateTime, JSON, Uuid
from datetime import datetime, timezone
import uuid

from card_deck.data.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DeckModel(Base):
    __tablename__ = "decks"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    size = Column(Integer, nullable=False)
    draw = Column(JSON, nullable=False, default=list)
    discard = Column(JSON, nullable=False, default=list)
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<DeckModel(id={self.id}, size={self.size}, version={self.version})>"
