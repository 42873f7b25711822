"""SQLAlchemy models mirroring the JSON Document."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String, JSON

from .session import Base


class PropertyRow(Base):
    """One property of the collection; `data` holds the full open record."""

    __tablename__ = "properties"

    id = Column(String(64), primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    data = Column(JSON, nullable=False, default=dict)
