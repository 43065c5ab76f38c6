"""SQLAlchemy model for the cars table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .session import Base


class CarEntity(Base):
    __tablename__ = "cars"

    id = Column(Text, primary_key=True)
    year = Column(Integer, nullable=False)
    make = Column(Text, nullable=False)
    model = Column(Text, nullable=False)
