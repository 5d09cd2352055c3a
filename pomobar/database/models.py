"""SQLAlchemy ORM models for Pomobar."""

from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class Preference(Base):
    """One key-value preference entry (the app's defaults store)."""

    __tablename__ = "preferences"

    key = Column(String(128), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow,
    )

    def __repr__(self) -> str:
        return f"<Preference key={self.key} bytes={len(self.value or '')}>"
