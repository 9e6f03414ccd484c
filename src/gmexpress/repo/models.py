"""Modelos SQLAlchemy para los slots clave/valor persistidos."""
from __future__ import annotations
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, Text, TIMESTAMP
from datetime import datetime

class Base(DeclarativeBase):
    """Base declarativa."""
    pass

class StorageSlot(Base):
    __tablename__ = "storage_slots"
    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=False), default=datetime.utcnow, onupdate=datetime.utcnow)
