"""
Event table.

Key design decisions:
- `fecha` is stored without time zone; input and comparisons use server local time
- No ON DELETE cascade from reservations: deleting a referenced event must fail
"""

from sqlalchemy import Column, Integer, String, DateTime, Index

from reservation_api.db.base import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    fecha = Column(DateTime(timezone=False), nullable=False)
    ubicacion = Column(String(250), nullable=False)

    __table_args__ = (
        Index("ix_events_fecha", "fecha"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, nombre={self.nombre}, fecha={self.fecha})>"
