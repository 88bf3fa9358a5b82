"""
Reservation table: a ticket quantity booked by a named holder for one event.

Key design decisions:
- RESTRICT foreign key to events, so an event with reservations cannot be deleted
- `fecha_reserva` is written once by the service at creation time
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint

from reservation_api.db.base import Base


class Reservation(Base):
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, index=True)
    evento_id = Column(
        Integer,
        ForeignKey("events.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    nombre_usuario = Column(String(100), nullable=False)
    cantidad_boletos = Column(Integer, nullable=False)
    fecha_reserva = Column(DateTime(timezone=False), nullable=False)

    __table_args__ = (
        CheckConstraint("cantidad_boletos > 0", name="check_cantidad_boletos_positive"),
    )

    def __repr__(self) -> str:
        return f"<Reservation(id={self.id}, evento={self.evento_id}, boletos={self.cantidad_boletos})>"
