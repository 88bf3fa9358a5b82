"""
Pydantic schemas for reservation request/response bodies.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, field_serializer

from reservation_api.schemas.event import DATE_OUTPUT_FORMAT


class ReservationPayload(BaseModel):
    # Numeric fields stay untyped; the validator reports non-numeric input
    evento_id: Any = None
    nombre_usuario: Optional[str] = None
    cantidad_boletos: Any = None


class ReservationResponse(BaseModel):
    id: int
    evento_id: int
    nombre_usuario: str
    cantidad_boletos: int
    fecha_reserva: datetime
    evento: Optional[str] = None

    @field_serializer("fecha_reserva")
    def serialize_fecha_reserva(self, value: datetime) -> str:
        return value.strftime(DATE_OUTPUT_FORMAT)
