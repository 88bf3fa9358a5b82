"""
Pydantic schemas for event request/response bodies.

Request fields are all optional: presence, length and date format are
checked by the event validator so that every violation is reported at once.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_serializer

DATE_OUTPUT_FORMAT = "%Y-%m-%d %H:%M:%S"


class EventPayload(BaseModel):
    nombre: Optional[str] = None
    fecha: Optional[str] = None
    ubicacion: Optional[str] = None


class EventResponse(BaseModel):
    id: int
    nombre: str
    fecha: datetime
    ubicacion: str

    @field_serializer("fecha")
    def serialize_fecha(self, value: datetime) -> str:
        return value.strftime(DATE_OUTPUT_FORMAT)


class DetailResponse(BaseModel):
    detail: str
