"""
Field validation for event and reservation payloads.

Validators never stop at the first problem: every violated rule adds one
``{field: message}`` entry, in field order, so the client can fix the whole
payload in one round trip.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

EVENT_DATE_FORMAT = "%Y-%m-%d %H:%M"

REQUIRED = "Es un campo obligatorio."
NOT_A_NUMBER = "Debe ser un número."
NOT_POSITIVE = "Debe ser mayor a 0."
BAD_DATE_FORMAT = "Formato de fecha incorrecto [YYYY-MM-DD HH:mm]."

# Ids and ticket counts are stored in 32-bit integer columns
MAX_INTEGER = 2**31 - 1

NOMBRE_MAX_LENGTH = 100
UBICACION_MAX_LENGTH = 250
NOMBRE_USUARIO_MAX_LENGTH = 100


def too_long(limit: int) -> str:
    return f"No puede tener más de {limit} caracteres."


def too_large(limit: int) -> str:
    return f"Debe ser menor o igual a {limit}."


@dataclass
class ValidationResult:
    errors: list[dict[str, str]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.append({field_name: message})


def is_missing(value: Any) -> bool:
    return value is None or value == ""


def parse_event_date(value: Any) -> Optional[datetime]:
    """Parse ``YYYY-MM-DD HH:mm`` strictly, returning None on any mismatch."""
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.strptime(value, EVENT_DATE_FORMAT)
    except ValueError:
        return None
    # strptime accepts unpadded fields ("2030-1-5 9:00"); the format is exact
    if parsed.strftime(EVENT_DATE_FORMAT) != value:
        return None
    return parsed


def to_int(value: Any) -> Optional[int]:
    """Coerce an integer or numeric string; None when the value is not a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _check_text(result: ValidationResult, fields: dict, name: str, max_length: int) -> None:
    value = fields.get(name)
    if is_missing(value):
        result.add(name, REQUIRED)
    elif len(value) > max_length:
        result.add(name, too_long(max_length))


def _check_positive_int(result: ValidationResult, fields: dict, name: str) -> None:
    value = fields.get(name)
    if is_missing(value):
        result.add(name, REQUIRED)
        return
    number = to_int(value)
    if number is None:
        result.add(name, NOT_A_NUMBER)
    elif number <= 0:
        result.add(name, NOT_POSITIVE)
    elif number > MAX_INTEGER:
        result.add(name, too_large(MAX_INTEGER))


def validate_event(fields: dict, update: bool = False) -> ValidationResult:
    """Validate ``nombre``, ``fecha`` and ``ubicacion`` (plus ``id`` on update).

    A malformed ``fecha`` fails validation like any other rule, so it can
    never reach the INSERT/UPDATE statement.
    """
    result = ValidationResult()
    _check_text(result, fields, "nombre", NOMBRE_MAX_LENGTH)

    fecha = fields.get("fecha")
    if is_missing(fecha):
        result.add("fecha", REQUIRED)
    elif parse_event_date(fecha) is None:
        result.add("fecha", BAD_DATE_FORMAT)

    _check_text(result, fields, "ubicacion", UBICACION_MAX_LENGTH)

    if update and is_missing(fields.get("id")):
        result.add("id", REQUIRED)
    return result


def validate_reservation(fields: dict, update: bool = False) -> ValidationResult:
    """Validate ``evento_id``, ``nombre_usuario`` and ``cantidad_boletos`` (plus ``id`` on update)."""
    result = ValidationResult()
    _check_positive_int(result, fields, "evento_id")
    _check_text(result, fields, "nombre_usuario", NOMBRE_USUARIO_MAX_LENGTH)
    _check_positive_int(result, fields, "cantidad_boletos")

    if update and is_missing(fields.get("id")):
        result.add("id", REQUIRED)
    return result
