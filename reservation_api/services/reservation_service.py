"""
Reservation service handling CRUD operations.

Reservations reference events through an EventLookup. Creation also
enforces that the event is still ahead of the server clock; updates only
check that the referenced event exists.
"""

from datetime import datetime
from typing import Callable

from sqlalchemy import DateTime, Integer, String, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from reservation_api.core.errors import BusinessRuleError, InternalError, NotFoundError, ValidationFailedError
from reservation_api.core.logging import get_logger
from reservation_api.db.sql import SqlExecutor
from reservation_api.services.interfaces import EventLookup
from reservation_api.services.validation import MAX_INTEGER, to_int, validate_reservation

logger = get_logger(__name__)

_RESERVATION_COLUMNS = dict(
    id=Integer,
    evento_id=Integer,
    nombre_usuario=String,
    cantidad_boletos=Integer,
    fecha_reserva=DateTime,
    evento=String,
)

_SELECT_RESERVATIONS_SQL = (
    "select r.id, r.evento_id, r.nombre_usuario, r.cantidad_boletos, r.fecha_reserva, "
    "e.nombre as evento "
    "from reservations r "
    "left join events e on e.id = r.evento_id"
)

SELECT_RESERVATIONS = text(_SELECT_RESERVATIONS_SQL).columns(**_RESERVATION_COLUMNS)

SELECT_RESERVATION = text(
    _SELECT_RESERVATIONS_SQL + " where r.id = :id"
).columns(**_RESERVATION_COLUMNS)

INSERT_RESERVATION = text(
    "insert into reservations (evento_id, nombre_usuario, cantidad_boletos, fecha_reserva) "
    "values (:evento_id, :nombre_usuario, :cantidad_boletos, :fecha_reserva) returning id"
).bindparams(bindparam("fecha_reserva", type_=DateTime))

UPDATE_RESERVATION = text(
    "update reservations set evento_id = :evento_id, nombre_usuario = :nombre_usuario, "
    "cantidad_boletos = :cantidad_boletos where id = :id"
)

DELETE_RESERVATION = text("delete from reservations where id = :id")


def _truncate_to_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


def event_has_passed(event_date: datetime, now: datetime) -> bool:
    """True when the event starts at or before ``now``, compared per minute."""
    if event_date.tzinfo is not None and now.tzinfo is None:
        now = now.astimezone(event_date.tzinfo)
    elif event_date.tzinfo is None and now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)
    return _truncate_to_minute(event_date) <= _truncate_to_minute(now)


class ReservationService:
    """Service for reservation operations."""

    def __init__(
        self,
        sql: SqlExecutor,
        events: EventLookup,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._sql = sql
        self._events = events
        self._clock = clock

    async def list_reservations(self) -> list[dict]:
        """Return all reservations with the name of their event."""
        return await self._sql.fetch_all(SELECT_RESERVATIONS)

    async def get_reservation(self, reservation_id: int) -> dict:
        """Return a single reservation with the name of its event.

        Raises:
            NotFoundError: If the reservation does not exist.
        """
        if not 0 < reservation_id <= MAX_INTEGER:
            raise NotFoundError("Reservación no encontrada")
        row = await self._sql.fetch_one(SELECT_RESERVATION, {"id": reservation_id})
        if row is None:
            raise NotFoundError("Reservación no encontrada")
        return row

    async def create_reservation(self, fields: dict) -> dict:
        """Validate, check the event and insert a new reservation.

        Raises:
            ValidationFailedError: If any field rule is violated.
            NotFoundError: If the referenced event does not exist.
            BusinessRuleError: If the event date is not in the future.
            InternalError: If the insert fails.
        """
        validation = validate_reservation(fields)
        if not validation.is_valid:
            raise ValidationFailedError(validation.errors)

        evento_id = to_int(fields["evento_id"])
        event = await self._events.get_event_by_id(evento_id)

        now = self._clock()
        if event_has_passed(event["fecha"], now):
            logger.warning(
                "reservation_rejected_past_event",
                event_id=evento_id,
                event_date=str(event["fecha"]),
            )
            raise BusinessRuleError("El evento ya ha pasado.")

        params = {
            "evento_id": evento_id,
            "nombre_usuario": fields["nombre_usuario"],
            "cantidad_boletos": to_int(fields["cantidad_boletos"]),
            "fecha_reserva": now,
        }
        try:
            reservation_id = await self._sql.insert(INSERT_RESERVATION, params)
        except SQLAlchemyError:
            logger.exception("reservation_insert_failed", event_id=evento_id)
            raise InternalError("Error al agregar la reservación.")

        if not reservation_id:
            raise InternalError("Error al agregar la reservación.")

        logger.info(
            "reservation_created",
            reservation_id=reservation_id,
            event_id=evento_id,
            tickets=params["cantidad_boletos"],
        )
        return await self.get_reservation(reservation_id)

    async def update_reservation(self, reservation_id: int, fields: dict) -> dict:
        """Change event, holder and ticket count of a reservation.

        The event date is not checked here, only that the event exists.
        ``fecha_reserva`` keeps its creation value.

        Raises:
            NotFoundError: If the reservation or the referenced event does not exist.
            ValidationFailedError: If any field rule is violated.
            InternalError: If the update fails or touches no row.
        """
        await self.get_reservation(reservation_id)

        validation = validate_reservation({**fields, "id": reservation_id}, update=True)
        if not validation.is_valid:
            raise ValidationFailedError(validation.errors)

        evento_id = to_int(fields["evento_id"])
        await self._events.get_event_by_id(evento_id)

        params = {
            "evento_id": evento_id,
            "nombre_usuario": fields["nombre_usuario"],
            "cantidad_boletos": to_int(fields["cantidad_boletos"]),
            "id": reservation_id,
        }
        try:
            affected = await self._sql.execute(UPDATE_RESERVATION, params)
        except SQLAlchemyError:
            logger.exception("reservation_update_failed", reservation_id=reservation_id)
            raise InternalError("Error al actualizar la reservación.")

        if affected == 0:
            logger.warning("reservation_update_no_rows", reservation_id=reservation_id)
            raise InternalError("Error actualizando la reservación")

        logger.info("reservation_updated", reservation_id=reservation_id, event_id=evento_id)
        return await self.get_reservation(reservation_id)

    async def delete_reservation(self, reservation_id: int) -> dict:
        """Delete a reservation.

        Raises:
            NotFoundError: If the reservation does not exist.
            InternalError: If the delete fails or touches no row.
        """
        await self.get_reservation(reservation_id)

        try:
            affected = await self._sql.execute(DELETE_RESERVATION, {"id": reservation_id})
        except SQLAlchemyError:
            logger.exception("reservation_delete_failed", reservation_id=reservation_id)
            raise InternalError("Error al eliminar la reservación.")

        if affected == 0:
            raise InternalError("Error eliminando la reservación")

        logger.info("reservation_deleted", reservation_id=reservation_id)
        return {"detail": "Reservación eliminada"}
