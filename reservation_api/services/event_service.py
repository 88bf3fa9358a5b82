"""
Event service handling CRUD operations.

Every write is followed by a fresh read through get_event, so responses
show exactly what the database stored.
"""

from sqlalchemy import DateTime, Integer, String, bindparam, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from reservation_api.core.errors import ConflictError, InternalError, NotFoundError, ValidationFailedError
from reservation_api.core.logging import get_logger
from reservation_api.db.sql import SqlExecutor
from reservation_api.services.interfaces import EventLookup
from reservation_api.services.validation import MAX_INTEGER, parse_event_date, validate_event

logger = get_logger(__name__)

_EVENT_COLUMNS = dict(id=Integer, nombre=String, fecha=DateTime, ubicacion=String)

SELECT_EVENTS = text(
    "select id, nombre, fecha, ubicacion from events"
).columns(**_EVENT_COLUMNS)

SELECT_EVENT = text(
    "select id, nombre, fecha, ubicacion from events where id = :id"
).columns(**_EVENT_COLUMNS)

INSERT_EVENT = text(
    "insert into events (nombre, fecha, ubicacion) "
    "values (:nombre, :fecha, :ubicacion) returning id"
).bindparams(bindparam("fecha", type_=DateTime))

UPDATE_EVENT = text(
    "update events set nombre = :nombre, fecha = :fecha, ubicacion = :ubicacion "
    "where id = :id"
).bindparams(bindparam("fecha", type_=DateTime))

DELETE_EVENT = text("delete from events where id = :id")


class EventService(EventLookup):
    """Service for event operations. Stateless apart from its SQL executor."""

    def __init__(self, sql: SqlExecutor) -> None:
        self._sql = sql

    async def list_events(self) -> list[dict]:
        """Return all events in storage order."""
        return await self._sql.fetch_all(SELECT_EVENTS)

    async def get_event(self, event_id: int) -> dict:
        """Return a single event.

        Raises:
            NotFoundError: If the event does not exist.
        """
        if not 0 < event_id <= MAX_INTEGER:
            raise NotFoundError("Evento no encontrado")
        row = await self._sql.fetch_one(SELECT_EVENT, {"id": event_id})
        if row is None:
            raise NotFoundError("Evento no encontrado")
        return row

    async def get_event_by_id(self, event_id: int) -> dict:
        return await self.get_event(event_id)

    async def create_event(self, fields: dict) -> dict:
        """Validate and insert a new event, returning the stored row.

        Raises:
            ValidationFailedError: If any field rule is violated.
            InternalError: If the insert fails.
        """
        validation = validate_event(fields)
        if not validation.is_valid:
            raise ValidationFailedError(validation.errors)

        params = {
            "nombre": fields["nombre"],
            "fecha": parse_event_date(fields["fecha"]),
            "ubicacion": fields["ubicacion"],
        }
        try:
            event_id = await self._sql.insert(INSERT_EVENT, params)
        except SQLAlchemyError:
            logger.exception("event_insert_failed", nombre=params["nombre"])
            raise InternalError("Error al agregar el evento.")

        if not event_id:
            raise InternalError("Error al agregar el evento.")

        logger.info("event_created", event_id=event_id, nombre=params["nombre"])
        return await self.get_event(event_id)

    async def update_event(self, event_id: int, fields: dict) -> dict:
        """Replace nombre, fecha and ubicacion of an existing event.

        Raises:
            NotFoundError: If the event does not exist.
            ValidationFailedError: If any field rule is violated.
            InternalError: If the update fails or touches no row.
        """
        await self.get_event(event_id)

        validation = validate_event({**fields, "id": event_id}, update=True)
        if not validation.is_valid:
            raise ValidationFailedError(validation.errors)

        params = {
            "nombre": fields["nombre"],
            "fecha": parse_event_date(fields["fecha"]),
            "ubicacion": fields["ubicacion"],
            "id": event_id,
        }
        try:
            affected = await self._sql.execute(UPDATE_EVENT, params)
        except SQLAlchemyError:
            logger.exception("event_update_failed", event_id=event_id)
            raise InternalError("Error al actualizar el evento.")

        if affected == 0:
            logger.warning("event_update_no_rows", event_id=event_id)
            raise InternalError("Error actualizando evento")

        logger.info("event_updated", event_id=event_id)
        return await self.get_event(event_id)

    async def delete_event(self, event_id: int) -> dict:
        """Delete an event that no reservation references.

        Raises:
            NotFoundError: If the event does not exist.
            ConflictError: If reservations still reference the event.
            InternalError: If the delete fails for any other reason.
        """
        await self.get_event(event_id)

        try:
            affected = await self._sql.execute(DELETE_EVENT, {"id": event_id})
        except IntegrityError:
            # Only the reservations foreign key can reject a delete on events
            logger.warning("event_delete_conflict", event_id=event_id, reason="has_reservations")
            raise ConflictError("Este evento tiene reservaciones.")
        except SQLAlchemyError:
            logger.exception("event_delete_failed", event_id=event_id)
            raise InternalError("Error al eliminar el evento.")

        if affected == 0:
            raise InternalError("Error eliminando evento")

        logger.info("event_deleted", event_id=event_id)
        return {"detail": "Evento eliminado"}
