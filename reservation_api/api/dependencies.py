"""
FastAPI dependency providers.
Services are built once by create_app and kept on app.state.
"""

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from reservation_api.services.event_service import EventService
from reservation_api.services.reservation_service import ReservationService

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def get_event_service(request: Request) -> EventService:
    return request.app.state.event_service


def get_reservation_service(request: Request) -> ReservationService:
    return request.app.state.reservation_service


def body_fields(model: type[BaseModel]):
    """
    Build a dependency that reads a JSON or url-encoded body into a field dict.

    Form values arrive as strings; numeric strings pass the validators the
    same way JSON numbers do. An empty body yields ``{}`` so that every
    required field is reported.
    """

    async def read_fields(request: Request) -> dict[str, Any]:
        content_type = request.headers.get("content-type", "")
        if content_type.startswith(FORM_CONTENT_TYPE):
            data: Any = dict(await request.form())
        else:
            if not await request.body():
                return {}
            try:
                data = await request.json()
            except ValueError:
                raise RequestValidationError(
                    [{"loc": ("body",), "msg": "JSON inválido.", "type": "json_invalid"}]
                )
        if data is None:
            return {}

        try:
            payload = model.model_validate(data)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors())
        return payload.model_dump()

    return read_fields


def body_openapi(model: type[BaseModel]) -> dict:
    """Request body documentation for routes that read it through body_fields."""
    schema = model.model_json_schema()
    return {
        "requestBody": {
            "content": {
                JSON_CONTENT_TYPE: {"schema": schema},
                FORM_CONTENT_TYPE: {"schema": schema},
            }
        }
    }
