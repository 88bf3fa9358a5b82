"""
Event endpoints.
"""

from fastapi import APIRouter, Depends, status

from reservation_api.api.dependencies import body_fields, body_openapi, get_event_service
from reservation_api.schemas.event import DetailResponse, EventPayload, EventResponse
from reservation_api.services.event_service import EventService

router = APIRouter(prefix="/eventos", tags=["Eventos"])


@router.get("", response_model=list[EventResponse])
async def list_events_endpoint(service: EventService = Depends(get_event_service)):
    """List every event."""
    return await service.list_events()


@router.get("/{event_id}", response_model=EventResponse)
async def get_event_endpoint(event_id: int, service: EventService = Depends(get_event_service)):
    """Get a single event by ID."""
    return await service.get_event(event_id)


@router.post(
    "",
    response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=body_openapi(EventPayload),
)
async def create_event_endpoint(
    fields: dict = Depends(body_fields(EventPayload)),
    service: EventService = Depends(get_event_service),
):
    """Create an event. Every invalid field is reported in one 422 response."""
    return await service.create_event(fields)


@router.put("/{event_id}", response_model=EventResponse, openapi_extra=body_openapi(EventPayload))
async def update_event_endpoint(
    event_id: int,
    fields: dict = Depends(body_fields(EventPayload)),
    service: EventService = Depends(get_event_service),
):
    """Replace name, date and location of an event."""
    return await service.update_event(event_id, fields)


@router.delete("/{event_id}", response_model=DetailResponse)
async def delete_event_endpoint(event_id: int, service: EventService = Depends(get_event_service)):
    """Delete an event. Fails with 409 while reservations reference it."""
    return await service.delete_event(event_id)
