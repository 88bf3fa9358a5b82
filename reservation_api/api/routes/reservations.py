"""
Reservation endpoints.
"""

from fastapi import APIRouter, Depends, status

from reservation_api.api.dependencies import body_fields, body_openapi, get_reservation_service
from reservation_api.schemas.event import DetailResponse
from reservation_api.schemas.reservation import ReservationPayload, ReservationResponse
from reservation_api.services.reservation_service import ReservationService

router = APIRouter(prefix="/reservas", tags=["Reservas"])


@router.get("", response_model=list[ReservationResponse])
async def list_reservations_endpoint(service: ReservationService = Depends(get_reservation_service)):
    """List every reservation with the name of its event."""
    return await service.list_reservations()


@router.get("/{reservation_id}", response_model=ReservationResponse)
async def get_reservation_endpoint(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
):
    return await service.get_reservation(reservation_id)


@router.post(
    "",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=body_openapi(ReservationPayload),
)
async def create_reservation_endpoint(
    fields: dict = Depends(body_fields(ReservationPayload)),
    service: ReservationService = Depends(get_reservation_service),
):
    """
    Reserve tickets for an event.

    Returns 404 when the event does not exist and 400 when its date has
    already passed.
    """
    return await service.create_reservation(fields)


@router.put(
    "/{reservation_id}",
    response_model=ReservationResponse,
    openapi_extra=body_openapi(ReservationPayload),
)
async def update_reservation_endpoint(
    reservation_id: int,
    fields: dict = Depends(body_fields(ReservationPayload)),
    service: ReservationService = Depends(get_reservation_service),
):
    return await service.update_reservation(reservation_id, fields)


@router.delete("/{reservation_id}", response_model=DetailResponse)
async def delete_reservation_endpoint(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
):
    return await service.delete_reservation(reservation_id)
