from reservation_api.schemas.event import EventPayload, EventResponse, DetailResponse
from reservation_api.schemas.reservation import ReservationPayload, ReservationResponse

__all__ = [
    "EventPayload", "EventResponse", "DetailResponse",
    "ReservationPayload", "ReservationResponse",
]
