from reservation_api.models.event import Event
from reservation_api.models.reservation import Reservation

__all__ = ["Event", "Reservation"]
