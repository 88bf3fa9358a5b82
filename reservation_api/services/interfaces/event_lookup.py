"""
Event lookup interface.
Lets the reservation service check referenced events without depending
on the concrete event service or its storage.
"""

from abc import ABC, abstractmethod


class EventLookup(ABC):
    """
    Read access to a single event.

    Implementations:
    - EventService: SQL-backed lookup
    - test fakes: in-memory dict of events
    """

    @abstractmethod
    async def get_event_by_id(self, event_id: int) -> dict:
        """
        Return the event row (``id``, ``nombre``, ``fecha``, ``ubicacion``).

        Raises:
            NotFoundError: If no event has this id. Callers re-raise it unchanged.
        """
        pass
