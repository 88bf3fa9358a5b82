"""
Service interfaces for dependency inversion.
Allows swapping implementations without changing business logic.
"""

from .event_lookup import EventLookup

__all__ = ['EventLookup']
