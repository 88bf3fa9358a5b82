"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from reservation_api.api.routes import events, reservations

api_router = APIRouter()
api_router.include_router(events.router)
api_router.include_router(reservations.router)
