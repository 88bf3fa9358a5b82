"""
Event Reservations API - Main Application Entry Point

CRUD endpoints for events (/eventos) and ticket reservations (/reservas):
- Field validation that reports every invalid field at once
- Reservations only for events that have not started yet
- Events with reservations cannot be deleted
- Structured logging with request correlation
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.ext.asyncio import AsyncEngine

from reservation_api.api.exception_handlers import register_exception_handlers
from reservation_api.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from reservation_api.api.router import api_router
from reservation_api.core.config import Settings, get_settings
from reservation_api.core.logging import get_logger, setup_logging
from reservation_api.core.metrics import metrics_endpoint
from reservation_api.db.base import Base
from reservation_api.db.engine import create_engine
from reservation_api.db.sql import SqlExecutor
from reservation_api.services.event_service import EventService
from reservation_api.services.reservation_service import ReservationService

import reservation_api.models  # noqa: F401 - register tables on Base.metadata


def create_app(settings: Optional[Settings] = None, engine: Optional[AsyncEngine] = None) -> FastAPI:
    """Build the application and wire its services.

    ``engine`` replaces the one built from settings, which is how tests
    point the app at a throwaway database.
    """
    settings = settings or get_settings()
    engine = engine or create_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle: startup and shutdown hooks."""
        setup_logging(settings)
        logger = get_logger(__name__)

        logger.info(
            "application_starting",
            app=settings.APP_NAME,
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
        )

        if settings.DB_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("database_tables_ready")

        yield

        await engine.dispose()
        logger.info("application_shutdown")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="CRUD API for events and ticket reservations",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    sql = SqlExecutor(engine)
    event_service = EventService(sql)
    app.state.event_service = event_service
    app.state.reservation_service = ReservationService(sql, event_service)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint for Docker and load balancers."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/metrics", tags=["Health"], include_in_schema=False)
    async def metrics():
        return metrics_endpoint()

    uploads_dir = Path(settings.UPLOADS_DIR)
    if uploads_dir.is_dir():
        app.mount("/uploads", StaticFiles(directory=uploads_dir), name="uploads")

    # Mounted last so API routes always win over files with the same path
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("reservation_api.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
