"""
Exception handlers mapping service errors to HTTP responses.

Every failure response has a body: ``{"detail": <message>}`` or, for
validation failures, ``{"detail": [{<field>: <message>}, ...]}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from reservation_api.core.errors import ErrorCode, ServiceError
from reservation_api.core.logging import get_logger
from reservation_api.core.metrics import record_service_error

logger = get_logger(__name__)

FALLBACK_DETAIL = "Error interno del servidor."


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    record_service_error(exc.code.value)
    if exc.status_code >= 500:
        logger.error("service_error", code=exc.code.value, detail=exc.detail)
    else:
        logger.info("service_error", code=exc.code.value, status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail or FALLBACK_DETAIL})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for error in exc.errors():
        names = [part for part in error.get("loc", ()) if isinstance(part, str) and part not in ("body", "path", "query")]
        errors.append({names[-1] if names else "body": error.get("msg", "Valor inválido.")})
    record_service_error(ErrorCode.VALIDATION_FAILED.value)
    logger.info("request_validation_failed", errors=errors)
    return JSONResponse(status_code=422, content={"detail": errors})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    record_service_error(ErrorCode.INTERNAL_ERROR.value)
    logger.error("unhandled_exception", error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": FALLBACK_DETAIL},
    )


EXCEPTION_HANDLERS = {
    ServiceError: service_error_handler,
    RequestValidationError: request_validation_handler,
    Exception: unhandled_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
