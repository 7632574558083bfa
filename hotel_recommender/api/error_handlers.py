"""Exception handlers mapping recommendation errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from structlog import get_logger

from hotel_recommender.services import (
    AvailabilityError,
    NoOptionsAvailableError,
    ValidationError,
)

logger = get_logger(__name__)


def _format_request_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = [str(loc) for loc in error.get("loc", []) if loc != "query"]
        message = error.get("msg", "Invalid input")
        if location:
            messages.append(f"{'.'.join(location)}: {message}")
        else:
            messages.append(message)
    return "; ".join(messages) if messages else "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers that return a normalized {"detail": ...} payload."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _format_request_errors(exc)},
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "field": exc.field},
        )

    @app.exception_handler(NoOptionsAvailableError)
    async def no_options_handler(
        request: Request, exc: NoOptionsAvailableError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.exception_handler(AvailabilityError)
    async def availability_handler(
        request: Request, exc: AvailabilityError
    ) -> JSONResponse:
        content: dict = {"detail": str(exc)}
        if exc.status_code is not None:
            content["upstream_status"] = exc.status_code
        return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=content)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception while processing request",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


__all__ = ["register_exception_handlers"]
