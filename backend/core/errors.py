# core/errors.py
"""Global exception handlers.

Every non-2xx body the API produces has the shape ``{"error": "<message>"}``
so clients only need to read one key.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error("HTTP %s on %s: %s", exc.status_code,
                         request.url.path, exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": _detail_to_message(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc.errors())
        logger.info("Validation error on %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": message},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s",
                         request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def _detail_to_message(detail) -> str:
    if isinstance(detail, str):
        return detail
    if isinstance(detail, list):
        return format_validation_errors(detail)
    return str(detail)


def format_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        # loc = ("body", "name") -> "name"
        loc = [str(x) for x in err.get("loc", ()) if x not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"
