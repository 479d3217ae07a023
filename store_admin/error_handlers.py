"""Global error handling for the API.

StoreAdminError maps to its own status with a plain-text reason,
request validation failures become a 400 naming the first bad field and
everything else is logged under the route's tag and answered with a
generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from store_admin.errors import StoreAdminError, InternalError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal error"


def route_tag(request: Request) -> str:
    """Log tag for the matched route, e.g. BILLBOARD_PATCH."""
    route = request.scope.get("route")
    name = getattr(route, "name", None) or "unknown"
    return name.upper()


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_store_admin_error_handler(app)
    _register_validation_error_handler(app)
    _register_internal_error_middleware(app)


def _register_store_admin_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StoreAdminError)
    async def store_admin_error_handler(request: Request, exc: StoreAdminError):
        if isinstance(exc, InternalError):
            logger.error(
                f"[{route_tag(request)}] {exc.message}",
                exc_info=exc,
                extra={"route_tag": route_tag(request), "path": request.url.path},
            )
            return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=exc.http_status)
        logger.info(
            f"[{route_tag(request)}] rejected with {exc.http_status}: {exc.message}",
            extra={"route_tag": route_tag(request), "path": request.url.path},
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return PlainTextResponse(
            _describe_validation_error(exc), status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_internal_error_middleware(app: FastAPI) -> None:

    @app.middleware("http")
    async def internal_error_middleware(request: Request, call_next):
        """Catch-all: never leaks internal details."""
        try:
            return await call_next(request)
        except Exception as e:
            tag = route_tag(request)
            logger.error(
                f"[{tag}] {e}",
                exc_info=True,
                extra={"route_tag": tag, "path": request.url.path},
            )
            return PlainTextResponse(
                INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request data"
    first = errors[0]
    # Drop the leading "body"/"path"/"query" location segment
    location = [str(part) for part in first.get("loc", ())][1:]
    if not location:
        return "Invalid request data"
    return f"Invalid {'.'.join(location)}: {first.get('msg', 'invalid value')}"
