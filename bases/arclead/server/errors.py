from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from arclead.log import get_logger
from arclead.models.errors import ErrorBody
from arclead.server.helpers import CORS_HEADERS, HandlerFailure

log = get_logger(__name__)


def _error_response(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorBody(error=error, message=message).model_dump(exclude_none=True),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Every error leaves the API as ``{"error": ...}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # A known path with another method still counts as no matching route
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            log.debug(f"No route for {request.method} {request.url.path}")
            return _error_response(status.HTTP_404_NOT_FOUND, "Not Found")
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if any(e.get("type") == "json_invalid" for e in errors):
            log.error(f"Unparseable body on {request.url.path}")
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Failed to parse request body",
                "; ".join(str(e.get("msg")) for e in errors),
            )

        log.warning(f"Validation error on {request.url.path}: {errors}")
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request",
            "; ".join(
                f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in errors
            ),
        )

    @app.exception_handler(HandlerFailure)
    async def handler_failure_handler(request: Request, exc: HandlerFailure):
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.error, exc.message)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        # Answered outside the CORS middleware, and never echoes internals
        log.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        response = _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An unexpected error occurred",
        )
        response.headers.update(CORS_HEADERS)
        return response
