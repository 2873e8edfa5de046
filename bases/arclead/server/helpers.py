from contextlib import contextmanager

from fastapi import HTTPException, status

from arclead.log import get_logger

log = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
}


class HandlerFailure(Exception):
    """A handler could not finish because storage or the request body failed."""

    def __init__(self, error: str, message: str):
        super().__init__(f"{error}: {message}")
        self.error = error
        self.message = message


@contextmanager
def fails_with(error: str):
    """Turn anything but an HTTPException raised inside into a HandlerFailure."""
    try:
        yield
    except HTTPException:
        raise
    except Exception as e:
        log.error(f"{error}: {e}", exc_info=True)
        raise HandlerFailure(error, str(e)) from e


def not_found(what: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found")
