"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class PhotoCacheError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(PhotoCacheError):
    def __init__(self):
        super().__init__("Not Found", status_code=404)


class RefreshError(PhotoCacheError):
    """A refresh cycle failed. Never surfaced to HTTP clients."""


class FetchError(RefreshError):
    """Transport failure talking to the upstream source."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Error fetching {url}: {cause}", status_code=502)


class MalformedPayloadError(RefreshError):
    """Upstream answered, but not with a JSON array of objects."""

    def __init__(self, reason: str):
        super().__init__(f"Malformed payload: {reason}", status_code=502)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(PhotoCacheError)
    async def handle_photo_cache_error(_request: Request, exc: PhotoCacheError):
        return JSONResponse({"message": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException):
        # Unmatched paths and methods (405 for verbs the fallback route lacks) are all 404.
        if exc.status_code in (404, 405):
            return JSONResponse({"message": "Not Found"}, status_code=404)
        return JSONResponse({"message": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"message": "Internal server error"},
            status_code=500,
        )
