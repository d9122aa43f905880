"""FastAPI application entry point for the photo cache API."""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings
from errors import register_error_handlers
from services.refresher import Refresher
from services.store import RecordStore

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    refresher: Refresher = app.state.refresher

    # Initial fetch before serving, then on the timer.
    await refresher.refresh()
    refresher.start()
    try:
        yield
    finally:
        await refresher.stop()


def create_app(
    config: Settings | None = None,
    store: RecordStore | None = None,
    refresher: Refresher | None = None,
) -> FastAPI:
    config = config or settings
    store = store if store is not None else RecordStore()
    if refresher is None:
        refresher = Refresher(
            store,
            source_url=config.source_url,
            interval_seconds=config.refresh_interval_seconds,
        )

    app = FastAPI(
        title="Photo Cache API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store
    app.state.refresher = refresher

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if config.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.fallback import router as fallback_router
    from routes.home import router as home_router
    from routes.photos import router as photos_router

    if config.home_route_enabled:
        app.include_router(home_router)
    app.include_router(photos_router)
    # Must stay last: it matches every path.
    app.include_router(fallback_router)

    invalid = config.validate()
    if invalid:
        logger.warning("Invalid env vars (using defaults): %s", ", ".join(invalid))

    return app


app = create_app()


def main() -> None:
    logger.info("Server running on %s:%d (commit %s)", settings.host, settings.port, settings.git_sha)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
