# Main application entry point
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api import health_router, pads_router
from .config import Settings, get_settings
from .core.exceptions import MalformedIdentifier, StoreUnavailable
from .core.hashid import HashIDEncoder
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse
from .core.store import IKeyValueStore
from .middleware import NoCacheMiddleware
from .storage import create_store

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings: Settings = app.state.settings
    store: IKeyValueStore = app.state.store

    # Startup
    logger.info(
        "Starting pad application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "storage_backend": settings.storage_backend,
            "debug": settings.debug,
        },
    )

    try:
        await store.connect()
        logger.info("Store connection established")
    except StoreUnavailable as e:
        # requests fail with 500 until the store comes back
        logger.warning(f"Store connection failed: {e}. Continuing without store...")

    yield

    # Shutdown
    logger.info("Shutting down pad application")
    await store.disconnect()
    logger.info("Store connection closed")


async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    """Backend failures are server errors, never retried here."""
    logger.exception(
        f"Store unavailable: {exc.message}",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path, **exc.context},
    )
    body = ErrorResponse(error="StoreUnavailable", message="Internal Server Error")
    return JSONResponse(status_code=500, content=body.model_dump(mode="json"))


async def malformed_identifier_handler(request: Request, exc: MalformedIdentifier) -> JSONResponse:
    body = ErrorResponse(error="MalformedIdentifier", message=exc.message, details=exc.context)
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


def create_app(settings: Optional[Settings] = None, store: Optional[IKeyValueStore] = None) -> FastAPI:
    """Build the application.

    ``store`` defaults to the backend named by ``settings.storage_backend``;
    tests hand in their own.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Minimal pad service",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store if store is not None else create_store(settings)
    app.state.encoder = HashIDEncoder(settings.salt, settings.hashid_min_length)

    # Middleware, outermost last
    app.add_middleware(NoCacheMiddleware)
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
    app.add_exception_handler(MalformedIdentifier, malformed_identifier_handler)

    # single-segment paths all belong to pads; everything else lives deeper
    app.include_router(health_router, prefix="/api")
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(pads_router)

    return app


def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "padnote.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
