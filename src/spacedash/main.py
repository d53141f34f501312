# src/spacedash/main.py

"""Main FastAPI application for SpaceDash."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .api import assets, stats, users
from .config import settings
from .db.session import engine
from .exceptions import (
    ResourceNotFoundError,
    SpaceDashError,
    StoreUnavailableError,
    ValidationError,
)
from .middleware.logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for startup and shutdown events."""
    yield
    # Shutdown: Dispose of database connections gracefully
    await engine.dispose()


app = FastAPI(title="SpaceDash Stats API", lifespan=lifespan)

# Last added = outermost, so CORS headers are set on every response
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# =============================================================================
# Global Exception Handlers
# =============================================================================


def _error_response(status_code: int, exc: SpaceDashError, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "error_type": type(exc).__name__},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Handle missing or invalid request input -> 400."""
    logger.warning("Validation error: %s", exc.message, extra=exc.details)
    return _error_response(400, exc, exc.message)


@app.exception_handler(ResourceNotFoundError)
async def resource_not_found_handler(
    request: Request, exc: ResourceNotFoundError
) -> JSONResponse:
    """Handle all resource not found errors -> 404."""
    logger.warning("Resource not found: %s", exc.message, extra=exc.details)
    return _error_response(404, exc, exc.message)


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(
    request: Request, exc: StoreUnavailableError
) -> JSONResponse:
    """Handle failed store or object listing calls -> 503."""
    logger.error("Store unavailable: %s", exc.message, extra=exc.details)
    return _error_response(503, exc, "The data store is currently unavailable")


@app.exception_handler(SpaceDashError)
async def spacedash_error_handler(
    request: Request, exc: SpaceDashError
) -> JSONResponse:
    """Catch-all for any other SpaceDash errors -> 500."""
    logger.error("SpaceDash error: %s", exc.message, extra=exc.details, exc_info=True)
    return _error_response(500, exc, exc.message)


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Catch-all for database errors raised outside the stats store."""
    logger.error("Database error: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal database error occurred"},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal server error occurred"},
    )


app.include_router(stats.router)
app.include_router(users.router)
app.include_router(assets.router)


@app.get("/", tags=["Root"])
async def read_root() -> dict[str, str]:
    """Provides a welcome message."""
    return {"message": "Welcome to the SpaceDash Stats API"}


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
