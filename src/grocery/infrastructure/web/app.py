"""FastAPI application factory and error mapping.

Every error body has the shape ``{"error": "<message>"}``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from grocery.domain.exceptions import (
    EntityNotFoundError,
    GroceryNotFoundError,
    InsufficientStockError,
    PersistenceError,
    ValidationError,
)
from grocery.domain.service.retry import RetryPolicy
from grocery.infrastructure.database import Database
from grocery.infrastructure.web.routes import router

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    database: Database,
    retry: RetryPolicy | None = None,
    cors_origins: tuple[str, ...] = ("*",),
) -> FastAPI:
    """Build the app around an already opened store handle.

    The handle is closed when the app shuts down.  Every route answers
    cross-origin requests from *cors_origins*.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        database.close()

    app = FastAPI(title="Grocery Booking", lifespan=lifespan)
    app.state.database = database
    app.state.retry = retry or RetryPolicy()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def on_request_invalid(request: Request, exc: RequestValidationError) -> JSONResponse:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return _error(400, f"Invalid request: {problems}")

    @app.exception_handler(ValidationError)
    async def on_validation(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(400, str(exc))

    # Booking an unknown grocery is a bad request, not a missing resource.
    @app.exception_handler(GroceryNotFoundError)
    async def on_grocery_missing(request: Request, exc: GroceryNotFoundError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(EntityNotFoundError)
    async def on_not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return _error(404, str(exc))

    @app.exception_handler(InsufficientStockError)
    async def on_insufficient(request: Request, exc: InsufficientStockError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(PersistenceError)
    async def on_persistence(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return _error(500, "Failed to process request: store unavailable")

    app.include_router(router)
    return app
