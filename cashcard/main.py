"""
CashCard Service — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn cashcard.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │  Req ID  │→│  Logging        │→│ CORS         │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ /cashcards, /cashcards/id│ │ GET /health     │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  Exception Handlers (all with empty bodies):        │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ DB/other→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, optionally create tables, log readiness
    Shutdown: dispose database engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from cashcard import __version__
from cashcard.config import settings
from cashcard.database import create_tables, dispose_engine
from cashcard.exceptions import DatabaseError, NotFoundError, ValidationError
from cashcard.middleware.logging import RequestLoggingMiddleware
from cashcard.middleware.request_id import RequestIDLogFilter, RequestIDMiddleware
from cashcard.repositories import InMemoryCashCardStore
from cashcard.routes import cash_cards, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s

    request_id is filled in by RequestIDLogFilter; lines written outside a
    request show "-".
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Startup sequence:
        1. Setup logging
        2. Create tables when DB_CREATE_TABLES is set (SQL backend only)
        3. Log successful startup

    Shutdown sequence:
        1. Dispose database engine (close all pooled connections)
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("CashCard service %s starting up (store=%s)", __version__, settings.store_backend)

    if settings.store_backend == "sql" and settings.db_create_tables:
        await create_tables()
        logger.info("Database tables ensured")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("CashCard service shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _empty(status_code: int) -> Response:
    # Error responses carry no body; the status code is the whole contract
    return Response(status_code=status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        RequestValidationError → 400 (bad path id, query value, or JSON body)
        ValidationError        → 400 (bad sort field, page, or size)
        NotFoundError          → 404
        DatabaseError          → 500
        Exception (fallback)   → 500 (only for failures outside
                                 RequestLoggingMiddleware, which answers
                                 everything raised beneath it)

    Details are logged server-side only; every response body is empty.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("Request validation failed on %s %s: %s", request.method, request.url.path, exc.errors())
        return _empty(status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error: %s | Context: %s", exc.message, exc.context)
        return _empty(status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.info("Not found: %s", exc.message)
        return _empty(status.HTTP_404_NOT_FOUND)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("Database error: %s | Context: %s", exc.message, exc.context)
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=exc)
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Each call returns an independent app; with STORE_BACKEND=memory that
    includes a fresh, empty in-memory store.
    """
    app = FastAPI(
        title="CashCard API",
        description="Create, read, update, delete and list cash cards.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    if settings.store_backend == "memory":
        app.state.memory_store = InMemoryCashCardStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "Location",
            "X-Request-ID",
            "X-Total-Count",
        ],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(cash_cards.router)
    app.include_router(health.router)

    return app


# uvicorn expects `cashcard.main:app` to be importable
app = create_app()
