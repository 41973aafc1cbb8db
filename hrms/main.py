"""
HRMS Backend - FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn hrms.main:app),
       or by `python -m hrms`.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐         │
    │  │ Req ID   │→│ Logging │→│ GZip │→│ CORS │         │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘         │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────────┐ ┌──────────────┐  │
    │  │ GET/POST /employee           │ │ GET /health  │  │
    │  │ PUT/DELETE /employee/{id}    │ └──────────────┘  │
    │  └──────────────────────────────┘                   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Database→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Build the MongoDB handle (unless one was injected) and ping it
    3. Log startup complete

    Shutdown:
    1. Close the MongoDB client if this app created it
    2. Log shutdown complete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from hrms import __version__
from hrms.config import settings
from hrms.database import MongoInstance
from hrms.exceptions import (
    DatabaseError,
    HRMSError,
    NotFoundError,
    ValidationError,
)
from hrms.middleware.logging import RequestLoggingMiddleware
from hrms.middleware.request_id import RequestIDMiddleware, request_id_var
from hrms.routes import employees, health
from hrms.schemas.employee import APIResponse

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Both log every request/heartbeat at INFO/DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage the MongoDB handle across the application's lifetime.

    If create_app() was given a handle, it is used as-is and left open at
    shutdown; otherwise one is built from settings, verified with a ping
    (startup fails if the store is unreachable) and closed at shutdown.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("HRMS Backend %s starting up...", __version__)

    owns_handle = app.state.mongo is None
    if owns_handle:
        mongo = MongoInstance.from_settings(settings)
        try:
            await mongo.verify()
        except DatabaseError as e:
            logger.error("Could not connect to MongoDB: %s", e.message)
            await mongo.close()
            raise
        app.state.mongo = mongo

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("HRMS Backend shutting down...")
    if owns_handle:
        await app.state.mongo.close()
        app.state.mongo = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse(status=0, message=message).to_content(),
    )


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Render FastAPI's validation errors as one line, e.g. 'body.age: Field required'."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    if not parts:
        return "Bad Request"
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers that answer with the envelope.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (FastAPI default is 422)
        NotFoundError           → 404 Not Found
        DatabaseError           → 500, message is the driver's error text
        HRMSError (base)        → 500
        Exception (fallback)    → 500, generic message, stack trace logged
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return _envelope(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        message = describe_validation_errors(exc)
        logger.warning("[%s] Unparsable request: %s", rid, message)
        return _envelope(400, message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] Not found: %s", rid, exc.context)
        return _envelope(404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _envelope(500, exc.message)

    @app.exception_handler(HRMSError)
    async def handle_app_error(request: Request, exc: HRMSError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return _envelope(500, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _envelope(500, "An unexpected error occurred")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(mongo: Optional[MongoInstance] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        mongo: Pre-built database handle. When omitted, the lifespan builds
               one from settings at startup.
    """
    app = FastAPI(
        title="HRMS Employee API",
        description="CRUD operations over employee records stored in MongoDB.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.mongo = mongo

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in reverse order of addition: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(employees.router)
    app.include_router(health.router)

    return app


app = create_app()
