"""
Trainer API — FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn trainer_api.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                       FastAPI App                        │
    │                                                          │
    │  Middleware:  Request ID → Logging → GZip → CORS         │
    │                                                          │
    │  Routes:                                                 │
    │    GET/POST /trainer      GET/DELETE /trainer/{id}       │
    │    GET /pokemon           GET /pokemon-abilities/{id}    │
    │    GET /health                                           │
    │                                                          │
    │  Exception Handlers (empty bodies):                      │
    │    RequestValidationError → 400 / 422                    │
    │    NotFoundError → 404    QueryError / RowMissing → 500  │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the active settings
    Shutdown: dispose the database engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from sqlalchemy.engine import make_url

from trainer_api import __version__, envelope
from trainer_api.config import settings
from trainer_api.database import dispose_engine
from trainer_api.exceptions import TrainerApiError
from trainer_api.middleware.logging import RequestLoggingMiddleware
from trainer_api.middleware.request_id import RequestIDMiddleware, request_id_var
from trainer_api.routes import health, pokemon, trainers

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries log every operation at DEBUG/INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Trainer API %s starting up...", __version__)
    logger.info(
        "Database: %s",
        make_url(settings.database_url).render_as_string(hide_password=True),
    )
    logger.info(
        "Assembly strategy: %s, strict not-found: %s",
        settings.assembly_strategy,
        settings.strict_not_found,
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Trainer API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions onto response envelope variants.

    Handler hierarchy:
        RequestValidationError  → 400 (path) / 422 (body), before any query
        NotFoundError           → 404 (strict_not_found only)
        QueryError              → 500
        RelatedRowMissingError  → 500
        Exception (fallback)    → 500

    No handler returns a body; causes and context are logged server-side.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning(
            "[%s] Rejected %s %s: %s", rid, request.method, request.url.path, exc.errors()
        )
        return envelope.client_error(exc.errors())

    @app.exception_handler(TrainerApiError)
    async def handle_app_error(request: Request, exc: TrainerApiError):
        rid = request_id_var.get("")
        response = envelope.for_exception(exc)
        if response.status_code >= 500:
            logger.error(
                "[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context
            )
        else:
            logger.info("[%s] %s", rid, exc.message)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return envelope.error()


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Trainer API",
        description=(
            "Read/write access to trainers, pokemon, regions and abilities, "
            "with nested roster and ability assembly."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(trainers.router)
    app.include_router(pokemon.router)
    app.include_router(health.router)

    return app


app = create_app()
