"""
BirdAPI: FastAPI Application Factory
=====================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() returns a configured FastAPI instance. The store is
       built once here and attached to app.state, so handlers receive it
       through dependency injection instead of a module-level variable.
Who:   Called by uvicorn (`birdapi.main:app`) and by the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────────────────────┐                   │
    │  │ Access (request ID + log)    │                   │
    │  └──────────────────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌──────────┐ ┌───────────┐ ┌────────┐ │
    │  │GET /hello│ │ GET/POST │ │ /assets/* │ │/health │ │
    │  │          │ │  /bird   │ │ (static)  │ │        │ │
    │  └──────────┘ └──────────┘ └───────────┘ └────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ FormParseError→500 │ DatabaseError→500 │ *→500│  │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create the `birds` table for the SQL store
              when DB_AUTO_CREATE is set, log readiness.
    Shutdown: close the store (disposes the engine for the SQL store).
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from birdapi import __version__
from birdapi.config import Settings, settings as default_settings
from birdapi.exceptions import BirdAPIError, DatabaseError, FormParseError
from birdapi.middleware.access import AccessLogMiddleware, request_id_var
from birdapi.routes import birds, health, hello
from birdapi.stores import BirdStore, SqlBirdStore, build_store

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Called once from the lifespan before anything else logs. Handlers go
    to stdout so container runtimes capture them.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # Override any existing logging config
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    store: BirdStore = app.state.store

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("BirdAPI starting up (store=%s)", store.name)

    if isinstance(store, SqlBirdStore) and app_settings.db_auto_create:
        try:
            await store.create_schema()
        except Exception as e:
            # Keep serving so /health can report the broken database
            logger.error("Could not create database schema: %s", str(e))

    logger.info(
        "Server ready at http://%s:%d",
        app_settings.backend_host,
        app_settings.backend_port,
    )

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("BirdAPI shutting down...")
    await store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler hierarchy:
        FormParseError       → 500 (malformed form body)
        DatabaseError        → 500 (store failure, generic message)
        BirdAPIError (base)  → 500
        Exception (fallback) → 500

    Handlers NEVER expose driver errors or SQL in the response.
    """

    @app.exception_handler(FormParseError)
    async def handle_form_parse_error(request: Request, exc: FormParseError):
        rid = request_id_var.get("")
        logger.error("[%s] Form parse error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "form_parse_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(BirdAPIError)
    async def handle_app_error(request: Request, exc: BirdAPIError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace is logged server-side only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[BirdStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the environment-loaded
                  singleton.
        store:    Store to serve; defaults to the variant STORE_BACKEND
                  selects. Tests pass their own.
    """
    settings = settings or default_settings
    if store is None:
        store = build_store(settings)

    app = FastAPI(
        title="BirdAPI",
        description="Record bird species and descriptions, and list them back as JSON.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(AccessLogMiddleware)

    register_exception_handlers(app)

    app.include_router(hello.router)
    app.include_router(birds.router)
    app.include_router(health.router)

    # "/assets/index.html" is looked up as "index.html" inside ASSETS_DIR;
    # html=True serves index.html for the bare "/assets/" path.
    app.mount(
        settings.assets_url.rstrip("/"),
        StaticFiles(directory=settings.assets_dir, html=True, check_dir=False),
        name="assets",
    )

    return app


# uvicorn expects `birdapi.main:app` to be importable
app = create_app()
