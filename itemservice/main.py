"""
Item Service — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns its own ItemStore.
Who:   Called by uvicorn (uvicorn itemservice.main:app), by
       `python -m itemservice`, and by the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Req ID      │→│ Logging  │→│  CORS           │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ /items, /items/{id}      │ │ GET /health     │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ InvalidInput→400 │ NotFound→404 │ other→500  │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  State: app.state.store (ItemStore)                 │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from itemservice import __version__
from itemservice.config import Settings, settings
from itemservice.exceptions import InternalError, InvalidInputError, NotFoundError
from itemservice.middleware.logging import RequestLoggingMiddleware
from itemservice.middleware.request_id import RequestIDMiddleware, request_id_var
from itemservice.routes import health, items
from itemservice.services.item_store import ItemStore

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout so container runtimes capture it.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup; report what was lost on shutdown."""
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Item Service %s starting up (%s)", __version__, app_settings.app_env)
    logger.info("Server ready at http://%s:%d", app_settings.host, app_settings.port)
    logger.info("=" * 60)

    yield

    # Items live in memory only
    logger.info(
        "Item Service shutting down; discarding %d in-memory item(s)",
        app.state.store.count(),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    # The catch-all handler runs outside the middleware stack, where the
    # ContextVar has already been reset; request.state still has the ID.
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def _error_body(error: str, message: str, request: Request) -> dict:
    return {"error": error, "message": message, "request_id": _request_id(request)}


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers: the one place errors become responses.

    Handler hierarchy:
        RequestValidationError  → 400 (missing/malformed body, wrong field type)
        InvalidInputError       → 400 (bad id, empty name)
        NotFoundError           → 404
        InternalError           → 500, generic message, context logged
        Exception (fallback)    → 500, generic message, traceback logged

    Exception handlers never put internal details in the response body.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        message = _describe_validation_errors(exc)
        logger.warning("[%s] Request validation failed: %s", _request_id(request), message)
        return JSONResponse(
            status_code=400,
            content=_error_body("invalid_input", message, request),
        )

    @app.exception_handler(InvalidInputError)
    async def handle_invalid_input(request: Request, exc: InvalidInputError):
        logger.warning("[%s] Invalid input: %s", _request_id(request), exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("invalid_input", exc.message, request),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message, request),
        )

    @app.exception_handler(InternalError)
    async def handle_internal_error(request: Request, exc: InternalError):
        logger.error(
            "[%s] Internal error: %s | Context: %s",
            _request_id(request),
            exc.message,
            exc.context,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_error", GENERIC_ERROR_MESSAGE, request),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            _request_id(request),
            str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_server_error", GENERIC_ERROR_MESSAGE, request),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Configuration to run with. Defaults to the settings
            loaded from the environment by itemservice.config.

    Returns:
        A FastAPI instance with a fresh, empty ItemStore in app.state.store.
    """
    app_settings = app_settings or settings
    docs_enabled = not app_settings.is_production

    app = FastAPI(
        title="Item Service API",
        description="Minimal CRUD service over a concurrency-safe in-memory item store.",
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = ItemStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added runs first)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(items.router)
    app.include_router(health.router)

    return app


app = create_app()
