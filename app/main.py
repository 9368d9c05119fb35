# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Age Calculator backend.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   age-calculator-backend            # console script, see run()
# =============================================================================

import logging
import platform
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import APP_VERSION, Settings, settings as default_settings
from app.exceptions import (
    AgeCalculatorException,
    age_calculator_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import health, persons
from core.services import PersonStore, ProcessStats, ReadinessService, RequestCounter

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: log the listening configuration
    - Shutdown: runs after the server has stopped accepting connections and
      in-flight requests have completed
    """
    app_settings: Settings = app.state.settings
    logger.info(
        f"Server started on port {app_settings.API_PORT} "
        f"(python {platform.python_version()}, environment {app_settings.ENVIRONMENT})"
    )

    yield

    logger.info(
        f"Server closed after {app.state.request_counter.value} requests, "
        f"{app.state.store.count()} persons discarded"
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the backend application.

    Each call creates its own PersonStore, RequestCounter, ProcessStats and
    ReadinessService and stores them on app.state, so separate apps (e.g.
    one per test) never share state.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Age Calculator API",
        description="""
## Person records with computed ages

A small in-memory CRUD service. Persons are kept in insertion order and are
lost on restart.

| Endpoint | Purpose |
|----------|---------|
| `POST /api/persons` | Add a person (`name`, `birthDate`) |
| `GET /api/persons` | List persons |
| `GET /api/persons/{id}` | Get one person |
| `DELETE /api/persons/{id}` | Delete one person |
| `DELETE /api/persons` | Delete everyone |
| `GET /health`, `/ready`, `/metrics` | Orchestration probes |
""",
        version=APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Persons",
                "description": "Create, list and delete person records",
            },
            {
                "name": "Health",
                "description": "Liveness, readiness and metrics",
            },
        ],
    )

    app.state.settings = settings
    app.state.store = PersonStore()
    app.state.request_counter = RequestCounter()
    app.state.process_stats = ProcessStats()
    app.state.readiness = ReadinessService()
    app.state.readiness.register("store", lambda: app.state.store.count() >= 0)

    # =========================================================================
    # Middleware
    # =========================================================================

    # CORS middleware - allows cross-origin requests from the frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def count_and_log_requests(request: Request, call_next):
        """Count every inbound request and write an access log line."""
        app.state.request_counter.increment()
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f}ms)"
        )
        return response

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(AgeCalculatorException, age_calculator_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    # Probe endpoints live at the root for orchestrators
    app.include_router(
        health.router,
        tags=["Health"]
    )

    # Person CRUD endpoints
    app.include_router(
        persons.router,
        prefix="/api/persons",
        tags=["Persons"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Age Calculator API",
            "version": APP_VERSION,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


def run() -> None:
    """
    Serve the backend with uvicorn.

    uvicorn handles SIGTERM/SIGINT: it stops accepting connections, waits up
    to GRACEFUL_SHUTDOWN_TIMEOUT seconds for in-flight requests, then runs
    the lifespan shutdown.
    """
    uvicorn.run(
        "app.main:app",
        host=default_settings.API_HOST,
        port=default_settings.API_PORT,
        timeout_graceful_shutdown=default_settings.GRACEFUL_SHUTDOWN_TIMEOUT,
        log_level="debug" if default_settings.DEBUG else "info",
    )


if __name__ == "__main__":
    run()
