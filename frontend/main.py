# =============================================================================
# frontend/main.py - Web UI Application
# =============================================================================
# Server-rendered pages (FastAPI + Jinja2 + HTMX) backed by the backend REST API:
#   - person list with computed ages (refresh via HTMX partial)
#   - add-person form
#   - delete buttons (with confirmation)
#   - backend health panel, re-rendered by HTMX polling
#
# The backend health snapshot comes from a HealthMonitor task started in the
# lifespan and cancelled on shutdown.
#
# Usage:
#   uvicorn frontend.main:app --port 3000
# =============================================================================

import logging
from contextlib import asynccontextmanager
from datetime import date, datetime
from pathlib import Path
from typing import Any

import uvicorn
from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from core.models.person import Person
from frontend.api_client import BackendClient, BackendError
from frontend.config import FrontendSettings, frontend_settings
from frontend.health_monitor import HealthMonitor
from lib.age import FutureBirthDateError, calculate_age, format_age

logging.basicConfig(
    level=logging.DEBUG if frontend_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
SERVICE_NAME = "age-calculator-frontend"


# =============================================================================
# View helpers
# =============================================================================


def format_long_date(value: date) -> str:
    """Format a date as "January 15, 2000"."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def person_view(person: Person, today: date | None = None) -> dict[str, Any]:
    """Template fields for one person card."""
    try:
        age = format_age(calculate_age(person.birth_date, today))
    except FutureBirthDateError:
        age = "Age unavailable"

    created: datetime = person.created_at
    return {
        "id": person.id,
        "name": person.name,
        "birth_date": format_long_date(person.birth_date),
        "age": age,
        "created_at": created.strftime("%Y-%m-%d %H:%M:%S %Z").strip(),
    }


def health_view(snapshot: dict[str, Any] | None) -> dict[str, Any] | None:
    """Template fields for the health panel, or None while the first check runs."""
    if snapshot is None:
        return None

    status = snapshot.get("status", "DOWN")
    return {
        "status": status,
        "healthy": status in ("UP", "READY"),
        "service": snapshot.get("service") or "Frontend",
        "timestamp": snapshot.get("timestamp") or datetime.now().isoformat(),
        "persons_count": snapshot.get("personsCount"),
        "error": snapshot.get("error"),
    }


# =============================================================================
# App factory
# =============================================================================


def create_frontend_app(
    settings: FrontendSettings | None = None,
    client: BackendClient | None = None,
) -> FastAPI:
    """Create the web UI application.

    A BackendClient for settings.API_URL is created unless one is given
    (tests pass one bound to an in-process backend).
    """
    settings = settings or frontend_settings
    client = client or BackendClient(settings.API_URL)
    monitor = HealthMonitor(
        client,
        interval=settings.HEALTH_CHECK_INTERVAL,
        timeout=settings.HEALTH_CHECK_TIMEOUT,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Frontend started on port {settings.FRONTEND_PORT} "
            f"(backend {client.base_url}, environment {settings.ENVIRONMENT})"
        )
        monitor.start()
        yield
        await monitor.stop()
        await client.aclose()
        logger.info("Frontend closed")

    app = FastAPI(
        title="Age Calculator",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    app.state.settings = settings
    app.state.client = client
    app.state.monitor = monitor

    # =========================================================================
    # Template helpers
    # =========================================================================

    async def _load_persons() -> tuple[list[dict[str, Any]], str | None]:
        try:
            persons = await client.list_persons()
        except BackendError as e:
            logger.error(f"Error fetching persons: {e.message}")
            return [], e.message
        today = date.today()
        return [person_view(p, today) for p in persons], None

    async def _render_page(
        request: Request,
        message: dict[str, str] | None = None,
        form: dict[str, str] | None = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        persons, load_error = await _load_persons()
        return templates.TemplateResponse(
            request=request,
            name="index.html",
            context={
                "persons": persons,
                "load_error": load_error,
                "health": health_view(monitor.latest),
                "health_interval": int(settings.HEALTH_CHECK_INTERVAL),
                "message": message,
                "form": form or {"name": "", "birthDate": ""},
                "max_birth_date": date.today().isoformat(),
            },
            status_code=status_code,
        )

    # =========================================================================
    # Page routes
    # =========================================================================

    @app.get("/", response_class=HTMLResponse)
    async def home_page(request: Request) -> HTMLResponse:
        return await _render_page(request)

    @app.post("/persons", response_class=HTMLResponse)
    async def add_person(
        request: Request,
        name: str = Form(default=""),
        birth_date: str = Form(default="", alias="birthDate"),
    ) -> HTMLResponse:
        form = {"name": name, "birthDate": birth_date}

        if not name.strip() or not birth_date:
            logger.warning("Form validation failed: empty fields")
            return await _render_page(
                request,
                message={"type": "error", "text": "Please fill in all fields"},
                form=form,
                status_code=400,
            )

        try:
            person = await client.create_person(name.strip(), birth_date)
        except BackendError as e:
            logger.error(f"Error adding person: {e.message}")
            return await _render_page(
                request,
                message={"type": "error", "text": e.message},
                form=form,
                status_code=e.status_code or 502,
            )

        logger.info(f"Person added successfully: {person.id}")
        return await _render_page(
            request,
            message={"type": "success", "text": "Person added successfully!"},
        )

    @app.post("/persons/{person_id}/delete", response_class=HTMLResponse)
    async def delete_person(request: Request, person_id: str):
        try:
            await client.delete_person(person_id)
        except BackendError as e:
            logger.error(f"Error deleting person {person_id}: {e.message}")
            return await _render_page(
                request,
                message={"type": "error", "text": "Failed to delete person"},
                status_code=e.status_code or 502,
            )

        logger.info(f"Person deleted successfully: {person_id}")
        return RedirectResponse(url="/", status_code=303)

    # =========================================================================
    # HTMX partial routes (return HTML fragments, not full pages)
    # =========================================================================

    @app.get("/partials/persons", response_class=HTMLResponse)
    async def partial_persons(request: Request) -> HTMLResponse:
        persons, load_error = await _load_persons()
        return templates.TemplateResponse(
            request=request,
            name="partials/person_list.html",
            context={"persons": persons, "load_error": load_error},
        )

    @app.get("/partials/health", response_class=HTMLResponse)
    async def partial_health(request: Request) -> HTMLResponse:
        return templates.TemplateResponse(
            request=request,
            name="partials/health_status.html",
            context={
                "health": health_view(monitor.latest),
                "health_interval": int(settings.HEALTH_CHECK_INTERVAL),
            },
        )

    # =========================================================================
    # JSON routes
    # =========================================================================

    @app.get("/backend-health")
    async def backend_health() -> JSONResponse:
        """Latest backend health snapshot; checks now if none exists yet."""
        snapshot = monitor.latest or await monitor.check()
        return JSONResponse(snapshot)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "UP", "service": SERVICE_NAME}

    return app


app = create_frontend_app()


def run() -> None:
    """Serve the web UI with uvicorn."""
    uvicorn.run(
        "frontend.main:app",
        host=frontend_settings.FRONTEND_HOST,
        port=frontend_settings.FRONTEND_PORT,
        log_level="debug" if frontend_settings.DEBUG else "info",
    )


if __name__ == "__main__":
    run()
