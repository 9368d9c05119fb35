# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for per-application resources.
# The resources are created by create_app() and stored on app.state; these
# functions hand them to route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services import PersonStore, ProcessStats, ReadinessService, RequestCounter


def get_store(request: Request) -> PersonStore:
    """Get the application's person store."""
    return request.app.state.store


def get_request_counter(request: Request) -> RequestCounter:
    return request.app.state.request_counter


def get_process_stats(request: Request) -> ProcessStats:
    return request.app.state.process_stats


def get_readiness(request: Request) -> ReadinessService:
    return request.app.state.readiness


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


# Type aliases for dependency injection
StoreDep = Annotated[PersonStore, Depends(get_store)]
RequestCounterDep = Annotated[RequestCounter, Depends(get_request_counter)]
ProcessStatsDep = Annotated[ProcessStats, Depends(get_process_stats)]
ReadinessDep = Annotated[ReadinessService, Depends(get_readiness)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
