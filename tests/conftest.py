# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds a fresh backend app (and therefore a fresh store) per test
# - Provides a frontend wired to the in-process backend via httpx.ASGITransport
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("SERVICE_NAME", "age-calculator-backend")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from frontend.api_client import BackendClient
from frontend.config import FrontendSettings
from frontend.main import create_frontend_app


# =============================================================================
# Backend Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Backend settings independent of the developer's .env."""
    return Settings(_env_file=None, SERVICE_NAME="age-calculator-backend")


@pytest.fixture
def backend_app(settings):
    """A fresh backend application with an empty store."""
    return create_app(settings)


@pytest.fixture
def store(backend_app):
    """The person store owned by backend_app."""
    return backend_app.state.store


@pytest.fixture
def client(backend_app):
    """
    HTTP client for the backend.

    Server exceptions are turned into 500 responses, as they are in
    production, instead of being re-raised into the test.
    """
    return TestClient(backend_app, raise_server_exceptions=False)


@pytest.fixture
def sample_person_payload():
    """Valid body for POST /api/persons."""
    return {"name": "Ada Lovelace", "birthDate": "1815-12-10"}


# =============================================================================
# Frontend Fixtures
# =============================================================================

@pytest.fixture
def frontend_settings():
    return FrontendSettings(
        _env_file=None,
        API_URL="http://backend",
        HEALTH_CHECK_INTERVAL=30,
        HEALTH_CHECK_TIMEOUT=5,
    )


@pytest.fixture
def backend_client(backend_app):
    """BackendClient that talks to backend_app in-process."""
    return BackendClient(
        "http://backend",
        transport=httpx.ASGITransport(app=backend_app),
    )


@pytest.fixture
def frontend_app(frontend_settings, backend_client):
    return create_frontend_app(settings=frontend_settings, client=backend_client)


@pytest.fixture
def frontend_client(frontend_app):
    """HTTP client for the UI. The lifespan (health monitor) is not started."""
    return TestClient(frontend_app, raise_server_exceptions=False)
