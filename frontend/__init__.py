# =============================================================================
# frontend/ - Web UI Package
# =============================================================================
# Server-rendered UI for the Age Calculator backend:
# - main.py: FastAPI app with Jinja2 pages and HTMX partials
# - api_client.py: httpx client for the backend REST API
# - health_monitor.py: Periodic backend health poller
# - config.py: Frontend settings
# =============================================================================
