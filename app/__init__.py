# =============================================================================
# app/ - FastAPI Application Package (backend)
# =============================================================================
# This package contains the backend web application:
# - main.py: App factory, middleware setup, error handlers, runner
# - config.py: Environment variable loading and settings
# - exceptions.py: Error kinds and the central exception handlers
# - dependencies.py: Per-app resources injected into handlers
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
