# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the domain logic of the backend:
# - models/: Pydantic schemas for persons and probe responses
# - services/: Person store, request counter, process stats, readiness checks
#
# Route handlers in app/ stay thin and delegate to these services.
# =============================================================================
