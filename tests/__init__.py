# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Age Calculator:
# - test_age.py: Calendar age calculation
# - test_models.py: Pydantic model validation and serialization
# - test_person_store.py: In-memory store, including concurrent access
# - test_persons_api.py / test_health_api.py: Backend endpoints
# - test_frontend.py: Backend client, health monitor and UI routes
#
# Run tests with: pytest
# =============================================================================
