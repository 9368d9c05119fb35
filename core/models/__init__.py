# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - person.py: Person record and the person API request/response bodies
# - health.py: Liveness, readiness and metrics response bodies
#
# These models define the "contract" between API and clients.
# =============================================================================

from .base import CamelModel

# -----------------------------------------------------------------------------
# Person Models
# -----------------------------------------------------------------------------
from .person import (
    ClearResponse,
    Person,
    PersonCreate,
    PersonEnvelope,
    PersonListResponse,
    PersonMessageEnvelope,
)

# -----------------------------------------------------------------------------
# Health Models - Orchestration probes
# -----------------------------------------------------------------------------
from .health import (
    LivenessResponse,
    MemoryUsage,
    MetricsResponse,
    ProbeStatus,
    ReadinessResponse,
)

__all__ = [
    "CamelModel",
    # Person
    "ClearResponse",
    "Person",
    "PersonCreate",
    "PersonEnvelope",
    "PersonListResponse",
    "PersonMessageEnvelope",
    # Health
    "LivenessResponse",
    "MemoryUsage",
    "MetricsResponse",
    "ProbeStatus",
    "ReadinessResponse",
]
