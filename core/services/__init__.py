# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .person_store import PersonStore
from .metrics_service import ProcessStats, RequestCounter
from .health_service import ReadinessResult, ReadinessService

__all__ = [
    "PersonStore",
    "ProcessStats",
    "RequestCounter",
    "ReadinessResult",
    "ReadinessService",
]
