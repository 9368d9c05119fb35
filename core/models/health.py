# =============================================================================
# core/models/health.py - Health, Readiness & Metrics Schemas
# =============================================================================
# Response bodies for the orchestration probes:
# - LivenessResponse: GET /health
# - ReadinessResponse: GET /ready
# - MetricsResponse: GET /metrics
# =============================================================================

from enum import Enum

from pydantic import Field

from .base import CamelModel


class ProbeStatus(str, Enum):
    """Status values reported by the probes."""
    UP = "UP"
    READY = "READY"
    NOT_READY = "NOT_READY"


class LivenessResponse(CamelModel):
    """Liveness probe response."""
    status: ProbeStatus = ProbeStatus.UP
    service: str
    timestamp: str


class ReadinessResponse(CamelModel):
    """
    Readiness probe response.

    The envelope is the same whether or not the checks pass; only
    `status` and the HTTP status code change.
    """
    status: ProbeStatus
    service: str
    persons_count: int = Field(..., ge=0)
    timestamp: str


class MemoryUsage(CamelModel):
    """Process memory snapshot in bytes."""
    rss: int = Field(..., description="Resident set size")
    vms: int = Field(..., description="Virtual memory size")


class MetricsResponse(CamelModel):
    """Metrics endpoint response."""
    total_persons: int = Field(..., ge=0)
    total_requests: int = Field(..., ge=0)
    uptime: float = Field(..., ge=0, description="Seconds since process start")
    memory: MemoryUsage
    timestamp: str
