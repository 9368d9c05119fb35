# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides liveness, readiness and metrics endpoints for container
# orchestration and monitoring.
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import (
    ProcessStatsDep,
    ReadinessDep,
    RequestCounterDep,
    SettingsDep,
    StoreDep,
)
from core.models.health import (
    LivenessResponse,
    MetricsResponse,
    ProbeStatus,
    ReadinessResponse,
)
from lib.utils import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=LivenessResponse)
async def liveness_check(settings: SettingsDep):
    """
    Liveness check endpoint.

    Returns whether the service process is alive. Performs no dependency
    checks and never fails.
    """
    logger.debug("Health check - liveness probe")
    return LivenessResponse(
        status=ProbeStatus.UP,
        service=settings.SERVICE_NAME,
        timestamp=utc_now_iso(),
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(
    settings: SettingsDep,
    store: StoreDep,
    readiness: ReadinessDep,
):
    """
    Readiness check endpoint.

    Runs the registered readiness checks. Returns 200 with status READY when
    all pass, otherwise 503 with status NOT_READY and the same body shape.
    """
    logger.debug("Readiness check")
    result = readiness.run()

    body = ReadinessResponse(
        status=ProbeStatus.READY if result.ready else ProbeStatus.NOT_READY,
        service=settings.SERVICE_NAME,
        persons_count=store.count(),
        timestamp=utc_now_iso(),
    )

    if not result.ready:
        return JSONResponse(
            status_code=503,
            content=body.model_dump(mode="json", by_alias=True),
        )
    return body


@router.get("/metrics", response_model=MetricsResponse)
async def metrics(
    store: StoreDep,
    counter: RequestCounterDep,
    stats: ProcessStatsDep,
):
    """
    Metrics endpoint.

    Reports store size, total request count, uptime in seconds and a
    process memory snapshot.
    """
    logger.debug("Metrics requested")
    return MetricsResponse(
        total_persons=store.count(),
        total_requests=counter.value,
        uptime=stats.uptime(),
        memory=stats.memory(),
        timestamp=utc_now_iso(),
    )
