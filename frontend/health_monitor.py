# =============================================================================
# frontend/health_monitor.py - Periodic Backend Health Poller
# =============================================================================
# Polls the backend's /health endpoint on a fixed interval and keeps the
# latest snapshot for the UI.
#
# Usage:
#   monitor = HealthMonitor(client, interval=30, timeout=5)
#   monitor.start()      # on UI startup
#   monitor.latest       # {"status": "UP", ...} or {"status": "DOWN", "error": ...}
#   await monitor.stop() # on UI shutdown
# =============================================================================

import asyncio
import logging
from typing import Any

from frontend.api_client import BackendClient, BackendError

logger = logging.getLogger(__name__)

DOWN = "DOWN"
UNEXPECTED_ERROR = "Health check failed"


class HealthMonitor:
    """
    Cancellable periodic health check.

    A failed poll, expected or not, is recorded as a DOWN snapshot and
    polling continues until stop().
    """

    def __init__(self, client: BackendClient, interval: float = 30.0, timeout: float = 5.0):
        self.client = client
        self.interval = interval
        self.timeout = timeout
        self.latest: dict[str, Any] | None = None
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def check(self) -> dict[str, Any]:
        """Poll the backend once and store the result."""
        logger.debug("Checking backend health...")
        try:
            snapshot = await self.client.health(timeout=self.timeout)
            logger.debug(f"Backend is healthy: {snapshot}")
        except BackendError as e:
            logger.error(f"Backend health check failed: {e.message}")
            snapshot = {"status": DOWN, "error": e.message}

        self.latest = snapshot
        return snapshot

    async def _run(self) -> None:
        while True:
            try:
                await self.check()
            except Exception as e:
                logger.exception(f"Unexpected error during backend health check: {e}")
                self.latest = {"status": DOWN, "error": UNEXPECTED_ERROR}
            await asyncio.sleep(self.interval)

    def start(self) -> None:
        """Start polling. The first check runs immediately."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info(f"Backend health monitor started (every {self.interval}s)")

    async def stop(self) -> None:
        """Cancel polling and wait for the task to finish."""
        if self._task is None:
            return

        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Backend health monitor stopped")
