# =============================================================================
# core/services/metrics_service.py - Request Counter & Process Statistics
# =============================================================================
# Process-wide counters read by GET /metrics:
# - RequestCounter: incremented once per inbound HTTP request
# - ProcessStats: uptime and memory usage of the running process (psutil)
# =============================================================================

import threading
import time

import psutil

from core.models.health import MemoryUsage


class RequestCounter:
    """Monotonically increasing request count. Starts at zero, never reset."""

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Count one request and return the new total."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class ProcessStats:
    """Uptime and memory snapshot for the current process."""

    def __init__(self, process: psutil.Process | None = None):
        self._process = process or psutil.Process()

    def uptime(self) -> float:
        """Seconds since the operating system started this process."""
        return max(0.0, time.time() - self._process.create_time())

    def memory(self) -> MemoryUsage:
        info = self._process.memory_info()
        return MemoryUsage(rss=info.rss, vms=info.vms)
