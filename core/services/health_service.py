# =============================================================================
# core/services/health_service.py - Readiness Checks
# =============================================================================
# Runs the named checks behind GET /ready.
#
# Usage:
#   readiness = ReadinessService()
#   readiness.register("store", lambda: store.count() >= 0)
#   result = readiness.run()
#   result.ready  # True if every check passed
#
# New dependencies (e.g. a downstream datastore) are added by registering a
# check; the readiness response envelope does not change.
# =============================================================================

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ReadinessCheck = Callable[[], bool]


@dataclass
class ReadinessResult:
    """Outcome of one readiness evaluation."""
    checks: dict[str, bool] = field(default_factory=dict)

    @property
    def ready(self) -> bool:
        return all(self.checks.values())

    @property
    def failed(self) -> list[str]:
        return [name for name, passed in self.checks.items() if not passed]


class ReadinessService:
    """Registry of named readiness checks."""

    def __init__(self):
        self._checks: dict[str, ReadinessCheck] = {}

    def register(self, name: str, check: ReadinessCheck) -> None:
        """Add or replace a check. A check returns True when healthy."""
        self._checks[name] = check

    @property
    def check_names(self) -> list[str]:
        return list(self._checks)

    def run(self) -> ReadinessResult:
        """
        Evaluate every registered check.

        A check that raises counts as failed; the probe itself never errors.
        """
        result = ReadinessResult()
        for name, check in self._checks.items():
            try:
                result.checks[name] = bool(check())
            except Exception as e:
                logger.warning(f"Readiness check '{name}' raised: {e}")
                result.checks[name] = False

        if not result.ready:
            logger.warning(f"Readiness checks failed: {result.failed}")
        return result
