# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the backend and frontend.
# =============================================================================

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """
    Current UTC time as an ISO 8601 string.

    Example:
        utc_now_iso()  # "2024-01-15T10:30:00.123456+00:00"
    """
    return datetime.now(timezone.utc).isoformat()
