# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - age.py: Calendar age calculation (years, months, days)
# - utils.py: Shared helpers (timestamps)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.age import Age, FutureBirthDateError, calculate_age, format_age
from lib.utils import utc_now_iso

__all__ = [
    # Age
    "Age",
    "FutureBirthDateError",
    "calculate_age",
    "format_age",
    # Utils
    "utc_now_iso",
]
