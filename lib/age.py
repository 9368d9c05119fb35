# =============================================================================
# lib/age.py - Calendar Age Calculation
# =============================================================================
# Computes an age as (years, months, days) using calendar borrow arithmetic.
#
# Usage:
#   from lib.age import calculate_age
#   age = calculate_age("2000-01-15", "2024-03-10")  # Age(years=24, months=1, days=23)
# =============================================================================

import calendar
from datetime import date, datetime
from typing import NamedTuple


class Age(NamedTuple):
    """Age broken down into calendar components."""
    years: int
    months: int
    days: int


class FutureBirthDateError(ValueError):
    """Raised when the birth date lies after the reference date."""

    def __init__(self, birth_date: date, reference_date: date):
        super().__init__(
            f"Birth date {birth_date.isoformat()} is after reference date "
            f"{reference_date.isoformat()}"
        )
        self.birth_date = birth_date
        self.reference_date = reference_date


def to_date(value: date | datetime | str) -> date:
    """
    Coerce a date-like value to a date.

    Accepts date objects, datetimes (date part is used) and ISO strings
    such as "2000-01-15" or "2000-01-15T00:00:00Z". The whole string must
    parse; trailing text raises ValueError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if "T" in value or " " in value:
        # Python < 3.11 rejects the "Z" UTC suffix
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return date.fromisoformat(value)


def days_in_previous_month(reference: date, months_back: int = 1) -> int:
    """Day count of the month `months_back` months before reference's month."""
    index = reference.year * 12 + (reference.month - 1) - months_back
    year, month = divmod(index, 12)
    return calendar.monthrange(year, month + 1)[1]


def calculate_age(
    birth_date: date | datetime | str,
    reference_date: date | datetime | str | None = None,
) -> Age:
    """
    Calculate the age at reference_date of someone born on birth_date.

    Differences are taken field by field. A negative day difference borrows
    the length of the month before the reference month, and a negative month
    difference borrows a year.

    Args:
        birth_date: Date of birth
        reference_date: Date to measure at (defaults to today)

    Returns:
        Age(years, months, days), all non-negative

    Raises:
        FutureBirthDateError: If birth_date is after reference_date
    """
    birth = to_date(birth_date)
    reference = to_date(reference_date) if reference_date is not None else date.today()

    if birth > reference:
        raise FutureBirthDateError(birth, reference)

    years = reference.year - birth.year
    months = reference.month - birth.month
    days = reference.day - birth.day

    # A short preceding month (e.g. February after a 31st birthday) can leave
    # days negative after one borrow; keep borrowing from earlier months.
    months_back = 0
    while days < 0:
        months_back += 1
        months -= 1
        days += days_in_previous_month(reference, months_back)

    if months < 0:
        years -= 1
        months += 12

    return Age(years=years, months=months, days=days)


def format_age(age: Age) -> str:
    """Render an age as "24 years, 1 months, 23 days"."""
    return f"{age.years} years, {age.months} months, {age.days} days"
