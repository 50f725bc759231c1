"""Age and timing helpers.

All functions take ``now`` explicitly so the same instant can be shared by
every calculation inside one report.
"""

from __future__ import annotations

from datetime import date, datetime, time

DAYS_PER_YEAR = 365.25
SECONDS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60


def _birth_instant(date_of_birth: date, now: datetime) -> datetime:
    # midnight on the birth date, in the same timezone as ``now``
    return datetime.combine(date_of_birth, time.min, tzinfo=now.tzinfo)


def current_age(date_of_birth: date, now: datetime) -> float:
    """Age in (fractional) years, using an average year of 365.25 days."""
    elapsed = now - _birth_instant(date_of_birth, now)
    return elapsed.total_seconds() / SECONDS_PER_YEAR


def years_until_target_age(date_of_birth: date, target_age: int, now: datetime) -> float:
    """Years left until ``target_age``; never negative."""
    return max(0.0, target_age - current_age(date_of_birth, now))


def target_calendar_year(date_of_birth: date, target_age: int) -> int:
    # month and day are ignored on purpose
    return date_of_birth.year + target_age


__all__ = [
    "DAYS_PER_YEAR",
    "current_age",
    "years_until_target_age",
    "target_calendar_year",
]
