from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from math import isclose

from unicost.core.timing import current_age, target_calendar_year, years_until_target_age


def test_current_age_uses_average_year_length(subject, now):
    assert current_age(subject.date_of_birth, now) == 8.0


def test_current_age_is_fractional():
    dob = date(2020, 1, 1)
    now = datetime(2020, 1, 1) + timedelta(days=365.25 / 2)
    assert isclose(current_age(dob, now), 0.5, rel_tol=1e-12)


def test_current_age_accepts_aware_now():
    dob = date(2016, 1, 1)
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert current_age(dob, now) == 8.0


def test_years_until_target_age(subject, now):
    assert years_until_target_age(subject.date_of_birth, 18, now) == 10.0


def test_years_until_target_age_never_negative():
    now = datetime(2024, 6, 1)
    assert years_until_target_age(date(2000, 1, 1), 18, now) == 0.0
    assert years_until_target_age(date(2006, 6, 1), 18, datetime(2024, 6, 1)) == 0.0


def test_target_calendar_year_ignores_month_and_day():
    assert target_calendar_year(date(2016, 1, 1), 18) == 2034
    assert target_calendar_year(date(2016, 12, 31), 18) == 2034
