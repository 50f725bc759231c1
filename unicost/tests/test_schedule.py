from __future__ import annotations

from math import isclose

import pytest

from unicost.core.errors import ScheduleMismatch
from unicost.core.schedule import build_schedule, combine


def test_tuition_worked_example():
    """9250 at 2.5% with 10 years to go: year k costs 9250 * 1.025^(10 + k - 1)."""
    schedule = build_schedule(9250, 3, 10.0, 2034, 0.025)

    assert len(schedule.entries) == 3
    for offset, entry in enumerate(schedule.entries):
        assert entry.year_index == offset + 1
        assert entry.inflation_years == 10 + offset
        assert isclose(entry.amount, 9250 * 1.025 ** (10 + offset), rel_tol=1e-12)

    assert [entry.label for entry in schedule.entries] == ["2034/2035", "2035/2036", "2036/2037"]
    assert schedule.total == schedule.entries[0].amount + schedule.entries[1].amount + schedule.entries[2].amount
    assert schedule.start_year == 2034
    assert schedule.years_until_start == 10.0
    assert schedule.base_amount == 9250


def test_zero_inflation_keeps_every_year_at_base():
    schedule = build_schedule(9250, 4, 7.3, 2030, 0.0)

    for entry in schedule.entries:
        assert entry.amount == 9250
    assert schedule.total == 9250 * 4


def test_amounts_rise_with_positive_inflation():
    schedule = build_schedule(6680, 4, 3.6, 2027, 0.025)
    amounts = [entry.amount for entry in schedule.entries]
    assert amounts == sorted(amounts)
    assert amounts[0] < amounts[-1]


def test_combine_worked_example():
    tuition = build_schedule(9250, 3, 10.0, 2034, 0.025)
    living = build_schedule(15180, 3, 10.0, 2034, 0.025)

    combined = combine(tuition, living)

    assert len(combined.years) == 3
    assert combined.tuition_total == tuition.total
    assert combined.living_total == living.total
    assert combined.grand_total == tuition.total + living.total
    for year, tuition_year, living_year in zip(combined.years, tuition.entries, living.entries):
        assert year.label == tuition_year.label
        assert year.tuition == tuition_year.amount
        assert year.living == living_year.amount
        assert year.total == tuition_year.amount + living_year.amount


def test_combine_rejects_mismatched_lengths():
    tuition = build_schedule(9250, 3, 10.0, 2034, 0.025)
    living = build_schedule(15180, 4, 10.0, 2034, 0.025)

    with pytest.raises(ScheduleMismatch) as excinfo:
        combine(tuition, living)

    assert excinfo.value.tuition_years == 3
    assert excinfo.value.living_years == 4
