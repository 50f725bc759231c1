"""Year-by-year cost schedules for tuition and living costs."""

from __future__ import annotations

import logging
from typing import List

from unicost.core.errors import ScheduleMismatch
from unicost.core.inflation import project
from unicost.schemas.report import (
    CombinedCostProjection,
    CombinedYear,
    CostSchedule,
    CostScheduleEntry,
)

logger = logging.getLogger(__name__)


def academic_year_label(start_calendar_year: int, year_index: int) -> str:
    first = start_calendar_year + year_index - 1
    return f"{first}/{first + 1}"


def build_schedule(
    base_amount: float,
    duration_years: int,
    years_until_start: float,
    start_calendar_year: int,
    inflation_rate: float,
) -> CostSchedule:
    """
    Inflate ``base_amount`` for each year of the programme.

    Year k (1-based) is inflated for ``years_until_start + k - 1`` years and
    labelled with the two calendar years it spans. The total is summed in
    year order.
    """
    entries: List[CostScheduleEntry] = []
    total = 0.0

    for year_index in range(1, duration_years + 1):
        inflation_years = years_until_start + (year_index - 1)
        amount = project(base_amount, inflation_years, inflation_rate)
        entries.append(
            CostScheduleEntry(
                year_index=year_index,
                label=academic_year_label(start_calendar_year, year_index),
                amount=amount,
                inflation_years=inflation_years,
            )
        )
        total += amount

    logger.debug(
        "schedule base=%.2f years=%d start=%d total=%.2f",
        base_amount,
        duration_years,
        start_calendar_year,
        total,
    )

    return CostSchedule(
        base_amount=base_amount,
        years_until_start=years_until_start,
        start_year=start_calendar_year,
        duration_years=duration_years,
        entries=tuple(entries),
        total=total,
    )


def combine(tuition_schedule: CostSchedule, living_schedule: CostSchedule) -> CombinedCostProjection:
    """Merge two equal-length schedules position by position."""
    if len(tuition_schedule.entries) != len(living_schedule.entries):
        raise ScheduleMismatch(len(tuition_schedule.entries), len(living_schedule.entries))

    years = tuple(
        CombinedYear(
            year_index=tuition_year.year_index,
            label=tuition_year.label,
            tuition=tuition_year.amount,
            living=living_year.amount,
            total=tuition_year.amount + living_year.amount,
        )
        for tuition_year, living_year in zip(tuition_schedule.entries, living_schedule.entries)
    )

    return CombinedCostProjection(
        tuition=tuition_schedule,
        living=living_schedule,
        years=years,
        tuition_total=tuition_schedule.total,
        living_total=living_schedule.total,
        grand_total=tuition_schedule.total + living_schedule.total,
    )
