"""Assemble the full cost and funding report for one child."""

from __future__ import annotations

import itertools
import logging
import threading
from datetime import datetime
from typing import Sequence

from unicost.core.funding import lump_sums, recurring_contributions
from unicost.core.schedule import build_schedule, combine
from unicost.core.timing import current_age, target_calendar_year, years_until_target_age
from unicost.schemas.reference import DurationOption, EngineConfig, LocationProfile, ProgramDurations
from unicost.schemas.report import (
    Assumptions,
    ProjectionBundle,
    Report,
    ReportMeta,
    Subject,
    SubjectFacts,
)
from unicost.schemas.request import ReportRequest

logger = logging.getLogger(__name__)

REFERENCE_PREFIX = "UNI"
_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_sequence = itertools.count(1)
_sequence_lock = threading.Lock()


def _base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def new_reference(now: datetime) -> str:
    """Report reference such as ``UNI-M1ABC2D3-1``; the counter keeps same-millisecond reports apart."""
    with _sequence_lock:
        serial = next(_sequence)
    millis = int(now.timestamp() * 1000)
    return f"{REFERENCE_PREFIX}-{_base36(millis)}-{_base36(serial)}"


def _bundle(
    duration_key: str,
    duration: DurationOption,
    base_tuition: float,
    living_cost: float,
    years_until_start: float,
    start_year: int,
    inflation_rate: float,
    benchmark_rates: Sequence[float],
) -> ProjectionBundle:
    tuition = build_schedule(base_tuition, duration.years, years_until_start, start_year, inflation_rate)
    living = build_schedule(living_cost, duration.years, years_until_start, start_year, inflation_rate)
    costs = combine(tuition, living)

    return ProjectionBundle(
        duration_key=duration_key,
        duration_label=duration.label,
        duration_years=duration.years,
        costs=costs,
        recurring=recurring_contributions(costs.grand_total, years_until_start, benchmark_rates),
        lump_sum=lump_sums(costs.grand_total, years_until_start, benchmark_rates),
    )


def assemble(
    subject: Subject,
    location_profile: LocationProfile,
    include_allowance: bool,
    program_durations: ProgramDurations,
    base_tuition: float,
    inflation_rate: float,
    benchmark_rates: Sequence[float],
    target_age: int,
    now: datetime,
) -> Report:
    """
    Build the report for both programme durations.

    Age and timing are worked out once from ``now`` and shared by both
    durations, and ``now`` is also the generation timestamp. Any engine error
    propagates and no report is returned.
    """
    rates = tuple(benchmark_rates)
    age = current_age(subject.date_of_birth, now)
    years_until_start = years_until_target_age(subject.date_of_birth, target_age, now)
    start_year = target_calendar_year(subject.date_of_birth, target_age)
    living_cost = location_profile.annual_cost(include_allowance)

    bundles = {
        key: _bundle(
            key,
            getattr(program_durations, key),
            base_tuition,
            living_cost,
            years_until_start,
            start_year,
            inflation_rate,
            rates,
        )
        for key in ("standard", "extended")
    }

    report = Report(
        meta=ReportMeta(
            subject_name=subject.name,
            generated_at=now,
            reference=new_reference(now),
        ),
        subject=SubjectFacts(
            date_of_birth=subject.date_of_birth,
            current_age=age,
            years_until_start=years_until_start,
            start_year=start_year,
        ),
        assumptions=Assumptions(
            inflation_rate=inflation_rate,
            base_tuition=base_tuition,
            location=location_profile.label,
            location_description=location_profile.description,
            include_allowance=include_allowance,
            current_living_cost=living_cost,
            target_age=target_age,
        ),
        standard=bundles["standard"],
        extended=bundles["extended"],
    )

    logger.info(
        "report %s: start %d, %.2f years to save, totals %.2f / %.2f",
        report.meta.reference,
        start_year,
        years_until_start,
        report.standard.costs.grand_total,
        report.extended.costs.grand_total,
    )
    return report


def build_report(request: ReportRequest, config: EngineConfig, now: datetime) -> Report:
    """Resolve a validated request against ``config`` and assemble its report."""
    location = config.location(request.location)
    return assemble(
        subject=Subject(name=request.name, date_of_birth=request.date_of_birth),
        location_profile=location,
        include_allowance=request.include_allowance,
        program_durations=config.durations,
        base_tuition=config.base_tuition,
        inflation_rate=config.inflation_rate,
        benchmark_rates=config.benchmark_rates,
        target_age=config.target_age,
        now=now,
    )


__all__ = ["assemble", "build_report", "new_reference"]
