"""Savings needed to fund a target amount at a set of benchmark growth rates."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from unicost.core.errors import NonFiniteResult, NonPositiveHorizon
from unicost.schemas.report import LumpSumScenario, RecurringScenario

MONTHS_PER_YEAR = 12


def _check_horizon(horizon_years: float) -> None:
    if not horizon_years > 0:
        raise NonPositiveHorizon(horizon_years)


def _check_target(target_amount: float) -> None:
    # growth is reported as a share of the target
    if target_amount == 0:
        raise NonFiniteResult("growth percentage", math.nan)


def _finite(step: str, value: float) -> float:
    if isinstance(value, complex) or not math.isfinite(value):
        raise NonFiniteResult(step, value)
    return value


def _rate_percent(rate: float) -> str:
    return f"{rate * 100:.1f}"


def monthly_payment(target_amount: float, horizon_years: float, rate: float) -> float:
    """
    Level monthly payment whose future value reaches ``target_amount``.

    Uses the future value of an ordinary annuity solved for the payment:
        PMT = FV * i / ((1 + i)^n - 1),  i = rate / 12,  n = horizon * 12
    ``n`` is not rounded, so a fractional horizon gives a fractional count.
    """
    _check_horizon(horizon_years)
    periods = horizon_years * MONTHS_PER_YEAR
    monthly_rate = rate / MONTHS_PER_YEAR

    if monthly_rate == 0:
        return _finite("monthly payment", target_amount / periods)

    try:
        factor = (1 + monthly_rate) ** periods - 1
        payment = target_amount * monthly_rate / factor
    except (OverflowError, ZeroDivisionError):
        raise NonFiniteResult("monthly payment", math.nan) from None
    return _finite("monthly payment", payment)


def present_value(target_amount: float, horizon_years: float, rate: float) -> float:
    """PV = FV / (1 + rate)^horizon."""
    _check_horizon(horizon_years)
    try:
        value = target_amount / (1 + rate) ** horizon_years
    except (OverflowError, ZeroDivisionError):
        raise NonFiniteResult("lump sum", math.nan) from None
    return _finite("lump sum", value)


def recurring_contributions(
    target_amount: float,
    horizon_years: float,
    benchmark_rates: Iterable[float],
) -> Tuple[RecurringScenario, ...]:
    """One row per rate, in the order given."""
    _check_horizon(horizon_years)
    _check_target(target_amount)
    periods = horizon_years * MONTHS_PER_YEAR

    rows: List[RecurringScenario] = []
    for rate in benchmark_rates:
        payment = monthly_payment(target_amount, horizon_years, rate)
        total_contributions = _finite("total contributions", payment * periods)
        growth = target_amount - total_contributions
        rows.append(
            RecurringScenario(
                rate=rate,
                rate_percent=_rate_percent(rate),
                monthly_contribution=payment,
                total_contributions=total_contributions,
                growth=growth,
                growth_pct=growth / target_amount * 100,
            )
        )
    return tuple(rows)


def lump_sums(
    target_amount: float,
    horizon_years: float,
    benchmark_rates: Iterable[float],
) -> Tuple[LumpSumScenario, ...]:
    """One row per rate, in the order given."""
    _check_horizon(horizon_years)
    _check_target(target_amount)

    rows: List[LumpSumScenario] = []
    for rate in benchmark_rates:
        lump_sum = present_value(target_amount, horizon_years, rate)
        growth = target_amount - lump_sum
        rows.append(
            LumpSumScenario(
                rate=rate,
                rate_percent=_rate_percent(rate),
                lump_sum=lump_sum,
                growth=growth,
                growth_pct=growth / target_amount * 100,
            )
        )
    return tuple(rows)


__all__ = [
    "monthly_payment",
    "present_value",
    "recurring_contributions",
    "lump_sums",
]
