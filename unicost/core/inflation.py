"""Compound growth applied to present-day amounts."""

from __future__ import annotations

import math

from unicost.core.errors import NonFiniteResult


def project(value: float, years: float, rate: float) -> float:
    """Grow ``value`` at ``rate`` per year for ``years`` (may be fractional or zero)."""
    try:
        result = value * (1 + rate) ** years
    except OverflowError:
        raise NonFiniteResult("inflation projection", math.inf) from None
    if isinstance(result, complex) or not math.isfinite(result):
        raise NonFiniteResult("inflation projection", result)
    return result
