"""Data contracts for cost projections, funding scenarios and the final report."""

from __future__ import annotations

from datetime import date, datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Subject(_Frozen):
    """The child whose university costs are being projected."""

    name: str
    date_of_birth: date


class CostScheduleEntry(_Frozen):
    """One academic year of a single cost stream."""

    year_index: int = Field(..., ge=1)
    label: str = Field(..., description="Academic year, e.g. '2034/2035'.")
    amount: float
    inflation_years: float = Field(..., description="Years of inflation applied to the base figure.")


class CostSchedule(_Frozen):
    """Year-by-year projection of tuition or living costs."""

    base_amount: float
    years_until_start: float = Field(..., ge=0)
    start_year: int
    duration_years: int = Field(..., ge=1)
    entries: Tuple[CostScheduleEntry, ...]
    total: float


class CombinedYear(_Frozen):
    year_index: int = Field(..., ge=1)
    label: str
    tuition: float
    living: float
    total: float


class CombinedCostProjection(_Frozen):
    """Tuition and living schedules for the same duration, merged per year."""

    tuition: CostSchedule
    living: CostSchedule
    years: Tuple[CombinedYear, ...]
    tuition_total: float
    living_total: float
    grand_total: float


class RecurringScenario(_Frozen):
    """Monthly saving needed to reach the target at one growth rate."""

    rate: float
    rate_percent: str
    monthly_contribution: float
    total_contributions: float
    growth: float
    growth_pct: float


class LumpSumScenario(_Frozen):
    """One-off investment needed today to reach the target at one growth rate."""

    rate: float
    rate_percent: str
    lump_sum: float
    growth: float
    growth_pct: float


class ReportMeta(_Frozen):
    subject_name: str
    generated_at: datetime
    reference: str


class SubjectFacts(_Frozen):
    date_of_birth: date
    current_age: float
    years_until_start: float
    start_year: int


class Assumptions(_Frozen):
    inflation_rate: float
    base_tuition: float
    location: str
    location_description: str
    include_allowance: bool
    current_living_cost: float
    target_age: int


class ProjectionBundle(_Frozen):
    """Costs and both funding tables for one degree duration."""

    duration_key: str
    duration_label: str
    duration_years: int
    costs: CombinedCostProjection
    recurring: Tuple[RecurringScenario, ...]
    lump_sum: Tuple[LumpSumScenario, ...]


class Report(_Frozen):
    meta: ReportMeta
    subject: SubjectFacts
    assumptions: Assumptions
    standard: ProjectionBundle
    extended: ProjectionBundle

    @property
    def bundles(self) -> Tuple[ProjectionBundle, ProjectionBundle]:
        return (self.standard, self.extended)


__all__ = [
    "Subject",
    "CostScheduleEntry",
    "CostSchedule",
    "CombinedYear",
    "CombinedCostProjection",
    "RecurringScenario",
    "LumpSumScenario",
    "ReportMeta",
    "SubjectFacts",
    "Assumptions",
    "ProjectionBundle",
    "Report",
]
