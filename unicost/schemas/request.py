"""Validated input for a report calculation."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from unicost.core.timing import DAYS_PER_YEAR

MIN_AGE_YEARS = 0.5
MAX_AGE_YEARS = 18


class ReportRequest(BaseModel):
    """Form data for one child.

    Date bounds are checked against ``today`` from the validation context
    (``ReportRequest.model_validate(data, context={"today": ...})``), or the
    current date when no context is given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Client or child name shown on the report.")
    date_of_birth: date
    location: str = "london"
    include_allowance: bool = Field(True, description="Include accommodation in living costs.")

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Client name is required")
        return value

    @field_validator("date_of_birth")
    @classmethod
    def _age_in_range(cls, value: date, info: ValidationInfo) -> date:
        today = (info.context or {}).get("today") or date.today()
        if isinstance(today, datetime):
            today = today.date()
        age = (today - value).days / DAYS_PER_YEAR
        if age < 0:
            raise ValueError("Date of birth cannot be in the future")
        if age >= MAX_AGE_YEARS:
            raise ValueError("Child must be under 18 years old for planning purposes")
        if age < MIN_AGE_YEARS:
            raise ValueError("Child must be at least 6 months old")
        return value
