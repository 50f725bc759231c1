"""Reference data the engine reads: regional costs, durations and rates."""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from unicost.core.errors import InvalidLocationKey


class LocationProfile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str
    label: str
    with_allowance: float = Field(..., ge=0, description="Annual living cost including accommodation.")
    without_allowance: float = Field(..., ge=0, description="Annual living cost excluding accommodation.")
    description: str = ""

    def annual_cost(self, include_allowance: bool) -> float:
        return self.with_allowance if include_allowance else self.without_allowance


class DurationOption(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    years: int = Field(..., ge=1, le=10)
    label: str


class ProgramDurations(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    standard: DurationOption
    extended: DurationOption


class EngineConfig(BaseModel):
    """Constants for one deployment (e.g. one jurisdiction)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_tuition: float = Field(..., ge=0)
    inflation_rate: float = Field(..., ge=-0.5, le=1)
    target_age: int = Field(..., ge=1, le=100)
    locations: Dict[str, LocationProfile]
    durations: ProgramDurations
    benchmark_rates: Tuple[float, ...] = Field(..., min_length=1)
    disclaimer: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fill_location_keys(cls, data):
        # JSON files may omit "key" inside each location; it is the mapping key
        if isinstance(data, dict) and isinstance(data.get("locations"), dict):
            locations = {}
            for key, profile in data["locations"].items():
                if isinstance(profile, dict) and "key" not in profile:
                    profile = {**profile, "key": key}
                locations[key] = profile
            data = {**data, "locations": locations}
        return data

    @model_validator(mode="after")
    def _check_location_keys(self) -> "EngineConfig":
        for key, profile in self.locations.items():
            if profile.key != key:
                raise ValueError(f"location {key!r} is filed under a different key ({profile.key!r})")
        return self

    def location(self, key: str) -> LocationProfile:
        try:
            return self.locations[key]
        except KeyError:
            raise InvalidLocationKey(key, self.locations) from None


__all__ = ["LocationProfile", "DurationOption", "ProgramDurations", "EngineConfig"]
