"""Error kinds raised by the projection engine."""

from __future__ import annotations

from typing import Iterable


class EngineError(ValueError):
    """Base class for every failure that aborts a report calculation."""


class InvalidLocationKey(EngineError, KeyError):
    def __init__(self, key: str, known: Iterable[str] = ()):
        self.key = key
        self.known = sorted(known)
        message = f"unknown location {key!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class ScheduleMismatch(EngineError):
    def __init__(self, tuition_years: int, living_years: int):
        self.tuition_years = tuition_years
        self.living_years = living_years
        super().__init__(
            f"cannot combine a {tuition_years}-year tuition schedule "
            f"with a {living_years}-year living-cost schedule"
        )


class NonPositiveHorizon(EngineError):
    def __init__(self, horizon_years: float):
        self.horizon_years = horizon_years
        super().__init__(f"funding horizon must be positive, got {horizon_years!r} years")


class NonFiniteResult(EngineError):
    def __init__(self, step: str, value: float):
        self.step = step
        self.value = value
        super().__init__(f"{step} produced a non-finite value ({value!r})")
