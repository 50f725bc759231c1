"""Default reference data (UK, 2024/2025 academic year) and config loading."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from unicost.schemas.reference import (
    DurationOption,
    EngineConfig,
    LocationProfile,
    ProgramDurations,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "UNICOST_CONFIG"

SHORT_DISCLAIMER = (
    "This illustration is for guidance purposes only and does not constitute financial advice. "
    "Figures are based on assumed inflation of 2.5% p.a. and are not guaranteed. "
    "Past performance is not a reliable indicator of future results. "
    "Please seek professional advice before making financial decisions."
)

# Annual living costs from student money surveys; "with allowance" includes accommodation.
_UK_LOCATIONS = [
    LocationProfile(
        key="london",
        label="London",
        with_allowance=15180,
        without_allowance=6680,
        description="Highest cost region in the UK",
    ),
    LocationProfile(
        key="southEast",
        label="South East England",
        with_allowance=13200,
        without_allowance=5800,
        description="Includes Oxford, Cambridge, Brighton",
    ),
    LocationProfile(
        key="southWest",
        label="South West England",
        with_allowance=12400,
        without_allowance=5400,
        description="Includes Bristol, Bath, Exeter",
    ),
    LocationProfile(
        key="midlands",
        label="Midlands",
        with_allowance=11800,
        without_allowance=5200,
        description="Includes Birmingham, Nottingham, Leicester",
    ),
    LocationProfile(
        key="northWest",
        label="North West England",
        with_allowance=11400,
        without_allowance=5000,
        description="Includes Manchester, Liverpool, Lancaster",
    ),
    LocationProfile(
        key="northEast",
        label="North East England",
        with_allowance=10800,
        without_allowance=4800,
        description="Includes Newcastle, Durham, York",
    ),
    LocationProfile(
        key="wales",
        label="Wales",
        with_allowance=10600,
        without_allowance=4600,
        description="Includes Cardiff, Swansea, Aberystwyth",
    ),
    LocationProfile(
        key="northernIreland",
        label="Northern Ireland",
        with_allowance=9800,
        without_allowance=4400,
        description="Includes Belfast, Ulster",
    ),
]

DEFAULT_CONFIG = EngineConfig(
    base_tuition=9250,  # regulated maximum for England, Wales, NI
    inflation_rate=0.025,
    target_age=18,
    locations={profile.key: profile for profile in _UK_LOCATIONS},
    durations=ProgramDurations(
        standard=DurationOption(years=3, label="3 Years (Standard Degree)"),
        extended=DurationOption(years=4, label="4 Years (With Placement/Sandwich Year)"),
    ),
    benchmark_rates=(0.03, 0.04, 0.05, 0.06, 0.07, 0.08),
    disclaimer=SHORT_DISCLAIMER,
)


def load_engine_config(path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """
    Read an EngineConfig from a JSON file.

    ``path`` defaults to the UNICOST_CONFIG environment variable; with
    neither set the UK defaults are returned.
    """
    path = path or os.getenv(CONFIG_ENV_VAR)
    if not path:
        return DEFAULT_CONFIG

    config_path = Path(path)
    logger.info("loading engine config from %s", config_path)
    return EngineConfig.model_validate_json(config_path.read_text(encoding="utf-8"))


__all__ = ["CONFIG_ENV_VAR", "DEFAULT_CONFIG", "SHORT_DISCLAIMER", "load_engine_config"]
