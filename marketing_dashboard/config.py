"""Dashboard settings: data source, category label sets and the region coordinate lookup."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping

DEFAULT_DATA_SOURCE = "data/marketing_data.json"
DEFAULT_FETCH_TIMEOUT = 15.0
DEFAULT_OUTPUT_DIR = "output"

GENDERS: tuple[str, ...] = ("Male", "Female")
DEVICES: tuple[str, ...] = ("Desktop", "Mobile")

# GCC city coordinates as (latitude, longitude).
REGION_COORDINATES: dict[str, tuple[float, float]] = {
    "Abu Dhabi": (24.4539, 54.3773),
    "Dubai": (25.2048, 55.2708),
    "Sharjah": (25.3462, 55.4211),
    "Riyadh": (24.7136, 46.6753),
    "Doha": (25.2854, 51.531),
    "Kuwait City": (29.3759, 47.9774),
    "Manama": (26.2235, 50.5876),
    "Muscat": (23.588, 58.3825),
}


@dataclass(frozen=True)
class DashboardSettings:
    data_source: str = DEFAULT_DATA_SOURCE
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    genders: tuple[str, ...] = GENDERS
    devices: tuple[str, ...] = DEVICES
    region_coordinates: Mapping[str, tuple[float, float]] = field(
        default_factory=lambda: dict(REGION_COORDINATES)
    )

    def with_region_coordinates(self, coordinates: Mapping[str, tuple[float, float]]) -> "DashboardSettings":
        return replace(self, region_coordinates=dict(coordinates))


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid MARKETING_FETCH_TIMEOUT: {raw}") from exc
    if timeout <= 0:
        raise ValueError(f"MARKETING_FETCH_TIMEOUT must be positive, got {timeout}")
    return timeout


def load_settings(environ: Mapping[str, str] | None = None) -> DashboardSettings:
    env = os.environ if environ is None else environ
    source = env.get("MARKETING_DATA_SOURCE", DEFAULT_DATA_SOURCE).strip()
    if not source:
        raise ValueError("MARKETING_DATA_SOURCE must not be empty")
    timeout = _parse_timeout(env.get("MARKETING_FETCH_TIMEOUT", str(DEFAULT_FETCH_TIMEOUT)))
    output_dir = Path(env.get("MARKETING_OUTPUT_DIR", DEFAULT_OUTPUT_DIR))
    return DashboardSettings(data_source=source, fetch_timeout=timeout, output_dir=output_dir)
