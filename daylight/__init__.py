from __future__ import annotations

# Re-export public API for daylight

from .config import EARTH, PlanetConfig, debug_from_env
from .daylight import (
    DayKind,
    DaylightResult,
    calculate_hours_of_daylight,
    classify_daylight,
    day_length_series,
    hours_of_daylight,
)
from .diagnostics import DaylightTrace, format_trace
from .orbital import (
    angular_velocity,
    orbital_period_days,
    orbital_radius,
    solar_mean_angular_velocity,
    true_anomaly,
)
from .solar import angular_solar_path_length

__all__ = [
    "EARTH",
    "PlanetConfig",
    "debug_from_env",
    "DayKind",
    "DaylightResult",
    "calculate_hours_of_daylight",
    "classify_daylight",
    "day_length_series",
    "hours_of_daylight",
    "DaylightTrace",
    "format_trace",
    "angular_velocity",
    "orbital_period_days",
    "orbital_radius",
    "solar_mean_angular_velocity",
    "true_anomaly",
    "angular_solar_path_length",
]
