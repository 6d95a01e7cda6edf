"""
Planet configuration for the daylight calculator.

A PlanetConfig bundles every orbital and planetary parameter except the
per-call orbit day and latitude. Defaults describe an Earth-like planet.

Environment parameters (read by PlanetConfig.from_env):
    DL_LAST_SOLSTICE_DAY=349     (days since perihelion)
    DL_SECONDS_PER_DAY=86400     (s)
    DL_DAYS_PER_YEAR=365.259     (days)
    DL_ECCENTRICITY=0.0167
    DL_SEMI_MAJOR_AXIS=1.496e11  (m)
    DL_MASS_OF_SUN=1.989e30      (kg)
    DL_AXIAL_TILT=-23.44         (deg)
    DL_SOLAR_RADIUS=6.9634e8     (m)
    DL_REFRACTION=0.3            (deg)
    DL_G=6.67408e-11             (m^3 kg^-1 s^-2)
    DL_DEBUG=0                   (print intermediate values)
"""

from __future__ import annotations

import dataclasses
import math
import os
from dataclasses import dataclass

from . import constants as const
from .orbital import orbital_period_days


_POSITIVE_FIELDS = (
    "seconds_per_day",
    "days_per_year",
    "semi_major_axis",
    "mass_of_sun",
    "gravitational_constant",
)


@dataclass(frozen=True)
class PlanetConfig:
    """Orbital and planetary parameters (Earth-like defaults)."""

    last_solstice_day: float = const.LAST_SOLSTICE_DAY
    seconds_per_day: float = const.SECONDS_PER_DAY
    days_per_year: float = const.DAYS_PER_YEAR
    eccentricity: float = const.ECCENTRICITY
    semi_major_axis: float = const.SEMI_MAJOR_AXIS
    mass_of_sun: float = const.M_SUN
    axial_tilt: float = const.AXIAL_TILT
    solar_radius: float = const.R_SUN
    refraction_at_sunset: float = const.REFRACTION_AT_SUNSET
    gravitational_constant: float = const.G

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            raw = getattr(self, f.name)
            try:
                value = float(raw)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{f.name} must be a real number, got {raw!r}") from exc
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value!r}")
            object.__setattr__(self, f.name, value)

        for name in _POSITIVE_FIELDS:
            if getattr(self, name) <= 0.0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)!r}")
        if self.solar_radius < 0.0:
            raise ValueError(f"solar_radius must be >= 0, got {self.solar_radius!r}")

    def replace(self, **changes) -> PlanetConfig:
        """Return a copy with the given fields replaced (validated again)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls) -> PlanetConfig:
        def _float(name: str, default: float) -> float:
            try:
                return float(os.getenv(name, str(default)))
            except Exception:
                return default

        return cls(
            last_solstice_day=_float("DL_LAST_SOLSTICE_DAY", const.LAST_SOLSTICE_DAY),
            seconds_per_day=_float("DL_SECONDS_PER_DAY", const.SECONDS_PER_DAY),
            days_per_year=_float("DL_DAYS_PER_YEAR", const.DAYS_PER_YEAR),
            eccentricity=_float("DL_ECCENTRICITY", const.ECCENTRICITY),
            semi_major_axis=_float("DL_SEMI_MAJOR_AXIS", const.SEMI_MAJOR_AXIS),
            mass_of_sun=_float("DL_MASS_OF_SUN", const.M_SUN),
            axial_tilt=_float("DL_AXIAL_TILT", const.AXIAL_TILT),
            solar_radius=_float("DL_SOLAR_RADIUS", const.R_SUN),
            refraction_at_sunset=_float("DL_REFRACTION", const.REFRACTION_AT_SUNSET),
            gravitational_constant=_float("DL_G", const.G),
        )

    @classmethod
    def with_kepler_period(cls, semi_major_axis: float, mass_of_sun: float, **kwargs) -> PlanetConfig:
        """
        Build a planet whose year length follows Kepler's third law for the
        given orbit size and stellar mass. Other fields come from kwargs or
        the defaults. days_per_year is derived and cannot be passed.
        """
        if "days_per_year" in kwargs:
            raise ValueError("days_per_year is derived from Kepler's third law; do not pass it")
        G =kwargs.get("gravitational_constant", const.G)
        seconds_per_day = kwargs.get("seconds_per_day", const.SECONDS_PER_DAY)
        days = orbital_period_days(semi_major_axis, mass_of_sun, G, seconds_per_day)
        return cls(
            semi_major_axis=semi_major_axis,
            mass_of_sun=mass_of_sun,
            days_per_year=float(days),
            **kwargs,
        )


def debug_from_env() -> bool:
    """DL_DEBUG=1 turns on diagnostic printing of intermediate values."""
    try:
        return int(os.getenv("DL_DEBUG", "0")) == 1
    except Exception:
        return False


EARTH = PlanetConfig()
