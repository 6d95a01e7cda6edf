"""
daylight.py

Hours of daylight at a given latitude on an orbiting planet.

Pipeline (all angles in radians internally):
    nu        = true_anomaly(orbit_day)                         (orbital.py)
    omega_orb = h / r^2                                         (orbital.py, diagnostic)
    L         = 2 * acos(cos omega_0)                           (solar.py)
    t_day     = L / (2*pi / seconds_per_day)
    hours     = t_day / 3600

Geometric edge cases are not signalled: polar day, polar night and the poles
themselves come back as NaN from hours_of_daylight(). classify_daylight() is
the opt-in variant that tells these apart.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from . import constants as const
from .config import EARTH, PlanetConfig, debug_from_env
from .diagnostics import DaylightTrace, format_trace
from .orbital import angular_velocity, solar_mean_angular_velocity, true_anomaly
from .solar import angular_solar_path_length


def _scalar_or_array(x):
    return float(x) if np.ndim(x) == 0 else x


def hours_of_daylight(orbit_day, latitude, planet: PlanetConfig | None = None,
                      debug: bool | None = None, trace: DaylightTrace | None = None):
    """
    Returns the length of the day in hours.

    Args:
        orbit_day (float or np.ndarray): Days since perihelion, starting from 0.
        latitude (float or np.ndarray): Latitude in degrees.
        planet (PlanetConfig): Orbital/planetary parameters. Earth if None.
        debug (bool): Print intermediate values. Defaults to DL_DEBUG.
        trace (DaylightTrace): Optional out-parameter collecting intermediates.

    Returns:
        float or np.ndarray: Day length in hours (NaN for polar day/night and
        at the poles). Array inputs broadcast against each other.
    """
    p = planet if planet is not None else EARTH
    if debug is None:
        debug = debug_from_env()
    if trace is None and debug:
        trace = DaylightTrace()

    nu = true_anomaly(orbit_day, p.days_per_year, p.eccentricity)
    with np.errstate(invalid="ignore", divide="ignore"):
        omega_orbit = angular_velocity(
            nu, p.semi_major_axis, p.eccentricity, p.mass_of_sun, p.gravitational_constant
        )

    path_length = angular_solar_path_length(nu, latitude, p, trace=trace)
    day_length = path_length / solar_mean_angular_velocity(p.seconds_per_day)

    if trace is not None:
        trace.true_anomaly = nu
        trace.angular_velocity = omega_orbit
        trace.angular_path_length = path_length
        trace.day_length_seconds = day_length
        if debug:
            for line in format_trace(trace):
                print(line)

    return _scalar_or_array(day_length / const.SECONDS_PER_HOUR)


def calculate_hours_of_daylight(orbit_day, latitude, debug: bool | None = None, **overrides):
    """
    Keyword form of hours_of_daylight(): any PlanetConfig field can be passed
    by name, everything else keeps its Earth default.

        calculate_hours_of_daylight(35, 0)
        calculate_hours_of_daylight(100, 45, axial_tilt=-40.0, days_per_year=400)
    """
    planet = EARTH.replace(**overrides) if overrides else EARTH
    return hours_of_daylight(orbit_day, latitude, planet, debug=debug)


def day_length_series(latitude, planet: PlanetConfig | None = None, days=None):
    """
    Day length over one orbit at a fixed latitude.

    Args:
        latitude (float): Latitude in degrees.
        planet (PlanetConfig): Earth if None.
        days (np.ndarray): Orbit days to evaluate. Defaults to the integer
            days 0 .. ceil(days_per_year) - 1.

    Returns:
        tuple: (days, hours) as 1D arrays.
    """
    p = planet if planet is not None else EARTH
    if days is None:
        days = np.arange(math.ceil(p.days_per_year), dtype=float)
    days = np.asarray(days, dtype=float)
    hours = hours_of_daylight(days, latitude, p, debug=False)
    return days, np.asarray(hours, dtype=float)


class DayKind(Enum):
    NORMAL = "normal"
    POLAR_DAY = "polar_day"
    POLAR_NIGHT = "polar_night"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class DaylightResult:
    kind: DayKind
    hours: float


def classify_daylight(orbit_day: float, latitude: float,
                      planet: PlanetConfig | None = None,
                      debug: bool | None = None) -> DaylightResult:
    """
    Tagged variant of hours_of_daylight() for a single day and latitude.

    Polar day reports a full day (seconds_per_day / 3600 hours), polar night
    reports 0. The poles and unbound orbits (e >= 1), where the geometry is
    undefined, report NaN. debug prints the intermediates as in
    hours_of_daylight().
    """
    p = planet if planet is not None else EARTH
    trace = DaylightTrace()
    hours = hours_of_daylight(float(orbit_day), float(latitude), p, debug=debug, trace=trace)
    cos_omega_0 = float(trace.hour_angle_cosine)
    bound_orbit = p.eccentricity < 1.0 and math.isfinite(float(trace.angular_velocity))

    if abs(latitude) >= 90.0 or not bound_orbit or not math.isfinite(cos_omega_0):
        return DaylightResult(DayKind.UNDEFINED, math.nan)
    if cos_omega_0 < -1.0:
        return DaylightResult(DayKind.POLAR_DAY, p.seconds_per_day / const.SECONDS_PER_HOUR)
    if cos_omega_0 > 1.0:
        return DaylightResult(DayKind.POLAR_NIGHT, 0.0)
    return DaylightResult(DayKind.NORMAL, hours)
