# daylight/solar.py

"""
Calculates the path of the sun across the sky for a given orbital position.
"""

from __future__ import annotations

import numpy as np

from .config import EARTH, PlanetConfig
from .diagnostics import DaylightTrace
from .orbital import true_anomaly as _true_anomaly


def solar_declination(true_anomaly, solstice_anomaly, axial_tilt_rad):
    """
    Solar declination (rad), taken as sinusoidal in true anomaly:
        delta = theta * cos(nu - nu_solstice)

    Close to the exact value when eccentricity and axial tilt are both modest.
    """
    return axial_tilt_rad * np.cos(true_anomaly - solstice_anomaly)


def solar_disc_center(solar_radius, semi_major_axis, refraction_at_sunset):
    """
    Altitude of the solar disc centre (rad, negative) at the moment its upper
    limb touches the horizon.

    Combines the apparent diameter of the sun, evaluated at distance
    semi_major_axis rather than the instantaneous one, with atmospheric
    refraction given in degrees.
    """
    return -2 * np.arcsin(solar_radius / semi_major_axis) - np.deg2rad(refraction_at_sunset)


def hour_angle_cosine(latitude_rad, declination, disc_center):
    """
    Generalised sunrise equation:
        cos(omega_0) = (sin h0 - sin(phi) sin(delta)) / (cos(phi) cos(delta))

    Values below -1 mean the sun never sets that day, above +1 that it never
    rises.
    """
    return (np.sin(disc_center) - np.sin(latitude_rad) * np.sin(declination)) / (
        np.cos(latitude_rad) * np.cos(declination)
    )


def point_source_hour_angle_cosine(latitude, declination):
    """
    Textbook sunrise equation for a point sun without refraction,
    cos(omega_0) = -tan(phi) tan(delta).

    Args:
        latitude (float or np.ndarray): Latitude in degrees.
        declination (float or np.ndarray): Solar declination in radians.
    """
    return -np.tan(np.deg2rad(latitude)) * np.tan(declination)


def angular_solar_path_length(true_anomaly, latitude, planet: PlanetConfig | None = None,
                              trace: DaylightTrace | None = None):
    """
    Calculates the angular length of the sun's visible path across the sky.

    Args:
        true_anomaly (float or np.ndarray): True anomaly for the day, in radians.
        latitude (float or np.ndarray): Latitude in degrees.
        planet (PlanetConfig): Orbital/planetary parameters. Earth if None.
        trace (DaylightTrace): Optional out-parameter receiving the solstice
            anomaly, declination, disc centre and hour-angle cosine.

    Returns:
        float or np.ndarray: 2 * omega_0 in radians. NaN during polar day or
        night and at the poles.
    """
    p = planet if planet is not None else EARTH

    theta = np.deg2rad(p.axial_tilt)
    phi = np.deg2rad(np.asarray(latitude, dtype=float))

    solstice_anomaly = _true_anomaly(p.last_solstice_day, p.days_per_year, p.eccentricity)
    delta = solar_declination(true_anomaly, solstice_anomaly, theta)
    h0 = solar_disc_center(p.solar_radius, p.semi_major_axis, p.refraction_at_sunset)

    # Out-of-range cosines (polar day/night) and cos(phi) = 0 end up as NaN/inf
    with np.errstate(invalid="ignore", divide="ignore"):
        cos_omega_0 = hour_angle_cosine(phi, delta, h0)
        path_length = 2 * np.arccos(cos_omega_0)

    if trace is not None:
        trace.solstice_anomaly = solstice_anomaly
        trace.solar_declination = delta
        trace.solar_disc_center = h0
        trace.hour_angle_cosine = cos_omega_0

    return path_length
