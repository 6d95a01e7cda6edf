# daylight/orbital.py

"""
Orbital position and motion of a planet on a Keplerian ellipse.

All functions accept floats or numpy arrays and broadcast like numpy ufuncs.
Nothing is validated here: out-of-domain inputs (zero-length years, e >= 1)
propagate as non-finite values.
"""

import numpy as np

from . import constants as const


def true_anomaly(orbit_day, days_per_year, eccentricity):
    """
    Calculates the true anomaly for a given day since perihelion.

    Uses the equation-of-center expansion of the mean anomaly to third order
    in eccentricity. The series is accurate for e well under 0.1 and degrades
    for more elongated orbits.

    Args:
        orbit_day (float or np.ndarray): Days since perihelion, starting from 0.
            35 on 2020-02-08 for Earth. May exceed days_per_year.
        days_per_year (float): Orbital period in days.
        eccentricity (float): Orbit eccentricity. 0.0167 for Earth.

    Returns:
        float or np.ndarray: True anomaly in radians, not reduced mod 2*pi.
    """
    e = eccentricity
    # Mean anomaly
    M = 2 * np.pi * np.asarray(orbit_day, dtype=float) / days_per_year

    return (
        M
        + (2 * e - 0.25 * e**3) * np.sin(M)
        + 1.25 * e**2 * np.sin(2 * M)
        + (13.0 / 12.0) * e**3 * np.sin(3 * M)
    )


def orbital_radius(true_anomaly, semi_major_axis, eccentricity):
    """
    Distance between the planet and its star at the given true anomaly (m).
    """
    a = semi_major_axis
    e = eccentricity
    return a * (1 - e**2) / (1 + e * np.cos(true_anomaly))


def angular_velocity(true_anomaly, semi_major_axis, eccentricity, mass_of_sun,
                     gravitational_constant=const.G):
    """
    Calculates the angular velocity of the planet-star line.

    Kepler's second law: the specific angular momentum
    h = sqrt(G * M * a * (1 - e^2)) is conserved, so d(nu)/dt = h / r^2.

    Args:
        true_anomaly (float or np.ndarray): True anomaly in radians.
        semi_major_axis (float): Semi-major axis in meters.
        eccentricity (float): Orbit eccentricity.
        mass_of_sun (float): Mass of the star in kg.
        gravitational_constant (float): G in m^3 kg^-1 s^-2.

    Returns:
        float or np.ndarray: Angular velocity in radians per second.
    """
    a = semi_major_axis
    e = eccentricity
    h = np.sqrt(gravitational_constant * mass_of_sun * a * (1 - e**2))
    r = orbital_radius(true_anomaly, a, e)
    return h / r**2


def solar_mean_angular_velocity(seconds_per_day):
    """
    Mean angular velocity of the sun across the sky (rad/s).

    Args:
        seconds_per_day (float): Length of the solar day. 86400 on Earth.
    """
    return 2 * np.pi / np.asarray(seconds_per_day, dtype=float)


def orbital_period_seconds(semi_major_axis, mass_of_sun, gravitational_constant=const.G):
    """
    Orbital period from Kepler's third law, T = 2*pi*sqrt(a^3 / (G*M)), in seconds.
    """
    return 2 * np.pi * np.sqrt(semi_major_axis**3 / (gravitational_constant * mass_of_sun))


def orbital_period_days(semi_major_axis, mass_of_sun, gravitational_constant=const.G,
                        seconds_per_day=const.SECONDS_PER_DAY):
    """
    Orbital period from Kepler's third law, expressed in planetary solar days.
    """
    return orbital_period_seconds(semi_major_axis, mass_of_sun, gravitational_constant) / seconds_per_day
