# daylight/constants.py

"""
Central repository for the physical constants and the Earth-like default
parameters used by the daylight calculator.
"""

# --- Physical Constants (SI units) ---
G = 6.67408e-11  # Gravitational constant (m^3 kg^-1 s^-2)

# --- Astronomical Units ---
M_SUN = 1.989e30  # Mass of the Sun (kg)
R_SUN = 6.9634e8  # Radius of the Sun (m)
AU = 1.496e11  # Astronomical Unit (m)

# --- Earth-like Planet Defaults ---
LAST_SOLSTICE_DAY = 349.0  # Days since perihelion at the last (northern winter) solstice
SECONDS_PER_DAY = 24 * 60 * 60  # Solar day (s)
DAYS_PER_YEAR = 365.259  # Orbital period (days)
ECCENTRICITY = 0.0167  # Orbit eccentricity
SEMI_MAJOR_AXIS = AU  # Semi-major axis of the planet's orbit (m)
AXIAL_TILT = -23.44  # Axial tilt in degrees (negative: northern winter at LAST_SOLSTICE_DAY)
REFRACTION_AT_SUNSET = 0.3  # Apparent lift of the solar disc at the horizon (degrees)

SECONDS_PER_HOUR = 3600.0
