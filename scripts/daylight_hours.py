#!/usr/bin/env python3
"""
Print the hours of daylight for one orbit day and latitude.

Planet parameters come from the DL_* environment variables (see
daylight/config.py) and can be overridden per run with flags.

Usage:
  python -m scripts.daylight_hours 35 0
  python -m scripts.daylight_hours 172 60 --axial-tilt -30 --debug
  DL_DAYS_PER_YEAR=687 python -m scripts.daylight_hours 100 45
"""

import argparse
import math
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from daylight import PlanetConfig, classify_daylight, hours_of_daylight
from daylight.config import debug_from_env

# flag -> PlanetConfig field
_PLANET_FLAGS = {
    "last_solstice_day": "Day of the most recent winter solstice (days since perihelion)",
    "seconds_per_day": "Seconds per solar day",
    "days_per_year": "Orbital period in days",
    "eccentricity": "Orbit eccentricity",
    "semi_major_axis": "Semi-major axis (m)",
    "mass_of_sun": "Stellar mass (kg)",
    "axial_tilt": "Axial tilt (deg)",
    "solar_radius": "Stellar radius (m)",
    "refraction_at_sunset": "Refraction at sunset (deg)",
    "gravitational_constant": "Gravitational constant (m^3 kg^-1 s^-2)",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hours of daylight on an orbiting planet.")
    parser.add_argument("orbit_day", type=float, help="Days since perihelion")
    parser.add_argument("latitude", type=float, help="Latitude in degrees")
    for name, help_text in _PLANET_FLAGS.items():
        parser.add_argument("--" + name.replace("_", "-"), dest=name, type=float, default=None, help=help_text)
    parser.add_argument("--classify", action="store_true",
                        help="Report polar day/night instead of nan")
    parser.add_argument("--debug", action="store_true", default=debug_from_env(),
                        help="Print intermediate values (default: DL_DEBUG)")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {name: getattr(args, name) for name in _PLANET_FLAGS if getattr(args, name) is not None}
    try:
        planet = PlanetConfig.from_env().replace(**overrides)
    except ValueError as exc:
        parser.error(str(exc))

    if args.classify:
        result = classify_daylight(args.orbit_day, args.latitude, planet, debug=args.debug)
        print(f"{result.hours:.4f} {result.kind.value}")
        return 0

    hours = hours_of_daylight(args.orbit_day, args.latitude, planet, debug=args.debug)
    print("nan" if not math.isfinite(hours) else f"{hours:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
