#!/usr/bin/env python3
"""
Plot day length over one orbit for a set of latitudes.

Planet parameters come from the DL_* environment variables (see
daylight/config.py).

Usage:
  python -m scripts.plot_daylight
  python -m scripts.plot_daylight --lat 0 30 60 75 --out output/daylight.png

Outputs:
  - PNG with one curve per latitude. Days with polar day/night are drawn
    at 24 h / 0 h.
"""

import argparse
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import matplotlib.pyplot as plt

from daylight import PlanetConfig, classify_daylight, day_length_series


def fill_polar_days(days, hours, latitude, planet):
    """Replace NaN entries of a series with the polar day/night value."""
    out = np.array(hours, dtype=float, copy=True)
    for i in np.flatnonzero(~np.isfinite(out)):
        out[i] = classify_daylight(days[i], latitude, planet).hours
    return out


def plot_series(latitudes, planet, out_png: str):
    fig, ax = plt.subplots(figsize=(12, 6), constrained_layout=True)
    full_day = planet.seconds_per_day / 3600.0

    for lat in latitudes:
        days, hours = day_length_series(lat, planet)
        hours = fill_polar_days(days, hours, lat, planet)
        ax.plot(days, hours, label=f"{lat:+.0f}°")

    ax.axvline(planet.last_solstice_day, color="gray", linestyle="--", linewidth=1, label="Last solstice")
    ax.set_title(f"Day length over one orbit (P = {planet.days_per_year:.1f} days, "
                 f"tilt = {planet.axial_tilt:.2f}°, e = {planet.eccentricity:.4f})")
    ax.set_xlabel("Days since perihelion")
    ax.set_ylabel("Daylight (hours)")
    ax.set_ylim(0, full_day)
    ax.grid(True)
    ax.legend()
    fig.savefig(out_png, dpi=150)
    plt.close(fig)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot annual day length curves.")
    parser.add_argument("--lat", type=float, nargs="+", default=[0.0, 30.0, 50.0, 65.0, 80.0],
                        help="Latitudes in degrees")
    parser.add_argument("--out", "-o", type=str, default=os.path.join("output", "daylight_series.png"))
    args = parser.parse_args(argv)

    planet = PlanetConfig.from_env()
    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    print(f"[Plot] Latitudes: {args.lat}")
    plot_series(args.lat, planet, args.out)
    print(f"[Plot] Saved plot to {args.out}")
    return args.out


if __name__ == "__main__":
    main()
