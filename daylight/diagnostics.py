from __future__ import annotations

"""
Structured trace of the daylight pipeline.

Purpose
- Collect the named intermediates of one hours_of_daylight() call in a
  DaylightTrace passed in by the caller, instead of printing from inside the
  numerical helpers.
- Render the trace as human-readable lines.

Notes
- All functions are pure (no global mutation). Callers decide where to log/print.
- Values are stored in SI units (radians, rad/s, seconds). Formatting converts
  to degrees for readability.
- Array-valued intermediates (vectorised calls) are summarised as min/mean/max.
"""

from dataclasses import asdict, dataclass
from typing import Any

import numpy as np


PREFIX = "[Daylight]"


@dataclass
class DaylightTrace:
    """Intermediate values of one daylight computation (SI units)."""

    true_anomaly: Any = None          # rad
    angular_velocity: Any = None      # rad/s
    solstice_anomaly: Any = None      # rad
    solar_declination: Any = None     # rad
    solar_disc_center: Any = None     # rad
    hour_angle_cosine: Any = None     # dimensionless
    angular_path_length: Any = None   # rad
    day_length_seconds: Any = None    # s

    def to_dict(self) -> dict:
        return asdict(self)


def _fmt(value, scale: float = 1.0, digits: int = 2) -> str:
    arr = np.asarray(value, dtype=float) * scale
    if arr.ndim == 0:
        return f"{float(arr):.{digits}f}"
    with np.errstate(invalid="ignore"):
        return (
            f"{np.nanmin(arr):.{digits}f}/{np.nanmean(arr):.{digits}f}/{np.nanmax(arr):.{digits}f}"
            " (min/mean/max)"
        )


def format_trace(trace: DaylightTrace) -> list[str]:
    """
    Render the populated fields of a trace, in pipeline order.
    """
    deg = 180.0 / np.pi
    lines: list[str] = []
    if trace.true_anomaly is not None:
        lines.append(f"{PREFIX} True anomaly is {_fmt(trace.true_anomaly, deg)} degrees")
    if trace.angular_velocity is not None:
        lines.append(
            f"{PREFIX} Angular velocity is {_fmt(trace.angular_velocity, 1e5 * deg)} "
            "x 10^-5 degrees per second"
        )
    if trace.solstice_anomaly is not None:
        lines.append(f"{PREFIX} Solstice anomaly is {_fmt(trace.solstice_anomaly, deg)} degrees")
    if trace.solar_declination is not None:
        lines.append(f"{PREFIX} Solar declination is {_fmt(trace.solar_declination, deg)} degrees")
    if trace.solar_disc_center is not None:
        lines.append(f"{PREFIX} Solar disc center is {_fmt(trace.solar_disc_center, deg)} degrees")
    if trace.angular_path_length is not None:
        lines.append(
            f"{PREFIX} Angular solar path length is {_fmt(trace.angular_path_length, deg)} degrees"
        )
    if trace.day_length_seconds is not None:
        lines.append(f"{PREFIX} Day length is {_fmt(trace.day_length_seconds, digits=0)} seconds")
    return lines
