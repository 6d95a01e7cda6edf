"""
pytest configuration

Goals:
- keep tests fast and deterministic
- never pick up DL_* overrides from the calling shell
- avoid interactive plotting backends
"""

import os
import sys

import pytest

# Ensure project root on sys.path for 'daylight' and 'scripts' imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Force non-interactive backend for matplotlib (avoid display requirements)
os.environ.setdefault("MPLBACKEND", "Agg")

DL_ENV_VARS = (
    "DL_LAST_SOLSTICE_DAY",
    "DL_SECONDS_PER_DAY",
    "DL_DAYS_PER_YEAR",
    "DL_ECCENTRICITY",
    "DL_SEMI_MAJOR_AXIS",
    "DL_MASS_OF_SUN",
    "DL_AXIAL_TILT",
    "DL_SOLAR_RADIUS",
    "DL_REFRACTION",
    "DL_G",
    "DL_DEBUG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Earth defaults unless a test sets DL_* explicitly
    for name in DL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("MPLBACKEND", "Agg")
    yield


@pytest.fixture
def point_source_earth():
    """Earth orbit with a point sun and no refraction."""
    from daylight import EARTH

    return EARTH.replace(solar_radius=0.0, refraction_at_sunset=0.0)
