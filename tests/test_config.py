"""
PlanetConfig: Earth defaults, validation at construction, env overrides.
"""

import dataclasses
import math

import pytest

from daylight import EARTH, PlanetConfig, debug_from_env


def test_earth_defaults():
    cfg = PlanetConfig()
    assert cfg == EARTH
    assert cfg.last_solstice_day == 349
    assert cfg.seconds_per_day == 86400
    assert cfg.days_per_year == 365.259
    assert cfg.eccentricity == 0.0167
    assert cfg.semi_major_axis == 1.496e11
    assert cfg.mass_of_sun == 1.989e30
    assert cfg.axial_tilt == -23.44
    assert cfg.solar_radius == 6.9634e8
    assert cfg.refraction_at_sunset == 0.3
    assert cfg.gravitational_constant == 6.67408e-11


def test_fields_are_coerced_to_float():
    cfg = PlanetConfig(days_per_year=687, seconds_per_day="88775")
    assert isinstance(cfg.days_per_year, float) and cfg.days_per_year == 687.0
    assert isinstance(cfg.seconds_per_day, float) and cfg.seconds_per_day == 88775.0


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        EARTH.axial_tilt = 0.0


@pytest.mark.parametrize(
    "field, value",
    [
        ("days_per_year", 0.0),
        ("days_per_year", -365.0),
        ("seconds_per_day", 0.0),
        ("semi_major_axis", -1.0),
        ("mass_of_sun", 0.0),
        ("gravitational_constant", 0.0),
        ("solar_radius", -1.0),
        ("axial_tilt", math.nan),
        ("eccentricity", math.inf),
        ("latitude_offset", 1.0),
    ],
)
def test_invalid_values_rejected(field, value):
    expected = TypeError if field == "latitude_offset" else ValueError
    with pytest.raises(expected):
        PlanetConfig(**{field: value})


def test_non_numeric_rejected():
    with pytest.raises(ValueError, match="axial_tilt"):
        PlanetConfig(axial_tilt="steep")


def test_eccentricity_and_tilt_not_bounded():
    cfg = PlanetConfig(eccentricity=1.5, axial_tilt=120.0, solar_radius=0.0)
    assert cfg.eccentricity == 1.5
    assert cfg.axial_tilt == 120.0


def test_replace_revalidates():
    cfg = EARTH.replace(axial_tilt=25.19)
    assert cfg.axial_tilt == 25.19
    assert cfg.days_per_year == EARTH.days_per_year
    with pytest.raises(ValueError):
        EARTH.replace(days_per_year=0.0)


def test_from_env(monkeypatch):
    monkeypatch.setenv("DL_DAYS_PER_YEAR", "668.6")
    monkeypatch.setenv("DL_AXIAL_TILT", "25.19")
    monkeypatch.setenv("DL_ECCENTRICITY", "0.0934")
    cfg = PlanetConfig.from_env()
    assert cfg.days_per_year == 668.6
    assert cfg.axial_tilt == 25.19
    assert cfg.eccentricity == 0.0934
    assert cfg.semi_major_axis == EARTH.semi_major_axis


def test_from_env_unparsable_falls_back(monkeypatch):
    monkeypatch.setenv("DL_REFRACTION", "lots")
    assert PlanetConfig.from_env().refraction_at_sunset == 0.3


def test_from_env_without_overrides_is_earth():
    assert PlanetConfig.from_env() == EARTH


def test_debug_from_env(monkeypatch):
    assert debug_from_env() is False
    monkeypatch.setenv("DL_DEBUG", "1")
    assert debug_from_env() is True
    monkeypatch.setenv("DL_DEBUG", "yes")
    assert debug_from_env() is False


def test_with_kepler_period():
    cfg = PlanetConfig.with_kepler_period(1.524 * 1.496e11, 1.989e30, axial_tilt=25.19)
    # Mars: ~687 Earth days
    assert cfg.days_per_year == pytest.approx(687.0, abs=2.0)
    assert cfg.axial_tilt == 25.19


def test_with_kepler_period_rejects_explicit_year():
    with pytest.raises(ValueError, match="days_per_year"):
        PlanetConfig.with_kepler_period(1.496e11, 1.989e30, days_per_year=400.0)
