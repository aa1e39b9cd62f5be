# tests/test_api.py

import pytest
from datetime import datetime, timedelta, timezone

import celnav
from celnav import api
from celnav._bootstrap import build_registry
from celnav.core.errors import CoordinateRangeError, IlluminationRangeError
from celnav.core.types import Coordinate, HorizonCorrection, LunarEventDay, RingProfile
from celnav.engines.calculators import LunarCalculator, SolarCalculator
from celnav.engines.profiles import ProfileRegistry

EST = timezone(timedelta(hours=-5))
QUITO = (-0.1807, -78.4678)


@pytest.fixture
def fresh_registries(monkeypatch):
    monkeypatch.setattr(api, "_registry", build_registry())
    monkeypatch.setattr(api, "_rings", ProfileRegistry())


def test_registry_is_initialized_on_import():
    assert celnav.list_calculators() == ["lunar", "solar"]
    assert isinstance(celnav.get_calculator("solar"), SolarCalculator)
    assert celnav.calculator_info("lunar")["body"] == "moon"
    assert celnav.calculator_info("solar")["default_correction"] == {
        "angle_from_horizon": 0.0,
        "include_refraction": True,
    }


def test_unknown_calculator_lists_available():
    with pytest.raises(KeyError, match="Available"):
        celnav.get_calculator("comet")


def test_register_calculator(fresh_registries):
    custom = LunarCalculator(default_correction=HorizonCorrection(0.125, True))
    celnav.register_calculator("moon-refracted", custom)
    assert celnav.get_calculator("moon-refracted") is custom
    with pytest.raises(KeyError, match="already exists"):
        celnav.register_calculator("moon-refracted", custom)
    celnav.register_calculator("moon-refracted", LunarCalculator(), overwrite=True)


def test_provide_hands_out_both_calculators():
    nav = celnav.provide()
    assert isinstance(nav.solar(), SolarCalculator)
    assert isinstance(nav.lunar(), LunarCalculator)


def test_facade_matches_calculator():
    dt = datetime(2024, 3, 20, tzinfo=EST)
    via_api = celnav.solar_event_day(QUITO, dt)
    via_calc = celnav.provide().solar().calculate_event_day(Coordinate(*QUITO), dt)
    assert via_api == via_calc
    assert via_api.state == "RISEN_AND_SET"


def test_named_and_explicit_corrections():
    dt = datetime(2024, 3, 20, tzinfo=EST)
    named = celnav.solar_event_day(QUITO, dt, correction="sunrise")
    explicit = celnav.solar_event_day(QUITO, dt, correction=HorizonCorrection(0.0, True))
    assert named == explicit
    with pytest.raises(KeyError, match="Unknown horizon correction"):
        celnav.solar_event_day(QUITO, dt, correction="dusk")


def test_lunar_event_day_type():
    day = celnav.lunar_event_day(Coordinate(*QUITO), datetime(2024, 4, 23, tzinfo=EST))
    assert isinstance(day, LunarEventDay)


def test_ring_shortcuts_match_profiles():
    dt = datetime(2024, 3, 20, tzinfo=EST)
    solar = celnav.provide().solar()
    coord = Coordinate(*QUITO)
    assert solar.civil_twilight(coord, dt) == celnav.ring_event_day(QUITO, dt, "civil_twilight")
    assert solar.blue_hour(coord, dt) == solar.ring(coord, dt, celnav.get_ring_profile("blue_hour"))
    poly = solar.calculate_ring_event_day(coord, dt, HorizonCorrection(-18.0, False), HorizonCorrection(-12.0, False))
    astro = solar.astronomical_twilight(coord, dt)
    assert [t.kind for t in poly.events] == ["POLY"] * len(astro.events)
    assert poly.ring_duration == astro.ring_duration


def test_ring_profiles_registry(fresh_registries):
    assert celnav.list_ring_profiles() == [
        "astronomical_twilight",
        "blue_hour",
        "civil_twilight",
        "magic_hour",
        "nautical_twilight",
    ]
    golden = RingProfile("POLY", HorizonCorrection(0.0, True), HorizonCorrection(10.0, False))
    celnav.register_ring_profile("golden_10", golden)
    assert celnav.get_ring_profile("golden_10") is golden
    with pytest.raises(KeyError, match="already exists"):
        celnav.register_ring_profile("golden_10", golden)
    with pytest.raises(KeyError, match="Available"):
        celnav.get_ring_profile("purple_hour")


def test_upcoming_via_calculator():
    nav = celnav.provide()
    dt = datetime(2024, 3, 20, 3, 0, tzinfo=EST)
    short = nav.solar().find_upcoming_relative_short_event(Coordinate(*QUITO), dt)
    assert short.kind == "RISE"
    found = nav.solar().find_upcoming_relative_event_day(Coordinate(*QUITO), dt)
    assert found.events[0].millis == short.millis


@pytest.mark.parametrize("lat, lon", [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.01), (0.0, -200.0)])
def test_coordinate_range(lat, lon):
    with pytest.raises(CoordinateRangeError):
        Coordinate(lat, lon)
    with pytest.raises(ValueError):
        celnav.solar_event_day((lat, lon), datetime(2024, 3, 20, tzinfo=EST))


def test_coordinate_limits_accepted():
    Coordinate(90.0, 180.0)
    Coordinate(-90.0, -180.0)


def test_illumination_range_enforced():
    with pytest.raises(IlluminationRangeError):
        LunarEventDay(events=(), state="ERROR", illumination_percent=100.5)


def test_errors_share_a_base():
    assert issubclass(CoordinateRangeError, celnav.CelnavError)
    assert issubclass(IlluminationRangeError, celnav.CelnavError)
