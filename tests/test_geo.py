import pytest

from scouttrips.geo import (
    DriveTimeCache,
    coord_key,
    estimate_drive_minutes,
    estimate_flight_hours,
    haversine_km,
)
from scouttrips.models import Coordinates


ORLANDO = Coordinates(lat=28.5383, lng=-81.3792)
TAMPA = Coordinates(lat=27.9506, lng=-82.4572)
DALLAS = Coordinates(lat=32.7767, lng=-96.7970)


def test_haversine_zero_for_same_point():
    assert haversine_km(ORLANDO, ORLANDO) == 0.0


def test_haversine_along_meridian_matches_arc_length():
    north = Coordinates(lat=ORLANDO.lat + 10.0, lng=ORLANDO.lng)
    expected = 6371.0 * 10.0 * 3.141592653589793 / 180.0
    assert haversine_km(ORLANDO, north) == pytest.approx(expected, rel=1e-9)


def test_drive_estimate_is_symmetric():
    for a, b in [(ORLANDO, TAMPA), (TAMPA, DALLAS), (ORLANDO, DALLAS)]:
        assert estimate_drive_minutes(a, b) == estimate_drive_minutes(b, a)


def test_drive_estimate_uses_detour_and_highway_speed():
    km = haversine_km(ORLANDO, TAMPA)
    assert estimate_drive_minutes(ORLANDO, TAMPA) == round(km * 1.3 / 90 * 60)
    assert 90 < estimate_drive_minutes(ORLANDO, TAMPA) < 130


def test_flight_hours_include_ground_overhead():
    assert estimate_flight_hours(2000) == pytest.approx(5.5)
    assert estimate_flight_hours(0) == pytest.approx(3.0)
    assert estimate_flight_hours(1234) == pytest.approx(4.5)


def test_coord_key_rounds_to_four_decimals():
    assert coord_key(Coordinates(lat=28.538349, lng=-81.37921)) == "28.5383,-81.3792"


def test_drive_cache_shares_slot_for_both_directions():
    cache = DriveTimeCache()
    forward = cache.minutes(ORLANDO, TAMPA)
    backward = cache.minutes(TAMPA, ORLANDO)
    assert forward == backward == estimate_drive_minutes(ORLANDO, TAMPA)
    assert len(cache) == 1
