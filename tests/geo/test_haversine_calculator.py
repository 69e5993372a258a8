import math

import pytest

from src.geo_attendance.geo_attendance.core.constants import EARTH_RADIUS_METERS
from src.geo_attendance.geo_attendance.geo.calculator.haversine_calculator import HaversineDistanceCalculator
from src.geo_attendance.geo_attendance.geo.model import GeoPoint

calc = HaversineDistanceCalculator()


@pytest.mark.parametrize(
    "lat,lng",
    [(0.0, 0.0), (19.0760, 72.8777), (-33.8688, 151.2093), (90.0, 0.0), (-90.0, 180.0), (51.5, -0.12)],
)
def test_distance_to_self_is_zero(lat, lng):
    p = GeoPoint(lat, lng)
    assert calc.distance(p, p) == 0.0


@pytest.mark.parametrize(
    "a,b",
    [
        (GeoPoint(0, 0), GeoPoint(0, 1)),
        (GeoPoint(19.0760, 72.8777), GeoPoint(19.0761, 72.8778)),
        (GeoPoint(40.7128, -74.0060), GeoPoint(51.5074, -0.1278)),
        (GeoPoint(-33.8688, 151.2093), GeoPoint(35.6762, 139.6503)),
        (GeoPoint(89.9, 10.0), GeoPoint(-89.9, -170.0)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert calc.distance(a, b) == pytest.approx(calc.distance(b, a), abs=1e-6)


def test_one_degree_of_longitude_at_equator():
    assert calc.distance(GeoPoint(0, 0), GeoPoint(0, 1)) == pytest.approx(111195, abs=50)


def test_short_campus_distance():
    d = calc.distance(GeoPoint(19.0761, 72.8778), GeoPoint(19.0760, 72.8777))
    assert d == pytest.approx(15.30, abs=0.05)


def test_distance_grows_with_separation():
    origin = GeoPoint(0, 0)
    distances = [calc.distance(origin, GeoPoint(0, deg)) for deg in (0.001, 0.1, 1, 10, 90, 179)]
    assert distances == sorted(distances)
    assert len(set(distances)) == len(distances)


@pytest.mark.parametrize(
    "a,b",
    [
        (GeoPoint(0, 0), GeoPoint(0, 180)),
        (GeoPoint(90, 0), GeoPoint(-90, 0)),
        (GeoPoint(45, 30), GeoPoint(-45, -150)),
    ],
)
def test_antipodal_points_are_half_circumference(a, b):
    d = calc.distance(a, b)
    assert not math.isnan(d)
    assert d == pytest.approx(math.pi * EARTH_RADIUS_METERS, rel=1e-6)


def test_near_identical_points_stay_non_negative():
    d = calc.distance(GeoPoint(10.0, 10.0), GeoPoint(10.0, 10.0 + 1e-12))
    assert 0.0 <= d < 1e-3
