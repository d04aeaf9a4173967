from __future__ import annotations

import pytest

from src.domain.algorithms.geo_utils import haversine_distance_km
from src.domain.models.geo import GeoPoint


def test_haversine_zero_for_identical_points() -> None:
    p = GeoPoint(lat=18.52, lon=73.85)
    assert haversine_distance_km(p, p) == 0.0


def test_haversine_is_symmetric() -> None:
    a = GeoPoint(lat=18.52, lon=73.85)
    b = GeoPoint(lat=19.07, lon=72.87)

    assert haversine_distance_km(a, b) == haversine_distance_km(b, a)


def test_haversine_one_degree_on_equator() -> None:
    # 6371 km * pi / 180
    a = GeoPoint(lat=0.0, lon=0.0)
    b = GeoPoint(lat=0.0, lon=1.0)
    assert haversine_distance_km(a, b) == pytest.approx(111.195, abs=1e-3)


def test_haversine_antipodal_points_is_half_circumference() -> None:
    a = GeoPoint(lat=0.0, lon=0.0)
    b = GeoPoint(lat=0.0, lon=180.0)
    assert haversine_distance_km(a, b) == pytest.approx(20015.087, abs=1e-2)

