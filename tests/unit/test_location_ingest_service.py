from __future__ import annotations

import pytest

from src.app.services.location_ingest_service import (
    LocationIngestService,
    fallback_location_name,
)
from src.domain.exceptions import RouteNotFound
from src.domain.models import GeoPoint, WasteRoute

from fakes import FakeGeocoder, FakeRouteRepository


def _repo(**kwargs) -> FakeRouteRepository:
    return FakeRouteRepository(routes=(WasteRoute(route_id=1, name="Aundh"),), **kwargs)


def test_saves_in_given_order_with_order_numbers() -> None:
    repo = _repo()
    svc = LocationIngestService(route_repository=repo)
    points = [GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=0.0, lon=10.0), GeoPoint(lat=0.0, lon=1.0)]

    report = svc.save_locations(route_id=1, points=points, names=["A", "C", "B"])

    assert report.ok
    assert [s.name for s in repo.saved] == ["A", "C", "B"]
    assert [s.order for s in repo.saved] == [1, 2, 3]
    assert all(s.route_id == 1 for s in repo.saved)


def test_sequence_flag_orders_before_numbering() -> None:
    repo = _repo()
    svc = LocationIngestService(route_repository=repo)
    points = [GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=0.0, lon=10.0), GeoPoint(lat=0.0, lon=1.0)]

    svc.save_locations(route_id=1, points=points, names=["A", "C", "B"], sequence=True)

    assert [(s.name, s.order) for s in repo.saved] == [("A", 1), ("B", 2), ("C", 3)]


def test_names_fall_back_to_geocoder_then_coordinates() -> None:
    repo = _repo()
    geocoder = FakeGeocoder(names={(18.5, 73.8): "FC Road"})
    svc = LocationIngestService(route_repository=repo, geocoder=geocoder)
    points = [GeoPoint(lat=18.5, lon=73.8), GeoPoint(lat=18.61234, lon=73.91)]

    svc.save_locations(route_id=1, points=points)

    assert [s.name for s in repo.saved] == ["FC Road", "Location at 18.6123, 73.9100"]


def test_explicit_name_wins_over_geocoder() -> None:
    repo = _repo()
    geocoder = FakeGeocoder(names={(18.5, 73.8): "FC Road"})
    svc = LocationIngestService(route_repository=repo, geocoder=geocoder)

    svc.save_locations(route_id=1, points=[GeoPoint(lat=18.5, lon=73.8)], names=["  Depot "])

    assert repo.saved[0].name == "Depot"


def test_failed_save_continues_by_default() -> None:
    repo = _repo(fail_names={"B"})
    svc = LocationIngestService(route_repository=repo)
    points = [GeoPoint(lat=0.0, lon=float(i)) for i in range(3)]

    report = svc.save_locations(route_id=1, points=points, names=["A", "B", "C"])

    assert [s.name for s in report.saved] == ["A", "C"]
    assert [f.location.name for f in report.failed] == ["B"]
    assert "backend said no" in report.failed[0].error
    assert report.skipped == []
    assert not report.ok


def test_failed_save_can_stop_the_batch() -> None:
    repo = _repo(fail_names={"B"})
    svc = LocationIngestService(route_repository=repo)
    points = [GeoPoint(lat=0.0, lon=float(i)) for i in range(4)]

    report = svc.save_locations(
        route_id=1, points=points, names=["A", "B", "C", "D"], continue_on_error=False
    )

    assert [s.name for s in report.saved] == ["A"]
    assert [s.name for s in report.skipped] == ["C", "D"]
    assert [s.name for s in repo.saved] == ["A"]


def test_unknown_route_saves_nothing() -> None:
    repo = _repo()
    svc = LocationIngestService(route_repository=repo)

    with pytest.raises(RouteNotFound):
        svc.save_locations(route_id=9, points=[GeoPoint(lat=0.0, lon=0.0)])
    assert repo.saved == []


def test_names_must_match_points() -> None:
    svc = LocationIngestService(route_repository=_repo())
    with pytest.raises(ValueError):
        svc.save_locations(route_id=1, points=[GeoPoint(lat=0.0, lon=0.0)], names=[])


def test_fallback_location_name_format() -> None:
    assert fallback_location_name(GeoPoint(lat=-1.5, lon=2.0)) == "Location at -1.5000, 2.0000"
