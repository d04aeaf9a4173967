from __future__ import annotations

from pathlib import Path

import pytest

from src.adapters.persistence.local_route_repository import LocalRouteRepository
from src.domain.exceptions import RouteNotFound
from src.domain.models import GeoPoint, RouteLocation


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "routes.txt").write_text(
        "route_id,route_name\n1,Aundh\n2,Baner\n", encoding="utf-8"
    )
    (tmp_path / "locations.txt").write_text(
        "location_id,route_id,location_name,latitude,longitude,order\n"
        "1,1,Depot,18.56,73.80,\n"
        "2,2,Hill,18.55,73.78,1\n"
        "3,1,Market,18.57,73.81,2\n"
        "4,1,Broken,not-a-number,73.81,\n"
        "5,1,Typo,185.6,73.81,\n"
        "6,2,NoFix,nan,73.78,\n"
        "7,2,BadOrder,18.55,73.78,first\n",
        encoding="utf-8",
    )
    return tmp_path


def test_reads_routes_and_locations_in_file_order(data_dir: Path) -> None:
    repo = LocalRouteRepository(base_path=data_dir)

    assert [r.name for r in repo.list_routes()] == ["Aundh", "Baner"]

    locations = repo.list_locations(1)
    assert [loc.name for loc in locations] == ["Depot", "Market"]
    assert locations[0].order is None
    assert locations[1].order == 2


def test_unknown_route_raises(data_dir: Path) -> None:
    repo = LocalRouteRepository(base_path=data_dir)
    with pytest.raises(RouteNotFound):
        repo.list_locations(7)


def test_add_location_appends_with_next_id(data_dir: Path) -> None:
    repo = LocalRouteRepository(base_path=data_dir)

    repo.add_location(
        RouteLocation(route_id=2, name="School", location=GeoPoint(lat=18.54, lon=73.77), order=2)
    )

    added = repo.list_locations(2)[-1]
    assert added.name == "School"
    assert added.location_id == 4
    assert added.order == 2


def test_add_location_creates_locations_file(tmp_path: Path) -> None:
    (tmp_path / "routes.txt").write_text("route_id,route_name\n1,Aundh\n", encoding="utf-8")
    repo = LocalRouteRepository(base_path=tmp_path)

    assert repo.list_locations(1) == ()
    repo.add_location(
        RouteLocation(route_id=1, name="Depot", location=GeoPoint(lat=18.56, lon=73.8))
    )

    assert [loc.location_id for loc in repo.list_locations(1)] == [1]


def test_rows_with_invalid_coordinates_or_numbers_are_skipped(data_dir: Path) -> None:
    repo = LocalRouteRepository(base_path=data_dir)

    assert [loc.name for loc in repo.list_locations(1)] == ["Depot", "Market"]
    assert [loc.name for loc in repo.list_locations(2)] == ["Hill"]


def test_add_location_writes_header_into_empty_file(tmp_path: Path) -> None:
    (tmp_path / "routes.txt").write_text("route_id,route_name\n1,Aundh\n", encoding="utf-8")
    (tmp_path / "locations.txt").touch()
    repo = LocalRouteRepository(base_path=tmp_path)

    repo.add_location(
        RouteLocation(route_id=1, name="Depot", location=GeoPoint(lat=18.56, lon=73.8))
    )

    assert [loc.name for loc in repo.list_locations(1)] == ["Depot"]
    assert (tmp_path / "locations.txt").read_text(encoding="utf-8").startswith(
        "location_id,route_id"
    )
