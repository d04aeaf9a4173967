from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import IRouteRepository
from src.domain.exceptions import RouteNotFound
from src.domain.models import GeoPoint, RouteLocation, WasteRoute

LOCATION_FIELDS = (
    "location_id",
    "route_id",
    "location_name",
    "latitude",
    "longitude",
    "order",
)


@dataclass(slots=True)
class LocalRouteRepository(IRouteRepository):
    """Routes and locations kept as CSV files in a directory.

    Handy for local development without the portal backend.

    Env vars:
      - ROUTE_DATA_PATH: directory containing routes.txt and locations.txt

    Locations are returned in file order, which is the order they were added.
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("ROUTE_DATA_PATH") or "data/routes"
        return Path(value)

    def list_routes(self) -> tuple[WasteRoute, ...]:
        routes: list[WasteRoute] = []
        with (self._base() / "routes.txt").open("r", encoding="utf-8", newline="") as fp:
            reader = csv.DictReader(fp)
            for row in reader:
                raw_id = (row.get("route_id") or "").strip()
                if not raw_id:
                    continue
                routes.append(
                    WasteRoute(
                        route_id=int(raw_id),
                        name=(row.get("route_name") or "").strip(),
                    )
                )
        return tuple(routes)

    def _read_locations(self) -> list[RouteLocation]:
        path = self._base() / "locations.txt"
        if not path.exists():
            return []

        out: list[RouteLocation] = []
        with path.open("r", encoding="utf-8", newline="") as fp:
            reader = csv.DictReader(fp)
            for row in reader:
                location_id = (row.get("location_id") or "").strip()
                order = (row.get("order") or "").strip()
                try:
                    loc = RouteLocation(
                        route_id=int(row["route_id"]),
                        name=(row.get("location_name") or "").strip(),
                        location=GeoPoint(
                            lat=float(row["latitude"]), lon=float(row["longitude"])
                        ),
                        location_id=int(location_id) if location_id else None,
                        order=int(order) if order else None,
                    )
                except (TypeError, ValueError, KeyError):
                    continue
                out.append(loc)
        return out

    def _ensure_route(self, route_id: int) -> None:
        if not any(r.route_id == route_id for r in self.list_routes()):
            raise RouteNotFound(f"Route {route_id} not found")

    def list_locations(self, route_id: int) -> tuple[RouteLocation, ...]:
        self._ensure_route(route_id)
        return tuple(loc for loc in self._read_locations() if loc.route_id == route_id)

    def add_location(self, location: RouteLocation) -> None:
        self._ensure_route(location.route_id)

        existing = self._read_locations()
        next_id = max((loc.location_id or 0 for loc in existing), default=0) + 1

        path = self._base() / "locations.txt"
        write_header = not path.exists() or path.stat().st_size == 0
        with path.open("a", encoding="utf-8", newline="") as fp:
            writer = csv.DictWriter(fp, fieldnames=LOCATION_FIELDS)
            if write_header:
                writer.writeheader()
            writer.writerow(
                {
                    "location_id": next_id,
                    "route_id": location.route_id,
                    "location_name": location.name,
                    "latitude": location.location.lat,
                    "longitude": location.location.lon,
                    "order": "" if location.order is None else location.order,
                }
            )
