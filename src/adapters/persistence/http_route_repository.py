from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

import httpx

from src.adapters.backend import backend_client
from src.app.ports.output import IRouteRepository
from src.domain.exceptions import RouteNotFound
from src.domain.models import GeoPoint, RouteLocation, WasteRoute


def _optional_int(raw: Any) -> int | None:
    if raw is None or raw == "":
        return None
    return int(raw)


def _route_from_json(item: Mapping[str, Any]) -> WasteRoute:
    return WasteRoute(
        route_id=int(item["routeId"]), name=str(item.get("routeName") or "")
    )


def _location_from_json(item: Mapping[str, Any], route_id: int) -> RouteLocation:
    return RouteLocation(
        route_id=_optional_int(item.get("routeId")) or route_id,
        name=str(item.get("locationName") or ""),
        location=GeoPoint(lat=float(item["latitude"]), lon=float(item["longitude"])),
        location_id=_optional_int(item.get("locationId")),
        order=_optional_int(item.get("order")),
    )


@dataclass(slots=True)
class HttpRouteRepository(IRouteRepository):
    """Talks to the portal's REST backend.

    Env vars (see src.adapters.backend):
      - WASTE_API_BASE_URL (default: http://localhost:5000/api)
      - WASTE_API_TIMEOUT_S (default 10)
      - WASTE_API_HEADERS: optional headers, as 'Key:Value;Key2:Value2'
    """

    client_factory: Callable[[], httpx.Client] = backend_client

    def list_routes(self) -> tuple[WasteRoute, ...]:
        with self.client_factory() as client:
            resp = client.get("Route/all")
            resp.raise_for_status()
            data = resp.json() or []
        return tuple(_route_from_json(item) for item in data)

    def list_locations(self, route_id: int) -> tuple[RouteLocation, ...]:
        with self.client_factory() as client:
            resp = client.get(f"Route/alllocations/{route_id}")
            if resp.status_code == 404:
                raise RouteNotFound(f"Route {route_id} not found")
            resp.raise_for_status()
            data = resp.json() or []
        return tuple(_location_from_json(item, route_id) for item in data)

    def add_location(self, location: RouteLocation) -> None:
        body: dict[str, Any] = {
            "routeId": location.route_id,
            "locationName": location.name,
            "latitude": location.location.lat,
            "longitude": location.location.lon,
        }
        if location.order is not None:
            body["order"] = location.order

        with self.client_factory() as client:
            # The backend answers with plain text, not JSON.
            resp = client.post(f"Route/location/{location.route_id}", json=body)
            if resp.status_code == 404:
                raise RouteNotFound(f"Route {location.route_id} not found")
            resp.raise_for_status()
