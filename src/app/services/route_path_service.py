from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IRouteRepository
from src.domain.algorithms.convex_hull import convex_hull
from src.domain.algorithms.geo_utils import haversine_distance_km
from src.domain.algorithms.sequencing import build_ordered_path
from src.domain.exceptions import EmptyRoute
from src.domain.models import GeoPoint, OrderedPath, RouteLocation, Stop, WasteRoute

logger = logging.getLogger(__name__)


def locations_to_stops(locations: tuple[RouteLocation, ...]) -> list[Stop]:
    return [Stop(location=loc.location, identity=loc) for loc in locations]


@dataclass(slots=True)
class RoutePathService:
    """Map-facing views over the routes stored in the backend.

    - Ordered path: saved locations in nearest-neighbor visiting order.
    - Service area: convex hull of the saved locations.
    - Nearest route: which route passes closest to a citizen's address.
    """

    route_repository: IRouteRepository

    def list_routes(self) -> tuple[WasteRoute, ...]:
        routes = list(self.route_repository.list_routes())
        routes.sort(key=lambda r: (r.name, r.route_id))
        return tuple(routes)

    def _require_locations(self, route_id: int) -> tuple[RouteLocation, ...]:
        locations = self.route_repository.list_locations(route_id)
        if not locations:
            raise EmptyRoute(f"No locations found for route {route_id}")
        return locations

    def ordered_path(self, *, route_id: int) -> OrderedPath:
        locations = self._require_locations(route_id)
        path = build_ordered_path(locations_to_stops(locations))
        logger.debug(
            "Sequenced %d locations for route %s (%.3f km)",
            len(path.stops),
            route_id,
            path.total_distance_km,
        )
        return path

    def service_area(self, *, route_id: int) -> tuple[RouteLocation, ...]:
        locations = self._require_locations(route_id)
        hull = convex_hull(locations_to_stops(locations))
        return tuple(stop.identity for stop in hull)

    def nearest_route(self, *, point: GeoPoint) -> tuple[WasteRoute, float]:
        best: tuple[WasteRoute, float] | None = None

        for route in self.list_routes():
            locations = self.route_repository.list_locations(route.route_id)
            if not locations:
                continue
            d = min(haversine_distance_km(point, loc.location) for loc in locations)
            if best is None or d < best[1]:
                best = (route, d)

        if best is None:
            raise EmptyRoute("No route has any saved location")
        return best
