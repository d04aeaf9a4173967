from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from src.app.ports.output import IGeocoder, IRouteRepository
from src.domain.algorithms.sequencing import sequence_by_location
from src.domain.exceptions import RouteNotFound
from src.domain.models import GeoPoint, RouteLocation

logger = logging.getLogger(__name__)


def fallback_location_name(point: GeoPoint) -> str:
    return f"Location at {point.lat:.4f}, {point.lon:.4f}"


@dataclass(frozen=True, slots=True)
class FailedSave:
    location: RouteLocation
    error: str


@dataclass(slots=True)
class SaveReport:
    saved: list[RouteLocation] = field(default_factory=list)
    failed: list[FailedSave] = field(default_factory=list)
    skipped: list[RouteLocation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed and not self.skipped


@dataclass(slots=True)
class LocationIngestService:
    """Adds picked map points to a route, one backend call at a time."""

    route_repository: IRouteRepository
    geocoder: IGeocoder | None = None

    def _name_for(self, point: GeoPoint, explicit: str | None) -> str:
        if explicit and explicit.strip():
            return explicit.strip()
        if self.geocoder is not None:
            name = self.geocoder.reverse(point)
            if name:
                return name
        return fallback_location_name(point)

    def save_locations(
        self,
        *,
        route_id: int,
        points: Sequence[GeoPoint],
        names: Sequence[str | None] | None = None,
        sequence: bool = False,
        continue_on_error: bool = True,
    ) -> SaveReport:
        if names is not None and len(names) != len(points):
            raise ValueError("names must match points one to one")

        if not any(r.route_id == route_id for r in self.route_repository.list_routes()):
            raise RouteNotFound(f"Route {route_id} not found")

        pairs = list(zip(points, names if names is not None else [None] * len(points)))
        if sequence:
            pairs = sequence_by_location(pairs, lambda pair: pair[0])

        pending = [
            RouteLocation(
                route_id=route_id,
                name=self._name_for(point, name),
                location=point,
                order=i,
            )
            for i, (point, name) in enumerate(pairs, start=1)
        ]

        report = SaveReport()
        for i, loc in enumerate(pending):
            try:
                self.route_repository.add_location(loc)
            except Exception as exc:
                logger.warning(
                    "Saving location %r on route %s failed: %s", loc.name, route_id, exc
                )
                report.failed.append(
                    FailedSave(location=loc, error=f"{type(exc).__name__}: {exc}")
                )
                if not continue_on_error:
                    report.skipped.extend(pending[i + 1 :])
                    break
                continue
            report.saved.append(loc)

        logger.info(
            "Route %s: saved %d, failed %d, skipped %d locations",
            route_id,
            len(report.saved),
            len(report.failed),
            len(report.skipped),
        )
        return report
