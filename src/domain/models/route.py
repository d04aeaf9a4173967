from __future__ import annotations

from dataclasses import dataclass, field

from .geo import GeoPoint
from .stop import Stop


@dataclass(frozen=True, slots=True)
class WasteRoute:
    """A collection route as stored by the portal backend."""

    route_id: int
    name: str


@dataclass(frozen=True, slots=True)
class RouteLocation:
    route_id: int
    name: str
    location: GeoPoint
    location_id: int | None = None
    order: int | None = None  # 1-based visiting order when known


@dataclass(frozen=True, slots=True)
class OrderedPath:
    stops: tuple[Stop, ...] = field(default_factory=tuple)
    # leg_distances_km[i] is the distance from stops[i] to stops[i + 1].
    leg_distances_km: tuple[float, ...] = field(default_factory=tuple)

    @property
    def total_distance_km(self) -> float:
        return float(sum(self.leg_distances_km))
