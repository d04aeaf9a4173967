from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Stop:
    """A point on a route plus whatever the caller wants carried along.

    `identity` is never inspected by the algorithms; it comes back out
    exactly as it went in.
    """

    location: GeoPoint
    identity: Any = None

    @property
    def latitude(self) -> float:
        return self.location.lat

    @property
    def longitude(self) -> float:
        return self.location.lon
