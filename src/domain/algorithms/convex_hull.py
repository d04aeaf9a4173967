from __future__ import annotations

import math
from typing import Sequence

from src.domain.models import Stop


def _cross(o: Stop, a: Stop, b: Stop) -> float:
    # x is longitude, y is latitude.
    return (a.longitude - o.longitude) * (b.latitude - o.latitude) - (
        a.latitude - o.latitude
    ) * (b.longitude - o.longitude)


def convex_hull(stops: Sequence[Stop]) -> list[Stop]:
    """Graham scan over a planar lon/lat projection.

    Used for drawing a route's service area, so the planar approximation is
    fine. Returns hull vertices counter-clockwise starting from the lowest
    (then left-most) stop. Collinear boundary points are dropped. Fewer than
    three stops are returned as-is.
    """

    if len(stops) < 3:
        return list(stops)

    pivot_idx = min(
        range(len(stops)), key=lambda i: (stops[i].latitude, stops[i].longitude)
    )
    pivot = stops[pivot_idx]
    rest = [s for i, s in enumerate(stops) if i != pivot_idx]

    def _polar_key(s: Stop) -> tuple[float, float]:
        dx = s.longitude - pivot.longitude
        dy = s.latitude - pivot.latitude
        return (math.atan2(dy, dx), dx * dx + dy * dy)

    rest.sort(key=_polar_key)

    hull: list[Stop] = [pivot]
    for s in rest:
        while len(hull) > 1 and _cross(hull[-2], hull[-1], s) <= 0:
            hull.pop()
        hull.append(s)

    return hull
