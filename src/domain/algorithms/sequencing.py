from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from src.domain.algorithms.geo_utils import haversine_distance_km
from src.domain.models import GeoPoint, OrderedPath, Stop

T = TypeVar("T")


def sequence_stops(stops: Sequence[Stop]) -> list[Stop]:
    """Order stops with the greedy nearest-neighbor heuristic.

    The path always starts at ``stops[0]``. Each following stop is the
    unvisited one closest (great-circle) to the stop appended last. On an
    exact distance tie the candidate seen first wins; candidates keep their
    input order, so identical input always yields identical output.

    This is a heuristic, not an optimal tour. There is no re-rooting and no
    2-opt pass, so a locally nearest choice can leave a far stop behind and
    produce a visible zig-zag. Cost is O(n^2) distance evaluations, fine for
    the tens of stops a collection route has.

    The input is never mutated and the result is always a permutation of it.
    """

    if len(stops) <= 1:
        return list(stops)

    remaining = list(stops)
    current = remaining.pop(0)
    ordered = [current]

    while remaining:
        # min() keeps the first minimal element, which is the tie-break.
        here = current.location
        idx = min(
            range(len(remaining)),
            key=lambda i: haversine_distance_km(here, remaining[i].location),
        )
        current = remaining.pop(idx)
        ordered.append(current)

    return ordered


def build_ordered_path(stops: Sequence[Stop]) -> OrderedPath:
    ordered = tuple(sequence_stops(stops))
    legs = tuple(
        haversine_distance_km(a.location, b.location)
        for a, b in zip(ordered, ordered[1:])
    )
    return OrderedPath(stops=ordered, leg_distances_km=legs)


def sequence_by_location(
    items: Sequence[T], location_of: Callable[[T], GeoPoint]
) -> list[T]:
    """Nearest-neighbor order for arbitrary items that have a location."""

    stops = [Stop(location=location_of(item), identity=item) for item in items]
    return [stop.identity for stop in sequence_stops(stops)]
