from __future__ import annotations

from fastapi import APIRouter

from src.adapters.api.schemas.routes import (
    HullSchema,
    OrderedStopsSchema,
    StopSchema,
    StopsRequestSchema,
)
from src.domain.algorithms.convex_hull import convex_hull
from src.domain.algorithms.sequencing import build_ordered_path
from src.domain.models import GeoPoint, Stop

router = APIRouter(tags=["sequencing"])


def _stops_from_request(req: StopsRequestSchema) -> list[Stop]:
    return [
        Stop(location=GeoPoint(lat=s.lat, lon=s.lon), identity=s.identity)
        for s in req.stops
    ]


def _stop_to_schema(stop: Stop) -> StopSchema:
    return StopSchema(lat=stop.latitude, lon=stop.longitude, identity=stop.identity)


@router.post("/sequence", response_model=OrderedStopsSchema)
def sequence(req: StopsRequestSchema) -> OrderedStopsSchema:
    path = build_ordered_path(_stops_from_request(req))
    return OrderedStopsSchema(
        stops=[_stop_to_schema(s) for s in path.stops],
        leg_distances_km=list(path.leg_distances_km),
        total_distance_km=path.total_distance_km,
    )


@router.post("/hull", response_model=HullSchema)
def hull(req: StopsRequestSchema) -> HullSchema:
    return HullSchema(
        stops=[_stop_to_schema(s) for s in convex_hull(_stops_from_request(req))]
    )
