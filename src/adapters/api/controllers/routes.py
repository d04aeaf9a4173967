from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import (
    get_location_ingest_service,
    get_route_path_service,
)
from src.adapters.api.schemas.routes import (
    FailedLocationSchema,
    NearestRouteSchema,
    RouteHullSchema,
    RouteLocationSchema,
    RoutePathSchema,
    SaveLocationsRequestSchema,
    SaveLocationsResponseSchema,
    WasteRouteSchema,
)
from src.app.services.location_ingest_service import LocationIngestService
from src.app.services.route_path_service import RoutePathService
from src.domain.models import GeoPoint, RouteLocation

router = APIRouter(prefix="/routes", tags=["routes"])


def _location_to_schema(loc: RouteLocation) -> RouteLocationSchema:
    return RouteLocationSchema(
        route_id=loc.route_id,
        name=loc.name,
        lat=loc.location.lat,
        lon=loc.location.lon,
        location_id=loc.location_id,
        order=loc.order,
    )


@router.get("", response_model=list[WasteRouteSchema])
def list_routes(
    service: RoutePathService = Depends(get_route_path_service),
) -> list[WasteRouteSchema]:
    return [
        WasteRouteSchema(route_id=r.route_id, name=r.name) for r in service.list_routes()
    ]


@router.get("/nearest", response_model=NearestRouteSchema)
def nearest_route(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lon: float = Query(..., ge=-180.0, le=180.0),
    service: RoutePathService = Depends(get_route_path_service),
) -> NearestRouteSchema:
    route, distance_km = service.nearest_route(point=GeoPoint(lat=lat, lon=lon))
    return NearestRouteSchema(
        route_id=route.route_id, name=route.name, distance_km=distance_km
    )


@router.get("/{route_id}/path", response_model=RoutePathSchema)
def get_route_path(
    route_id: int,
    service: RoutePathService = Depends(get_route_path_service),
) -> RoutePathSchema:
    path = service.ordered_path(route_id=route_id)
    return RoutePathSchema(
        route_id=route_id,
        locations=[_location_to_schema(s.identity) for s in path.stops],
        leg_distances_km=list(path.leg_distances_km),
        total_distance_km=path.total_distance_km,
    )


@router.get("/{route_id}/hull", response_model=RouteHullSchema)
def get_route_hull(
    route_id: int,
    service: RoutePathService = Depends(get_route_path_service),
) -> RouteHullSchema:
    return RouteHullSchema(
        route_id=route_id,
        locations=[
            _location_to_schema(loc) for loc in service.service_area(route_id=route_id)
        ],
    )


@router.post("/{route_id}/locations", response_model=SaveLocationsResponseSchema)
def save_locations(
    route_id: int,
    req: SaveLocationsRequestSchema,
    service: LocationIngestService = Depends(get_location_ingest_service),
) -> SaveLocationsResponseSchema:
    report = service.save_locations(
        route_id=route_id,
        points=[GeoPoint(lat=p.lat, lon=p.lon) for p in req.points],
        names=[p.name for p in req.points],
        sequence=req.sequence,
        continue_on_error=req.continue_on_error,
    )
    return SaveLocationsResponseSchema(
        saved=[_location_to_schema(loc) for loc in report.saved],
        failed=[
            FailedLocationSchema(location=_location_to_schema(f.location), error=f.error)
            for f in report.failed
        ],
        skipped=[_location_to_schema(loc) for loc in report.skipped],
    )
