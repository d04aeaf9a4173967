from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class StopSchema(GeoPointSchema):
    identity: Any = None


class StopsRequestSchema(BaseModel):
    stops: list[StopSchema] = []


class OrderedStopsSchema(BaseModel):
    stops: list[StopSchema]
    leg_distances_km: list[float] = []
    total_distance_km: float = 0.0


class HullSchema(BaseModel):
    stops: list[StopSchema]


class WasteRouteSchema(BaseModel):
    route_id: int
    name: str


class NearestRouteSchema(WasteRouteSchema):
    distance_km: float


class RouteLocationSchema(GeoPointSchema):
    route_id: int
    name: str
    location_id: int | None = None
    order: int | None = None


class RoutePathSchema(BaseModel):
    route_id: int
    locations: list[RouteLocationSchema]
    leg_distances_km: list[float] = []
    total_distance_km: float = 0.0


class RouteHullSchema(BaseModel):
    route_id: int
    locations: list[RouteLocationSchema]


class NewLocationSchema(GeoPointSchema):
    name: str | None = None


class SaveLocationsRequestSchema(BaseModel):
    points: list[NewLocationSchema] = Field(..., min_length=1)
    sequence: bool = False
    continue_on_error: bool = True


class FailedLocationSchema(BaseModel):
    location: RouteLocationSchema
    error: str


class SaveLocationsResponseSchema(BaseModel):
    saved: list[RouteLocationSchema] = []
    failed: list[FailedLocationSchema] = []
    skipped: list[RouteLocationSchema] = []
