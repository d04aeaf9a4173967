from __future__ import annotations

import os

from src.adapters.backend import env_bool
from src.adapters.geocoding.nominatim_geocoder import NominatimGeocoder
from src.adapters.persistence.http_route_repository import HttpRouteRepository
from src.adapters.persistence.local_route_repository import LocalRouteRepository
from src.app.ports.output import IGeocoder, IRouteRepository
from src.app.services.location_ingest_service import LocationIngestService
from src.app.services.route_path_service import RoutePathService


def get_route_repository() -> IRouteRepository:
    # A local CSV directory wins over the REST backend when configured.
    if os.getenv("ROUTE_DATA_PATH"):
        return LocalRouteRepository()
    return HttpRouteRepository()


def get_route_path_service() -> RoutePathService:
    return RoutePathService(route_repository=get_route_repository())


def get_location_ingest_service() -> LocationIngestService:
    geocoder: IGeocoder | None = None
    if env_bool("GEOCODER_ENABLED", True):
        geocoder = NominatimGeocoder()

    return LocationIngestService(
        route_repository=get_route_repository(), geocoder=geocoder
    )
