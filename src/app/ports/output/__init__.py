from .geocoder import IGeocoder
from .route_repository import IRouteRepository

__all__ = [
    "IGeocoder",
    "IRouteRepository",
]
