from .http_route_repository import HttpRouteRepository
from .local_route_repository import LocalRouteRepository

__all__ = [
    "HttpRouteRepository",
    "LocalRouteRepository",
]
