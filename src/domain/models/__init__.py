from .geo import GeoPoint
from .route import OrderedPath, RouteLocation, WasteRoute
from .stop import Stop

__all__ = [
    "GeoPoint",
    "OrderedPath",
    "RouteLocation",
    "Stop",
    "WasteRoute",
]
