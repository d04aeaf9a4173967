from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import RouteLocation, WasteRoute


class IRouteRepository(ABC):
    """Port for the backend that stores routes and their saved locations."""

    @abstractmethod
    def list_routes(self) -> tuple[WasteRoute, ...]:
        raise NotImplementedError

    @abstractmethod
    def list_locations(self, route_id: int) -> tuple[RouteLocation, ...]:
        """Return the saved locations of a route; raise RouteNotFound if unknown."""

    @abstractmethod
    def add_location(self, location: RouteLocation) -> None:
        """Persist one location under ``location.route_id``."""
