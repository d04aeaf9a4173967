class RouteError(Exception):
    """Base exception for route lookups and path building."""


class RouteNotFound(RouteError):
    """Raised when the backend does not know the requested route."""


class EmptyRoute(RouteError):
    """Raised when a route has no saved locations to work with."""
