from .routes import EmptyRoute, RouteError, RouteNotFound

__all__ = ["EmptyRoute", "RouteError", "RouteNotFound"]
