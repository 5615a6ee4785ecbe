from .routes import ROUTES, RouteDescriptor, router

__all__ = ["ROUTES", "RouteDescriptor", "router"]
