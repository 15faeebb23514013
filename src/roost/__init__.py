"""Roost — route registration with duplicate detection.

Collects path + method routes at startup, rejects any that overlap an
existing registration, and forwards the rest to a path-matching router.

Basic usage::

    from roost import RouteRegistry

    registry = RouteRegistry(router)  # any object with add_route()
    registry.get("/users", list_users)
    registry.post("/users", create_user)
    registry.get("/users", other)  # DuplicateRouteError
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ANY",
    "AnyMethod",
    "ConfigurationError",
    "DuplicateRouteError",
    "ExplicitMethods",
    "Methods",
    "RegistryConfig",
    "RoostError",
    "RouteRegistry",
    "RouteSink",
    "RouteSpec",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    if name == "RouteRegistry":
        from roost.registry import RouteRegistry

        return RouteRegistry

    if name == "RegistryConfig":
        from roost.config import RegistryConfig

        return RegistryConfig

    if name == "RouteSpec":
        from roost.routing.route import RouteSpec

        return RouteSpec

    if name == "RouteSink":
        from roost.routing.protocol import RouteSink

        return RouteSink

    if name in ("ANY", "AnyMethod", "ExplicitMethods", "Methods"):
        from roost.routing import methods as _methods

        return getattr(_methods, name)

    if name in ("RoostError", "ConfigurationError", "DuplicateRouteError"):
        from roost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
