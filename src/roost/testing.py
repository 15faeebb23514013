"""Test helpers for applications that register routes with roost.

``RecordingRouter`` stands in for a real path-matching router and
remembers every route it was given, in order.
"""

from roost.registry import RouteRegistry
from roost.routing.route import RouteSpec


class RecordingRouter:
    """A ``RouteSink`` that records ``add_route`` calls.

    Usage::

        router = RecordingRouter()
        registry = RouteRegistry(router)
        registry.get("/", index)
        assert router.added == [registry.routes[0]]
    """

    __slots__ = ("added",)

    def __init__(self) -> None:
        self.added: list[RouteSpec] = []

    def add_route(self, route: RouteSpec) -> None:
        self.added.append(route)


# ---------------------------------------------------------------------------
# Registry assertion helpers
# ---------------------------------------------------------------------------


def assert_registered(registry: RouteRegistry, path: str, method: str) -> RouteSpec:
    """Assert exactly one route at *path* answers to *method* and return it."""
    matches = [
        route for route in registry.routes if route.path == path and route.allows_method(method)
    ]
    assert matches, (
        f"No route registered for {method} {path!r}.\n"
        f"Registered: {[(r.path, str(r.methods)) for r in registry.routes]}"
    )
    assert len(matches) == 1, f"{len(matches)} routes answer to {method} {path!r}"
    return matches[0]


def assert_not_registered(registry: RouteRegistry, path: str, method: str) -> None:
    """Assert no route at *path* answers to *method*."""
    for route in registry.routes:
        assert not (route.path == path and route.allows_method(method)), (
            f"Route {route.label!r} answers to {method} {path!r}"
        )
