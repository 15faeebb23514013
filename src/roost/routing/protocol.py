"""Router protocol — the one capability the registry consumes.

A router is any object with an ``add_route`` method::

    class MyRouter:
        def add_route(self, route: RouteSpec) -> None: ...

No base class required. The registry checks the shape, not the lineage.
Path compilation and request matching are entirely the router's job.
"""

from typing import Protocol, runtime_checkable

from roost.routing.route import RouteSpec


@runtime_checkable
class RouteSink(Protocol):
    """Protocol for path-matching routers that accept registered routes."""

    def add_route(self, route: RouteSpec) -> None: ...
