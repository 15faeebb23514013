"""Roost exception hierarchy.

Shared across the registry, the conflict detector, and the CLI so every
module raises and catches the same types.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roost.routing.route import RouteSpec


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when a route or registry is configured incorrectly.

    Covers empty method lists, method names that are not valid HTTP
    tokens, and routers that do not implement ``add_route``.
    """


class DuplicateRouteError(RoostError):
    """A route collides with one that was registered earlier.

    Two routes collide when they share the exact same path string and
    their method sets overlap. Carries the candidate ``path`` and its
    method description, plus the ``conflicting`` route that blocks it.
    """

    def __init__(self, path: str, methods: str, conflicting: "RouteSpec") -> None:
        from roost.routing.methods import describe

        self.path = path
        self.methods = methods
        self.conflicting = conflicting
        handler_name = getattr(
            conflicting.handler, "__qualname__", repr(conflicting.handler)
        )
        super().__init__(
            f"Duplicate route detected: path {path!r} answering to methods "
            f"[{methods}] conflicts with existing route {conflicting.label!r} "
            f"({handler_name}) answering to methods [{describe(conflicting.methods)}]"
        )
