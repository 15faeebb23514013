"""Duplicate route detection.

Keeps every accepted route grouped by its exact path string and rejects
a candidate whose method set overlaps one already recorded at that
path. Paths are compared as plain strings: ``/users/{id}`` and
``/users/{uid}`` never collide here, even though a router might match
the same request with either.

Entries are insert-only. Nothing is ever removed or replaced.
"""

import logging

from roost.errors import DuplicateRouteError
from roost.routing.methods import describe, overlaps
from roost.routing.route import RouteSpec

logger = logging.getLogger("roost.routing")


class ConflictDetector:
    """Tracks accepted routes per path and rejects overlapping ones.

    Usage::

        detector = ConflictDetector()
        detector.check(RouteSpec("/users", h1, ExplicitMethods.of(["GET"])))
        detector.check(RouteSpec("/users", h2, ExplicitMethods.of(["POST"])))
        detector.check(RouteSpec("/users", h3, ANY))  # DuplicateRouteError

    Not thread-safe on its own; ``RouteRegistry`` serializes access.
    """

    __slots__ = ("_by_path", "_count")

    def __init__(self) -> None:
        self._by_path: dict[str, list[RouteSpec]] = {}
        self._count = 0

    def find_conflict(self, route: RouteSpec) -> RouteSpec | None:
        """Return the first recorded route that blocks ``route``, if any.

        Pure lookup: nothing is recorded.
        """
        for existing in self._by_path.get(route.path, ()):
            if overlaps(existing.methods, route.methods):
                return existing
        return None

    def check(self, route: RouteSpec) -> None:
        """Accept ``route`` or raise ``DuplicateRouteError``.

        On success the route is recorded and later candidates at the
        same path are checked against it. On failure nothing changes.
        """
        conflicting = self.find_conflict(route)
        if conflicting is not None:
            logger.warning(
                "Rejected route %s [%s]: conflicts with %s [%s]",
                route.path,
                describe(route.methods),
                conflicting.label,
                describe(conflicting.methods),
            )
            raise DuplicateRouteError(route.path, describe(route.methods), conflicting)
        self._by_path.setdefault(route.path, []).append(route)
        self._count += 1

    @property
    def paths(self) -> tuple[str, ...]:
        """Every path with at least one accepted route, in first-seen order."""
        return tuple(self._by_path)

    def routes_for(self, path: str) -> tuple[RouteSpec, ...]:
        return tuple(self._by_path.get(path, ()))

    def __len__(self) -> int:
        return self._count
