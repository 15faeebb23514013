"""RouteRegistry — the public route registration API.

Builds a ``RouteSpec`` for each call, validates it against every route
registered so far, and only then records it and forwards it to the
path-matching router. Registration is all-or-nothing: a rejected route
leaves the registry, the detector, and the router untouched.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from roost.config import RegistryConfig
from roost.errors import ConfigurationError
from roost.routing.detector import ConflictDetector
from roost.routing.methods import (
    ANY,
    DELETE,
    GET,
    PATCH,
    POST,
    PUT,
    Methods,
    coerce_methods,
    describe,
)
from roost.routing.protocol import RouteSink
from roost.routing.route import RouteSpec

logger = logging.getLogger("roost.registry")


class RouteRegistry:
    """Aggregates routes and injects them into a router.

    Provides one shortcut per common verb (``get``, ``post``, ``put``,
    ``patch``, ``delete``), ``any`` for the wildcard, and the general
    ``route`` for arbitrary method lists::

        registry = RouteRegistry(router)
        registry.get("/users", list_users, name="users.list")
        registry.post("/users", create_user)
        registry.route("/users/{id}", user_detail, ["GET", "HEAD"])
        registry.any("/status", status)

    Each registry owns its own detector, so independent route tables
    can coexist (one per app, one per test).

    Registration may be called from several threads during startup;
    the conflict check, the append, and the router call run under one
    lock.
    """

    __slots__ = ("_config", "_detector", "_lock", "_router", "_routes")

    def __init__(self, router: RouteSink, config: RegistryConfig | None = None) -> None:
        if not callable(getattr(router, "add_route", None)):
            msg = (
                f"Router {type(router).__name__} has no add_route() method; "
                "expected an object implementing roost.RouteSink."
            )
            raise ConfigurationError(msg)
        self._router = router
        self._config = config or RegistryConfig()
        self._detector = ConflictDetector()
        self._routes: list[RouteSpec] = []
        self._lock = threading.Lock()

    # -- Registration --

    def route(
        self,
        path: str,
        handler: Callable[..., Any],
        methods: Methods | Iterable[str] | str | None = None,
        name: str | None = None,
    ) -> RouteSpec:
        """Register a route and return it.

        Args:
            path: Path pattern, passed through to the router untouched.
            handler: Request handler, stored and forwarded, never called.
            methods: HTTP methods to accept. ``None`` (or ``ANY``) accepts
                every method.
            name: Optional route name. Names are not required to be unique.

        Raises:
            DuplicateRouteError: The path is already registered with an
                overlapping method set.
            ConfigurationError: ``methods`` is empty or holds a name that
                is not a valid HTTP method token.

        """
        spec = RouteSpec(
            path=path,
            handler=handler,
            methods=coerce_methods(methods, normalize=self._config.normalize_methods),
            name=name,
        )
        with self._lock:
            self._detector.check(spec)
            self._routes.append(spec)
            self._router.add_route(spec)
        if self._config.log_registrations:
            logger.debug("Registered route %s [%s] -> %s", path, describe(spec.methods), spec.label)
        return spec

    def get(self, path: str, handler: Callable[..., Any], name: str | None = None) -> RouteSpec:
        return self.route(path, handler, [GET], name)

    def post(self, path: str, handler: Callable[..., Any], name: str | None = None) -> RouteSpec:
        return self.route(path, handler, [POST], name)

    def put(self, path: str, handler: Callable[..., Any], name: str | None = None) -> RouteSpec:
        return self.route(path, handler, [PUT], name)

    def patch(self, path: str, handler: Callable[..., Any], name: str | None = None) -> RouteSpec:
        return self.route(path, handler, [PATCH], name)

    def delete(self, path: str, handler: Callable[..., Any], name: str | None = None) -> RouteSpec:
        return self.route(path, handler, [DELETE], name)

    def any(self, path: str, handler: Callable[..., Any], name: str | None = None) -> RouteSpec:
        """Register a route answering to every HTTP method."""
        return self.route(path, handler, ANY, name)

    # -- Introspection --

    @property
    def routes(self) -> tuple[RouteSpec, ...]:
        """All registered routes, in registration order.

        A snapshot: later registrations do not change a tuple already
        returned, and callers cannot modify the registry through it.
        """
        with self._lock:
            return tuple(self._routes)

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def detector(self) -> ConflictDetector:
        return self._detector

    def __iter__(self) -> Iterator[RouteSpec]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"<RouteRegistry routes={len(self._routes)} router={type(self._router).__name__}>"
