"""RouteSpec frozen dataclass."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from roost.routing.methods import AnyMethod, ExplicitMethods, Methods


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A frozen route definition.

    Created by ``RouteRegistry.route()``, checked for conflicts, then
    handed to the path-matching router. The path is kept exactly as the
    caller wrote it; the handler is stored and forwarded, never called.
    """

    path: str
    handler: Callable[..., Any]
    methods: Methods
    name: str | None = None

    @property
    def allows_any_method(self) -> bool:
        return isinstance(self.methods, AnyMethod)

    @property
    def allowed_methods(self) -> frozenset[str] | None:
        """Explicit method names, or ``None`` for the wildcard."""
        if isinstance(self.methods, ExplicitMethods):
            return self.methods.methods
        return None

    def allows_method(self, method: str) -> bool:
        """Exact, case-sensitive check, the same comparison conflicts use."""
        if isinstance(self.methods, AnyMethod):
            return True
        return method in self.methods.methods

    @property
    def label(self) -> str:
        """Identifier for diagnostics.

        The caller's ``name`` when given; otherwise ``"/path^GET:POST"``
        for explicit sets and the bare path for the wildcard.
        """
        if self.name is not None:
            return self.name
        if isinstance(self.methods, ExplicitMethods):
            return f"{self.path}^{':'.join(sorted(self.methods.methods))}"
        return self.path
