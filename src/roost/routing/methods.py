"""Method sets — the explicit/wildcard variant attached to every route.

A route answers either to an explicit, non-empty set of HTTP method
names or to the ``ANY`` wildcard. The wildcard is its own type rather
than an empty or "full" set, so the overlap rule dispatches on the
variant instead of inspecting collection contents.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeAlias

from roost.errors import ConfigurationError

GET = "GET"
POST = "POST"
PUT = "PUT"
PATCH = "PATCH"
DELETE = "DELETE"

STANDARD_METHODS: frozenset[str] = frozenset({GET, POST, PUT, PATCH, DELETE})

# RFC 9110 token: method names are tokens, nothing else
_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


@dataclass(frozen=True, slots=True)
class AnyMethod:
    """Wildcard sentinel: the route answers to every method.

    Includes methods that no explicit set would ever enumerate. All
    instances compare equal; use the module-level ``ANY``.
    """

    def __str__(self) -> str:
        return "any"

    def __repr__(self) -> str:
        return "ANY"


ANY: AnyMethod = AnyMethod()


@dataclass(frozen=True, slots=True)
class ExplicitMethods:
    """A non-empty set of method names.

    Build through ``ExplicitMethods.of()`` to get normalization::

        ExplicitMethods.of(["get", "post"])  # {"GET", "POST"}
    """

    methods: frozenset[str]

    def __post_init__(self) -> None:
        if isinstance(self.methods, (str, bytes)):
            msg = f"HTTP methods must be a collection of names, not {type(self.methods).__name__}."
            raise ConfigurationError(msg)
        if not isinstance(self.methods, frozenset):
            object.__setattr__(self, "methods", frozenset(self.methods))
        if not self.methods:
            msg = "HTTP methods argument was empty; must contain at least one method."
            raise ConfigurationError(msg)
        for method in self.methods:
            if not isinstance(method, str) or not _TOKEN_RE.match(method):
                msg = f"Invalid HTTP method {method!r}: must be a non-empty token."
                raise ConfigurationError(msg)

    @classmethod
    def of(cls, methods: Iterable[str], *, normalize: bool = True) -> "ExplicitMethods":
        """Build a method set, stripping (and by default upper-casing) names."""
        names: set[str] = set()
        for method in methods:
            if not isinstance(method, str):
                kind = type(method).__name__
                msg = f"Invalid HTTP method {method!r}: expected a string, not {kind}."
                raise ConfigurationError(msg)
            name = method.strip()
            names.add(name.upper() if normalize else name)
        return cls(frozenset(names))

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.methods))

    def __len__(self) -> int:
        return len(self.methods)

    def __contains__(self, method: object) -> bool:
        return method in self.methods

    def __str__(self) -> str:
        return ", ".join(sorted(self.methods))


Methods: TypeAlias = ExplicitMethods | AnyMethod


def coerce_methods(
    methods: Methods | Iterable[str] | str | None, *, normalize: bool = True
) -> Methods:
    """Turn caller input into a ``Methods`` variant.

    ``None`` and ``ANY`` mean the wildcard. A bare string is a single
    method (``"GET"``, not ``{"G", "E", "T"}``). With ``normalize``, a
    prebuilt ``ExplicitMethods`` is upper-cased like any other input.
    """
    if methods is None or isinstance(methods, AnyMethod):
        return ANY
    if isinstance(methods, ExplicitMethods):
        return ExplicitMethods.of(methods.methods) if normalize else methods
    if isinstance(methods, bytes):
        msg = f"HTTP methods must be str, not bytes: {methods!r}"
        raise ConfigurationError(msg)
    if isinstance(methods, str):
        return ExplicitMethods.of([methods], normalize=normalize)
    return ExplicitMethods.of(methods, normalize=normalize)


def overlaps(left: Methods, right: Methods) -> bool:
    """Return True if two method sets would answer to a common method.

    The wildcard overlaps everything, another wildcard included.
    Explicit sets overlap when they share at least one name.
    """
    match left, right:
        case (AnyMethod(), _) | (_, AnyMethod()):
            return True
        case (ExplicitMethods(methods=a), ExplicitMethods(methods=b)):
            return not a.isdisjoint(b)
    msg = f"Cannot compare method sets {left!r} and {right!r}"
    raise TypeError(msg)


def describe(methods: Methods) -> str:
    """Human-readable method list: ``"GET, POST"`` or ``"any"``."""
    return str(methods)
