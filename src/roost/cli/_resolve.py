"""Locate the route registry named on the command line.

``roost routes myapp.web:registry`` imports ``myapp.web`` and reads its
``registry`` attribute. The attribute may also be a zero-argument
function that builds the registry, which lets apps keep route wiring
inside a factory.
"""

import importlib

from roost.registry import RouteRegistry

DEFAULT_ATTRIBUTE = "registry"


def resolve_registry(target: str) -> RouteRegistry:
    """Return the ``RouteRegistry`` that *target* points at.

    *target* is ``"package.module:attribute"``; a bare module path reads
    ``DEFAULT_ATTRIBUTE``.

    Raises:
        ModuleNotFoundError: The module part does not import.
        AttributeError: The module has no such attribute.
        TypeError: The attribute (or what its factory returned) is not a
            registry, or the factory failed while building routes.

    """
    module_path, _, attr_name = target.partition(":")
    found = getattr(importlib.import_module(module_path), attr_name or DEFAULT_ATTRIBUTE)

    if isinstance(found, RouteRegistry):
        return found
    if not callable(found):
        msg = f"{target!r} is a {type(found).__name__}; expected a roost.RouteRegistry or a factory"
        raise TypeError(msg)

    try:
        built = found()
    except Exception as exc:
        # Route wiring errors (DuplicateRouteError included) surface here
        msg = f"Registry factory {target!r} failed: {exc}"
        raise TypeError(msg) from exc

    if not isinstance(built, RouteRegistry):
        msg = f"Registry factory {target!r} returned {type(built).__name__}, not a roost.RouteRegistry"
        raise TypeError(msg)
    return built
