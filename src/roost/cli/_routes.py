"""``roost routes`` — list registered routes.

Resolves an import string to a RouteRegistry and prints every route
with method, path, and handler info, in registration order.
"""

import argparse
import sys
from collections.abc import Sequence

from roost.cli._resolve import resolve_registry
from roost.routing.methods import describe
from roost.routing.route import RouteSpec


def format_routes(routes: Sequence[RouteSpec]) -> list[str]:
    """Render routes as table lines: header, separator, one row each."""
    # Build rows: (methods_str, path, handler_name)
    rows: list[tuple[str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        if route.name:
            handler_name = f"{handler_name} ({route.name})"
        rows.append((describe(route.methods), route.path, handler_name))

    max_methods = max([len(r[0]) for r in rows] + [6])  # "METHOD" header
    max_path = max([len(r[1]) for r in rows] + [4])  # "PATH" header

    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "HANDLER")]
    sep_len = max_methods + max_path + 4 + max((len(r[2]) for r in rows), default=7)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return lines


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a registry."""
    try:
        registry = resolve_registry(args.registry)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = registry.routes
    if not routes:
        print("No routes registered.")
        return

    for line in format_routes(routes):
        print(line)
