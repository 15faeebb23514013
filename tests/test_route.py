"""Tests for roost.routing.route — RouteSpec."""

import pytest

from roost.routing.methods import ANY, ExplicitMethods
from roost.routing.route import RouteSpec


def _handler() -> str:
    return "ok"


class TestRouteSpec:
    def test_creation(self) -> None:
        route = RouteSpec(path="/users", handler=_handler, methods=ExplicitMethods.of(["GET"]))
        assert route.path == "/users"
        assert route.handler is _handler
        assert route.methods == ExplicitMethods(frozenset({"GET"}))
        assert route.name is None

    def test_named_route(self) -> None:
        route = RouteSpec("/users", _handler, ExplicitMethods.of(["GET"]), name="user_list")
        assert route.name == "user_list"

    def test_frozen(self) -> None:
        route = RouteSpec("/", _handler, ANY)
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]

    def test_path_kept_verbatim(self) -> None:
        route = RouteSpec("users/{id:int}/", _handler, ANY)
        assert route.path == "users/{id:int}/"


class TestAllowedMethods:
    def test_explicit(self) -> None:
        route = RouteSpec("/", _handler, ExplicitMethods.of(["GET", "POST"]))
        assert route.allows_any_method is False
        assert route.allowed_methods == frozenset({"GET", "POST"})

    def test_wildcard(self) -> None:
        route = RouteSpec("/", _handler, ANY)
        assert route.allows_any_method is True
        assert route.allowed_methods is None

    def test_allows_method_is_case_sensitive(self) -> None:
        route = RouteSpec("/", _handler, ExplicitMethods.of(["GET"]))
        assert route.allows_method("GET") is True
        assert route.allows_method("get") is False
        assert route.allows_method("POST") is False

    def test_wildcard_allows_anything(self) -> None:
        route = RouteSpec("/", _handler, ANY)
        assert route.allows_method("PROPFIND") is True


class TestLabel:
    def test_name_wins(self) -> None:
        route = RouteSpec("/users", _handler, ExplicitMethods.of(["GET"]), name="users")
        assert route.label == "users"

    def test_derived_from_methods(self) -> None:
        route = RouteSpec("/users", _handler, ExplicitMethods.of(["POST", "GET"]))
        assert route.label == "/users^GET:POST"

    def test_wildcard_is_path(self) -> None:
        route = RouteSpec("/status", _handler, ANY)
        assert route.label == "/status"
