"""Tests for roost.errors — exception hierarchy and error messages."""

import pytest

from roost.errors import ConfigurationError, DuplicateRouteError, RoostError
from roost.routing.methods import ANY, ExplicitMethods
from roost.routing.route import RouteSpec


def list_users() -> str:
    return "ok"


class TestHierarchy:
    def test_configuration_error_is_roost_error(self) -> None:
        assert issubclass(ConfigurationError, RoostError)

    def test_duplicate_route_error_is_roost_error(self) -> None:
        assert issubclass(DuplicateRouteError, RoostError)


class TestDuplicateRouteError:
    def test_attributes(self) -> None:
        existing = RouteSpec("/users", list_users, ExplicitMethods.of(["GET"]))
        err = DuplicateRouteError("/users", "GET", existing)
        assert err.path == "/users"
        assert err.methods == "GET"
        assert err.conflicting is existing

    def test_message_names_both_routes(self) -> None:
        existing = RouteSpec("/users", list_users, ExplicitMethods.of(["GET"]), name="users")
        err = DuplicateRouteError("/users", "GET, POST", existing)
        message = str(err)
        assert "'/users'" in message
        assert "[GET, POST]" in message
        assert "'users'" in message
        assert "list_users" in message
        assert "[GET]" in message

    def test_message_wildcard(self) -> None:
        existing = RouteSpec("/status", list_users, ANY)
        err = DuplicateRouteError("/status", "GET", existing)
        assert "answering to methods [any]" in str(err)

    def test_catchable_as_roost_error(self) -> None:
        existing = RouteSpec("/", list_users, ANY)
        with pytest.raises(RoostError):
            raise DuplicateRouteError("/", "any", existing)
