"""Tests for wren.errors — exception hierarchy and error messages."""

import pytest

from wren.errors import (
    ConfigurationError,
    HTTPError,
    MethodNotAllowed,
    NotFound,
    RouteNotFoundError,
    UnknownMethodError,
    WrenError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [ConfigurationError, HTTPError, RouteNotFoundError, UnknownMethodError],
    )
    def test_is_wren_error(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, WrenError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_method_not_allowed_is_http_error(self) -> None:
        assert issubclass(MethodNotAllowed, HTTPError)


class TestMessages:
    def test_route_not_found(self) -> None:
        err = RouteNotFoundError("profile")
        assert err.name == "profile"
        assert "[profile]" in str(err)

    def test_unknown_method(self) -> None:
        err = UnknownMethodError("profile_url")
        assert err.method == "profile_url"
        assert "[profile_url]" in str(err)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad request body")) == "400: Bad request body"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_not_found_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_method_not_allowed_allow_header(self) -> None:
        err = MethodNotAllowed(frozenset({"POST", "GET"}))
        assert err.status == 405
        assert err.headers == (("Allow", "GET, POST"),)
        assert "GET, POST" in err.detail
