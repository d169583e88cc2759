"""Wren exception hierarchy.

Shared across the router, URL builder, and validation so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when configuration or a route definition is invalid."""


class RouteNotFoundError(WrenError):
    """No route is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Error generating named route for route [{name}]. Route is not defined.")


class UnknownMethodError(WrenError):
    """A route helper name is neither registered nor ``to_``-prefixed."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method [{method}] is not defined on the URL builder.")


@dataclass(frozen=True, slots=True)
class HTTPError(WrenError):
    """An error that maps directly to an HTTP status code.

    Raised by ``Router.match`` when a request cannot be dispatched.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request URI."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — a route matches the URI but not the HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
