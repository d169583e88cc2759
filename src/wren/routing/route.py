"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class RouteForm:
    """One ``METHOD /uri`` alternative of a route key.

    ``"GET /user/(:any)"`` -> ``RouteForm("GET", "/user/(:any)")``
    """

    method: str
    uri: str


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``key`` holds one or more comma-separated forms, e.g.
    ``"GET /user/(:num), POST /user/(:num)"``. Created during app setup,
    compiled into the router at freeze time.
    """

    key: str
    handler: Callable[..., Any]
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``parameters`` holds wildcard captures in URI order.
    """

    route: Route
    parameters: tuple[str, ...]
