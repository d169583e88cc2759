"""Named-route table with wildcard matching.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes. The router doubles as the
``RouteLookup`` the URL builder resolves route names through.
"""

import logging
import re
from dataclasses import dataclass

from wren.errors import ConfigurationError, MethodNotAllowed, NotFound
from wren.routing.params import compile_uri, is_literal
from wren.routing.route import Route, RouteForm, RouteMatch

logger = logging.getLogger("wren.routing")

_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"})


def _normalize(uri: str) -> str:
    return "/" + uri.strip("/")


def parse_key(key: str) -> list[RouteForm]:
    """Parse a route key into its ``METHOD /uri`` forms.

    Examples::

        "GET /"                       -> [RouteForm("GET", "/")]
        "GET /user, POST /user"       -> [RouteForm("GET", "/user"), RouteForm("POST", "/user")]
        "PUT /user/(:num)"            -> [RouteForm("PUT", "/user/(:num)")]
    """
    forms: list[RouteForm] = []
    for part in key.split(","):
        method, _, uri = part.strip().partition(" ")
        method = method.upper()
        if method not in _METHODS or not uri.strip().startswith("/"):
            msg = (
                f"Invalid route form {part.strip()!r} in {key!r}. "
                "Expected 'METHOD /uri', e.g. 'GET /user/(:num)'."
            )
            raise ConfigurationError(msg)
        forms.append(RouteForm(method=method, uri=_normalize(uri.strip())))
    return forms


@dataclass(slots=True)
class _PatternEdge:
    """A compiled wildcard form."""

    regex: re.Pattern[str]
    method: str
    route: Route


class Router:
    """Route table keyed by URI form and by route name.

    Usage::

        router = Router()
        router.add(Route("GET /user/(:num)", handler, name="profile"))
        router.compile()
        router.find("profile")            # "GET /user/(:num)"
        match = router.match("GET", "/user/42")
        match.parameters                  # ("42",)
    """

    __slots__ = ("_compiled", "_literal", "_named", "_patterns", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        # "/user" -> {"GET": route}
        self._literal: dict[str, dict[str, Route]] = {}
        self._patterns: list[_PatternEdge] = []
        self._named: dict[str, Route] = {}
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        forms = parse_key(route.key)

        if route.name is not None and route.name in self._named:
            msg = f"Route name {route.name!r} is already registered."
            raise ConfigurationError(msg)

        # Compile every form before touching the tables
        literals: list[RouteForm] = []
        patterns: list[_PatternEdge] = []
        for form in forms:
            if is_literal(form.uri):
                literals.append(form)
            else:
                patterns.append(_PatternEdge(regex=compile_uri(form.uri), method=form.method, route=route))

        if route.name is not None:
            self._named[route.name] = route
        for form in literals:
            self._literal.setdefault(form.uri, {})[form.method] = route
        self._patterns.extend(patterns)

        self._routes.append(route)
        logger.debug("Registered route %r as %s", route.name, route.key)

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def find(self, name: str) -> str | None:
        """Return the key of the route registered under *name*, or None."""
        route = self._named.get(name)
        if route is None:
            return None
        return route.key

    def match(self, method: str, uri: str) -> RouteMatch:
        """Match a request method and URI against the registered routes.

        Literal URIs are tried before wildcard patterns.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the URI.
        Raises ``MethodNotAllowed`` if the URI matches but the method doesn't.
        """
        method = method.upper()
        path = _normalize(uri)
        allowed: set[str] = set()

        by_method = self._literal.get(path)
        if by_method is not None:
            if method in by_method:
                return RouteMatch(route=by_method[method], parameters=())
            allowed.update(by_method)

        for edge in self._patterns:
            found = edge.regex.fullmatch(path)
            if found is None:
                continue
            if edge.method != method:
                allowed.add(edge.method)
                continue
            parameters = tuple(g for g in found.groups() if g is not None)
            return RouteMatch(route=edge.route, parameters=parameters)

        if allowed:
            raise MethodNotAllowed(frozenset(allowed))

        logger.debug("No route matches %s %s", method, path)
        raise NotFound(f"No route matches {method} {uri!r}")
