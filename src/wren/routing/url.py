"""URL generation — application, asset, and named-route URLs.

Usage::

    from wren.routing.url import UrlBuilder

    urls = UrlBuilder(router, base="http://example.com", index="index.php")
    urls.to("user/profile")           # http://example.com/index.php/user/profile
    urls.to_secure("user/profile")    # https://example.com/index.php/user/profile
    urls.to_asset("img/picture.jpg")  # http://example.com/img/picture.jpg
    urls.to_route("profile", ["fred"])

Route helpers can also be resolved by name, which is handy when the
helper name comes from a template or a config file::

    urls.call("to_profile", ["fred"])
    urls.call("to_secure_profile", ["fred"])
"""

import logging
import re
from collections.abc import Sequence
from typing import Protocol
from urllib.parse import urlsplit

from wren.config import UrlConfig
from wren.errors import RouteNotFoundError, UnknownMethodError
from wren.routing.params import OPTIONAL_RE, PLACEHOLDER_RE
from wren.support.text import slug as _slug

logger = logging.getLogger("wren.routing")

_SECURE_PREFIX = "to_secure_"
_PREFIX = "to_"

# An optional wildcard with its slash, or any other parenthesized token
_WILDCARD_RE = re.compile(f"{OPTIONAL_RE.pattern}|{PLACEHOLDER_RE.pattern}")

_UNSET = object()


class RouteLookup(Protocol):
    """Anything that can map a route name to its route key."""

    def find(self, name: str) -> str | None: ...


def is_absolute_url(url: str) -> bool:
    """True if *url* starts with a scheme (``https://...``, ``mailto:...``, ``file:///...``)."""
    scheme = urlsplit(url).scheme
    return bool(scheme) and url[: len(scheme) + 1].lower() == f"{scheme}:"


def parse_route_method(method: str) -> tuple[str, bool]:
    """Split a route helper name into ``(route_name, https)``.

    Examples::

        "to_profile"         -> ("profile", False)
        "to_secure_profile"  -> ("profile", True)

    Raises ``UnknownMethodError`` for any other name.
    """
    if method.startswith(_SECURE_PREFIX):
        if len(method) == len(_SECURE_PREFIX):
            raise UnknownMethodError(method)
        return method[len(_SECURE_PREFIX) :], True
    if method.startswith(_PREFIX) and len(method) > len(_PREFIX):
        return method[len(_PREFIX) :], False
    raise UnknownMethodError(method)


def _fill(uri: str, parameters: Sequence[object]) -> tuple[str, int]:
    """Substitute *parameters* into the wildcards of *uri*, left to right.

    Runs a single pass over the route URI, so text inserted by one
    parameter is never mistaken for a wildcard. Once parameters run out,
    optional wildcards are dropped along with their slash and required
    ones are left in place. Returns the URI and the number of required
    wildcards left unfilled.
    """
    remaining = iter(parameters)
    unfilled = 0

    def replace(match: re.Match[str]) -> str:
        nonlocal unfilled
        token = match.group(0)
        optional = OPTIONAL_RE.fullmatch(token) is not None
        parameter = next(remaining, _UNSET)
        if parameter is not _UNSET:
            return f"/{parameter}" if optional else str(parameter)
        if optional:
            return ""
        unfilled += 1
        return token

    return _WILDCARD_RE.sub(replace, uri), unfilled


class UrlBuilder:
    """Generates URLs for an application mounted at *base*.

    *index* is the front-controller filename inserted between the base
    and the path (``""`` when the web server rewrites URLs). *https* is
    the default scheme for asset URLs.
    """

    __slots__ = ("_aliases", "base", "https", "index", "router")

    def __init__(
        self,
        router: RouteLookup,
        base: str,
        index: str = "index.php",
        https: bool = False,
    ) -> None:
        self.router = router
        self.base = base
        self.index = index
        self.https = https
        # helper name -> (route name, https)
        self._aliases: dict[str, tuple[str, bool]] = {}

    @classmethod
    def from_config(cls, router: RouteLookup, config: UrlConfig) -> "UrlBuilder":
        """Create a builder from a ``UrlConfig``."""
        return cls(router, base=config.base, index=config.index, https=config.https)

    def to(self, path: str = "", https: bool = False) -> str:
        """Generate an application URL.

        If *path* is already an absolute URL it is returned unchanged.
        """
        return self._join(f"{self.base}/{self.index}", path, https)

    @staticmethod
    def _join(base: str, path: str, https: bool) -> str:
        if is_absolute_url(path):
            return path
        if https:
            base = base.replace("http://", "https://", 1)
        return base.rstrip("/") + "/" + path.strip("/")

    def to_secure(self, path: str = "") -> str:
        """Generate an application URL with HTTPS."""
        return self.to(path, https=True)

    def to_asset(self, path: str, https: bool | None = None) -> str:
        """Generate a URL to an asset. The index file is never included.

        When *https* is None the builder's default is used.
        """
        if https is None:
            https = self.https

        return self._join(self.base, path, https)

    def to_route(self, name: str, parameters: Sequence[object] = (), https: bool = False) -> str:
        """Generate a URL from a route name.

        Each item of *parameters* fills the next wildcard of the route URI,
        left to right. Optional wildcards left unfilled are dropped;
        required ones are left in place.

        Raises ``RouteNotFoundError`` if no route has that name.
        """
        key = self.router.find(name)
        if key is None:
            raise RouteNotFoundError(name)

        first = key.split(", ")[0]
        uri = first[max(first.find("/"), 0) :]

        uri, unfilled = _fill(uri, parameters)
        if unfilled:
            logger.debug("Route %r generated with unfilled wildcards: %s", name, uri)

        return self.to(uri, https=https)

    def to_secure_route(self, name: str, parameters: Sequence[object] = ()) -> str:
        """Generate an HTTPS URL from a route name."""
        return self.to_route(name, parameters, https=True)

    # -- helper names -------------------------------------------------------

    def alias(self, method: str, route: str, https: bool = False) -> None:
        """Register *method* as a helper name for *route*.

        Registered names take precedence over ``to_``/``to_secure_`` parsing::

            urls.alias("home_url", "home")
            urls.call("home_url")
        """
        self._aliases[method] = (route, https)

    def resolve(self, method: str) -> tuple[str, bool]:
        """Resolve a helper name to ``(route_name, https)``."""
        if method in self._aliases:
            return self._aliases[method]
        return parse_route_method(method)

    def call(self, method: str, parameters: Sequence[object] = ()) -> str:
        """Generate a URL through a helper name such as ``"to_profile"``.

        Raises ``UnknownMethodError`` if the name cannot be resolved.
        """
        name, https = self.resolve(method)
        return self.to_route(name, parameters, https=https)

    @staticmethod
    def slug(title: str, separator: str = "-") -> str:
        """Generate a URL friendly "slug" from *title*."""
        return _slug(title, separator)
