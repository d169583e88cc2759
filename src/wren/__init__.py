"""Wren — URL generation, dotted-path settings access, and upload rules.

Small building blocks for server-rendered Python web apps.

Basic usage::

    from wren import Route, Router, UrlBuilder

    router = Router()
    router.add(Route("GET /user/(:any)", profile, name="profile"))
    router.compile()

    urls = UrlBuilder(router, base="http://example.com")
    urls.to_route("profile", ["fred"])
    # "http://example.com/index.php/user/fred"

Template helpers (kida)::

    from wren.templating import create_environment
    env = create_environment(urls, "templates")
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "Route",
    "RouteLookup",
    "RouteNotFoundError",
    "Router",
    "UnknownMethodError",
    "UploadedFile",
    "UrlBuilder",
    "UrlConfig",
    "WrenError",
    "arr",
    "slug",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "UrlConfig":
        from wren.config import UrlConfig

        return UrlConfig

    if name in ("UrlBuilder", "RouteLookup"):
        from wren.routing import url as _url

        return getattr(_url, name)

    if name == "Router":
        from wren.routing.router import Router

        return Router

    if name == "Route":
        from wren.routing.route import Route

        return Route

    if name == "UploadedFile":
        from wren.http.files import UploadedFile

        return UploadedFile

    if name == "arr":
        from wren.support import arr

        return arr

    if name == "slug":
        from wren.support.text import slug

        return slug

    if name in (
        "ConfigurationError",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "RouteNotFoundError",
        "UnknownMethodError",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
