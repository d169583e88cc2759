"""Kida template bindings for URL generation.

Exposes a ``UrlBuilder`` to templates as globals plus a ``slug`` filter::

    <a href="{{ route('profile', [user.name]) }}">Profile</a>
    <img src="{{ asset('img/logo.png') }}">
    <a href="{{ url('posts/' ~ (post.title | slug)) }}">{{ post.title }}</a>
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from kida import Environment, FileSystemLoader

from wren.routing.url import UrlBuilder
from wren.support.text import slug

__all__ = ["create_environment", "register_url_helpers", "url_globals"]


def url_globals(urls: UrlBuilder) -> dict[str, Callable[..., str]]:
    """Template globals bound to *urls*."""
    return {
        "url": urls.to,
        "secure_url": urls.to_secure,
        "asset": urls.to_asset,
        "route": urls.to_route,
        "secure_route": urls.to_secure_route,
    }


def register_url_helpers(env: Environment, urls: UrlBuilder) -> Environment:
    """Add URL globals and the ``slug`` filter to an existing environment."""
    for name, value in url_globals(urls).items():
        env.add_global(name, value)
    env.update_filters({"slug": slug})
    return env


def create_environment(
    urls: UrlBuilder,
    template_dir: str | Path | None = None,
    **options: Any,
) -> Environment:
    """Create a kida Environment with URL helpers already bound.

    Without *template_dir* the environment can only render
    ``from_string`` templates.
    """
    if template_dir is not None:
        env = Environment(loader=FileSystemLoader(str(template_dir)), **options)
    else:
        env = Environment(**options)
    return register_url_helpers(env, urls)
