"""Wildcard placeholders and their regex translations.

Route URIs mark substitutable segments with parenthesized tokens::

    /user/(:num)          required numeric segment
    /user/(:any)          required segment (letters, digits, ``.-_%``)
    /docs/(:all)          everything to the end of the URI
    /archive/(:num?)      optional; the preceding slash is optional too
"""

import re

from wren.errors import ConfigurationError

# wildcard name -> regex for the captured segment
WILDCARDS: dict[str, str] = {
    "num": r"[0-9]+",
    "any": r"[a-zA-Z0-9.\-_%]+",
    "all": r".*",
}

# Any parenthesized token; substituted positionally by the URL builder
PLACEHOLDER_RE = re.compile(r"\(.+?\)")

# Optional wildcard together with its leading slash
OPTIONAL_RE = re.compile(r"/\(:\w+\?\)")

_TOKEN_RE = re.compile(r"(/?)\(:(\w+)(\??)\)")


def is_literal(uri: str) -> bool:
    """True if *uri* has no wildcard placeholders."""
    return _TOKEN_RE.search(uri) is None


def compile_uri(uri: str) -> re.Pattern[str]:
    """Translate a route URI with wildcards into an anchored regex.

    Raises ``ConfigurationError`` for an unknown wildcard name.

    Example::

        compile_uri("/user/(:num)/(:any?)").pattern
        # '/user/([0-9]+)(?:/([a-zA-Z0-9.\\-_%]+))?'
    """
    parts: list[str] = []
    position = 0
    for token in _TOKEN_RE.finditer(uri):
        slash, name, optional = token.groups()
        if name not in WILDCARDS:
            msg = f"Unknown wildcard '(:{name})' in route URI {uri!r}. Expected one of: num, any, all."
            raise ConfigurationError(msg)
        parts.append(re.escape(uri[position : token.start()]))
        capture = f"({WILDCARDS[name]})"
        if optional:
            parts.append(f"(?:{re.escape(slash)}{capture})?")
        else:
            parts.append(f"{re.escape(slash)}{capture}")
        position = token.end()
    parts.append(re.escape(uri[position:]))
    return re.compile("".join(parts))
