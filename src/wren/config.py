"""URL configuration.

UrlConfig is a frozen dataclass — immutable after creation, IDE-autocompletable.
``from_settings`` bridges from the nested settings dicts applications
usually load from TOML/JSON files.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from wren.errors import ConfigurationError
from wren.support import arr

_DEFAULT_INDEX = "index.php"


@dataclass(frozen=True, slots=True)
class UrlConfig:
    """URL generation settings. Immutable after creation.

    Override what you need::

        config = UrlConfig(base="https://example.com", index="")
    """

    base: str = "http://localhost"
    index: str = _DEFAULT_INDEX  # Front controller; "" when URLs are rewritten
    https: bool = False  # Default scheme for asset URLs

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "UrlConfig":
        """Build a config from nested application settings.

        Reads ``application.url``, ``application.index`` and
        ``application.ssl``::

            UrlConfig.from_settings({"application": {"url": "http://example.com"}})
        """
        base = arr.get(settings, "application.url")
        if not base:
            msg = "Missing required setting 'application.url'."
            raise ConfigurationError(msg)
        return cls(
            base=str(base).rstrip("/"),
            index=str(arr.get(settings, "application.index", _DEFAULT_INDEX)),
            https=bool(arr.get(settings, "application.ssl", False)),
        )
