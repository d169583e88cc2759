"""Dotted-path access over nested mappings.

Keys use JavaScript-style "dot" notation to reach into nested dicts::

    from wren.support import arr

    settings = {"database": {"default": "sqlite"}}
    arr.get(settings, "database.default")          # "sqlite"
    arr.get(settings, "database.host", "localhost")  # "localhost"
    arr.set(settings, "database.pool.size", 5)
    # {"database": {"default": "sqlite", "pool": {"size": 5}}}

``set`` mutates the mapping it is given. The only case where the caller
must use the return value is ``key=None``, which replaces the root.
"""

import inspect
from collections.abc import Mapping, MutableMapping
from typing import Any

_MISSING = object()


def _takes_no_arguments(func: Any) -> bool:
    try:
        inspect.signature(func).bind()
    except (TypeError, ValueError):
        return False
    return True


def _resolve_default(default: Any) -> Any:
    """Call *default* if it can be called without arguments, else return it."""
    if callable(default) and _takes_no_arguments(default):
        return default()
    return default


def get(root: Any, key: str | None, default: Any = None) -> Any:
    """Return the value at dotted *key* in *root*.

    If *key* is None the whole of *root* is returned. When any segment is
    missing, or an intermediate value is not a mapping, *default* is
    returned instead (called first when it is a zero-argument callable).
    """
    if key is None:
        return root

    node = root
    for segment in key.split("."):
        if not isinstance(node, Mapping) or segment not in node:
            return _resolve_default(default)
        node = node[segment]
    return node


def set(root: Any, key: str | None, value: Any) -> Any:  # noqa: A001
    """Set *value* at dotted *key* in *root* and return the root.

    Missing parents are created as dicts. A non-mapping value sitting at
    an intermediate segment is overwritten with an empty dict.

    If *key* is None, *value* becomes the new root and is returned.
    """
    if key is None:
        return value

    *parents, leaf = key.split(".")
    node: MutableMapping[str, Any] = root
    for segment in parents:
        child = node.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            node[segment] = child
        node = child

    node[leaf] = value
    return root


def has(root: Any, key: str | None) -> bool:
    """True if dotted *key* resolves to a value in *root*."""
    return get(root, key, _MISSING) is not _MISSING


def forget(root: MutableMapping[str, Any], key: str) -> None:
    """Remove the leaf at dotted *key* from *root*, if it exists."""
    *parents, leaf = key.split(".")
    node: Any = root
    for segment in parents:
        if not isinstance(node, Mapping) or segment not in node:
            return
        node = node[segment]
    if isinstance(node, MutableMapping):
        node.pop(leaf, None)

