"""Object projection: pick and omit.

Both accept either an explicit list of keys or a `(value, key)` predicate,
read only the object's own keys, and never recurse into nested values.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from collectkit.core.oracle import iteratee, keys, prop


def pick(obj: Any, paths: Iterable[Any] | Callable[..., Any]) -> dict[Any, Any]:
    """Copy the selected keys of `obj` into a new dict.

    Args:
        obj: Mapping or plain object. None yields an empty dict.
        paths: Keys to copy, or a predicate `(value, key)`.

    Returns:
        With a key list, exactly those keys; a key missing on `obj` is kept
        with a None value. With a predicate, the own keys it accepts.
    """
    if obj is None:
        return {}
    result: dict[Any, Any] = {}
    if callable(paths):
        predicate = iteratee(paths)
        for key in keys(obj):
            value = prop(obj, key)
            if predicate(value, key):
                result[key] = value
        return result
    if isinstance(paths, str):
        paths = [paths]
    for key in paths:
        result[key] = prop(obj, key)
    return result


def omit(obj: Any, paths: Iterable[Any] | Callable[..., Any]) -> dict[Any, Any]:
    """Copy every own key of `obj` except the selected ones.

    Args:
        obj: Mapping or plain object. None yields an empty dict.
        paths: Keys to leave out, or a predicate `(value, key)` marking the
            keys to leave out.

    Returns:
        New dict with the remaining keys.
    """
    result: dict[Any, Any] = {}
    if obj is None:
        return result
    if callable(paths):
        predicate = iteratee(paths)
        for key in keys(obj):
            value = prop(obj, key)
            if not predicate(value, key):
                result[key] = value
        return result
    excluded = [paths] if isinstance(paths, str) else list(paths)
    for key in keys(obj):
        if key not in excluded:
            result[key] = prop(obj, key)
    return result


def namedtuple(*fields: str) -> Callable[..., list[tuple[str, Any]]]:
    """Create a factory that pairs positional arguments with field names.

    >>> point = namedtuple("x", "y")
    >>> point(1, 2)
    [('x', 1), ('y', 2)]

    Missing arguments pair with None.
    """

    def factory(*args: Any) -> list[tuple[str, Any]]:
        return [(field, args[i] if i < len(args) else None) for i, field in enumerate(fields)]

    return factory
