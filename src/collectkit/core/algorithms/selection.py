"""Predicate-based selection over ordered sequences.

Every selector argument accepts three shapes:

    filter_(lambda x: x > 2, items)      # predicate
    filter_("active", users)             # truthy property
    filter_({"role": "admin"}, users)    # structural match

These operations are defined over arrays only; mappings and scalars
yield None.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from collectkit.core.oracle import eq, is_array, iteratee, prop
from collectkit.core.types import Selector

_MISSING = object()


def matches(template: Mapping[Any, Any]) -> Callable[[Any], bool]:
    """Build a predicate that structurally matches `template`.

    Args:
        template: Keys and expected values.

    Returns:
        Predicate true for `x` iff `eq(x[k], template[k])` for every key of
        the template. A key missing on `x` is a mismatch, even against None.
    """

    def predicate(x: Any) -> bool:
        for key in template:
            value = prop(x, key, _MISSING)
            if value is _MISSING or not eq(value, template[key]):
                return False
        return True

    return predicate


def _as_predicate(selector: Selector) -> Callable[..., Any] | None:
    if isinstance(selector, str):
        return lambda x, *_: prop(x, selector)
    if isinstance(selector, Mapping):
        test = matches(selector)
        return lambda x, *_: test(x)
    if callable(selector):
        return iteratee(selector)
    return None


def filter_(selector: Selector, arr: Any) -> list[Any] | None:
    """Return every element of `arr` that satisfies `selector`, in order.

    Args:
        selector: Predicate `(value, index, arr)`, property name, or template.
        arr: List or tuple to scan.

    Returns:
        List of matching elements, or None if `arr` is not an array or the
        selector has an unsupported shape.
    """
    if not is_array(arr):
        return None
    predicate = _as_predicate(selector)
    if predicate is None:
        return None
    return [x for i, x in enumerate(arr) if predicate(x, i, arr)]


def find(selector: Selector, arr: Any) -> Any:
    """Return the first element of `arr` that satisfies `selector`, or None."""
    if not is_array(arr):
        return None
    predicate = _as_predicate(selector)
    if predicate is None:
        return None
    for i, x in enumerate(arr):
        if predicate(x, i, arr):
            return x
    return None


def find_right(selector: Selector, arr: Any) -> Any:
    """Scan `arr` from the end and return the first element satisfying `selector`.

    This is the last match in forward order, or None.
    """
    if not is_array(arr):
        return None
    predicate = _as_predicate(selector)
    if predicate is None:
        return None
    for i in range(len(arr) - 1, -1, -1):
        x = arr[i]
        if predicate(x, i, arr):
            return x
    return None
