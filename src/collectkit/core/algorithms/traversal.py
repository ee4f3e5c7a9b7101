"""Traversal over arrays and keyed mappings."""

from __future__ import annotations

from typing import Any

from collectkit.core.oracle import is_array, is_object, iteratee, prop
from collectkit.core.types import Iteratee


def for_each(fn: Iteratee, coll: Any) -> None:
    """Call `fn` for every element, for side effects only.

    Arrays call `fn(value, index, arr)`; mappings call `fn(value, key, mapping)`
    in the mapping's key order. Other operands are ignored.
    """
    if is_array(coll):
        callback = iteratee(fn)
        for i, x in enumerate(coll):
            callback(x, i, coll)
    elif is_object(coll):
        callback = iteratee(fn)
        for key in list(coll.keys()):
            callback(coll[key], key, coll)


def map_(fn: Iteratee | str, coll: Any) -> list[Any] | None:
    """Return a new list with the results of `fn` for every element.

    Args:
        fn: Iteratee, or a property name to pluck from array elements.
        coll: List, tuple, or mapping. Never modified.

    Returns:
        List of results in iteration order, or None for other operands.
    """
    if is_array(coll):
        if isinstance(fn, str):
            return [prop(x, fn) for x in coll]
        callback = iteratee(fn)
        return [callback(x, i, coll) for i, x in enumerate(coll)]
    if is_object(coll):
        if isinstance(fn, str):
            raise TypeError("Property shorthand is only supported when mapping over arrays")
        callback = iteratee(fn)
        return [callback(coll[key], key, coll) for key in list(coll.keys())]
    return None
