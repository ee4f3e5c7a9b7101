"""Shallow and deep cloning of arrays and keyed mappings.

A value that exposes its own callable `clone()` always wins over the generic
copy, at every level of a deep clone. Pydantic models are copied with
`model_copy`. Scalars and other values are returned unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from collectkit.core.oracle import has_method, is_array, is_object, is_pydantic, keys

logger = logging.getLogger(__name__)


def clone(obj: Any, deep: bool = False) -> Any:
    """Copy an array or keyed mapping.

    Args:
        obj: Value to copy.
        deep: If False, copy one level and share nested containers. If True,
            recurse into every nested array and mapping.

    Returns:
        The copy. Lists and tuples keep their type; mappings become dicts.
        Values exposing `clone()` return whatever it returns. Scalars are
        returned as is.
    """
    if is_array(obj):
        return clone_array(obj, deep)
    if has_method(obj, "clone"):
        logger.debug("Delegating to %s.clone()", type(obj).__name__)
        return obj.clone()
    if is_pydantic(obj):
        return obj.model_copy(deep=deep)
    if is_object(obj):
        if deep:
            return {key: clone(obj[key], deep) for key in keys(obj)}
        return {key: obj[key] for key in keys(obj)}
    return obj


def clone_array[T](arr: list[T] | tuple[T, ...], deep: bool = False) -> list[T] | tuple[T, ...]:
    """Copy a list or tuple.

    Shallow mode shares the elements with `arr`; deep mode clones each
    element with `clone(item, deep=True)`.
    """
    if not deep:
        items = list(arr)
    else:
        items = [clone(item, deep) for item in arr]
    if isinstance(arr, tuple):
        return tuple(items)
    return items
