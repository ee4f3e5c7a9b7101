"""Flattening of nested arrays and dotted-path flattening of mappings.

    flatten([1, [2, [3]]])                 -> [1, 2, 3]   (same list object)
    flatten({"a": {"b": 1}, "c": [2, 3]})  -> {"a.b": 1, "c[0]": 2, "c[1]": 3}

`flatten_array` mutates its argument in place and returns it. Nested lists
reached during flattening are flattened in place as well. Cyclic structures
are not supported and recurse without bound.
"""

from __future__ import annotations

import logging
from typing import Any

from collectkit.core.oracle import is_array, is_bool, is_empty, is_number, is_object, is_string, keys
from collectkit.core.types import Depth

logger = logging.getLogger(__name__)


def _decrement(depth: Depth) -> Depth:
    # True means unbounded and never runs out
    if depth is True:
        return True
    return depth - 1


def flatten(x: Any, depth: Depth = 1) -> Any:
    """Flatten an array in place or a mapping into dotted paths.

    Args:
        x: List, tuple, mapping, or any other value.
        depth: Array nesting budget; `True` is unbounded. A falsy depth
            (0 or False) returns `x` unchanged.

    Returns:
        The same list for list input, a new tuple for tuple input, a new
        dict from `flatten_obj` for mappings, and `x` itself otherwise.
    """
    if not depth:
        return x
    if isinstance(x, tuple):
        return tuple(flatten_array(list(x), depth))
    if is_array(x):
        return flatten_array(x, depth)
    if is_object(x):
        return flatten_obj(x)
    return x


def flatten_array(arr: list[Any], depth: Depth = 1) -> list[Any]:
    """Splice nested arrays into `arr`, in place.

    The scan runs left to right. A nested array is first flattened with one
    less depth, then spliced in place of the element, and the scan resumes at
    the same position so the spliced-in elements are examined in turn. With
    any truthy depth the result therefore holds no array elements.

    Args:
        arr: List to flatten. It is modified.
        depth: Nesting budget; `True` is unbounded, falsy is a no-op.

    Returns:
        `arr` itself.
    """
    if not depth:
        return arr
    logger.debug("Flattening list of %d elements in place (depth=%s)", len(arr), depth)
    i = 0
    while i < len(arr):
        value = arr[i]
        if is_array(value):
            nested = value if isinstance(value, list) else list(value)
            arr[i : i + 1] = flatten(nested, _decrement(depth))
            continue
        i += 1
    return arr


def flatten_obj(
    o: Any,
    prefix: str = "",
    result: dict[str, Any] | None = None,
    keep_null: bool = False,
) -> dict[str, Any]:
    """Collapse a nested structure into a one-level dict keyed by path.

    Mapping children extend the path with `.key` (bare `key` at the root),
    array children with `[i]`. Strings, numbers and booleans are written at
    their path; None only when `keep_null` is set. Anything else (NaN
    included) is dropped.

    Args:
        o: Value to flatten.
        prefix: Path of `o` within the outer structure.
        result: Dict to write into; a new one is created when omitted.
        keep_null: Keep None leaves instead of dropping them.

    Returns:
        `result`, mapping every path to a leaf value.
    """
    if result is None:
        result = {}
    if is_string(o) or is_number(o) or is_bool(o) or (keep_null and o is None):
        result[prefix] = o
        return result
    if is_array(o):
        for i, value in enumerate(o):
            flatten_obj(value, f"{prefix}[{i}]", result, keep_null)
    elif is_object(o):
        for key in keys(o):
            path = str(key) if is_empty(prefix) else f"{prefix}.{key}"
            flatten_obj(o[key], path, result, keep_null)
    return result
