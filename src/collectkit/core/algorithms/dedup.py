"""Deduplication by element.

`uniq` keys its bookkeeping by the element itself and stores the derived
value, not the other way round:

    uniq([{"n": 1}, {"n": 1}, {"n": 2}], "n")  -> [1, 2]
    uniq(["a", "bb", "cc"], len)               -> [1, 2, 2]

Distinct elements keep their own entry even when they derive the same value;
elements that map to the same key collapse into one entry holding the last
occurrence's derived value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any

from collectkit.core.oracle import comp, identity, iteratee, prop


def _element_key(x: Any) -> Any:
    # Unhashable elements are keyed by their string form
    try:
        hash(x)
    except TypeError:
        return str(x)
    return x


def uniq(arr: Iterable[Any], fn: Callable[..., Any] | str = identity) -> list[Any]:
    """Return one derived value per distinct element of `arr`.

    Args:
        arr: Elements to deduplicate.
        fn: Function applied to each element, or a property name to read.

    Returns:
        Derived values in order of each element's first occurrence; an
        element seen again overwrites its entry with the later value.
    """
    derive = (lambda x: prop(x, fn)) if isinstance(fn, str) else iteratee(fn)
    seen: dict[Any, Any] = {}
    for x in arr:
        seen[_element_key(x)] = derive(x)
    return list(seen.values())


def sorted_uniq(arr: Iterable[Any], fn: Callable[..., Any] | str = identity) -> list[Any]:
    """Return `uniq(arr, fn)` sorted ascending with `comp`."""
    result = uniq(arr, fn)
    result.sort(key=cmp_to_key(comp))
    return result
