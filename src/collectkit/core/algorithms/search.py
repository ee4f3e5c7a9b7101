"""Membership and search with duck-typed delegation.

An operand that implements its own search is asked first; its answer is
used verbatim. Dispatch order:

    contains(obj, x):  obj.contains(x)  ->  index(obj, x) >= 0
    index(obj, x):     obj.indexOf(x)  ->  obj.index(x)  ->  linear scan

Built-in strings, lists, tuples and deques are searched generically: their native
`index` raises on a miss instead of answering -1.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Set
from collections.abc import Sequence as SequenceABC
from typing import Any

from collectkit.core.oracle import call, eq, has_method, is_string, length

logger = logging.getLogger(__name__)

_NATIVE_SEQUENCES = (str, bytes, list, tuple, range, deque)


def _delegate(obj: Any, name: str, *args: Any) -> Any:
    if isinstance(obj, _NATIVE_SEQUENCES) or not has_method(obj, name):
        return None
    logger.debug("Delegating to %s.%s()", type(obj).__name__, name)
    return call(obj, name, *args)


def contains(obj: Any, x: Any) -> bool:
    """Check if `x` is present in `obj`.

    Args:
        obj: Container, string, or sequence.
        x: Item (or substring) to look for.

    Returns:
        The result of `obj.contains(x)` if available. Sets and mappings,
        which have no positions, use the `in` operator. Otherwise
        `index(obj, x) >= 0`.
    """
    op = _delegate(obj, "contains", x)
    if op is not None:
        return op
    if isinstance(obj, (Set, Mapping)):
        return x in obj
    return index(obj, x) >= 0


def index(obj: Any, x: Any, start: int = 0) -> int:
    """Return the position of the first occurrence of `x` in `obj`.

    Args:
        obj: String, sequence, or a value implementing `indexOf`/`index`.
        x: Item (or substring) to look for.
        start: Position to start searching from. Negative values count from
            the end and are clamped at 0.

    Returns:
        The delegated method's result, else the lowest matching position at
        or after `start`, or -1 if there is none.
    """
    op = _delegate(obj, "indexOf", x)
    if op is not None:
        return op
    op = _delegate(obj, "index", x)
    if op is not None:
        return op

    if not isinstance(obj, SequenceABC):
        return -1
    size = length(obj) or 0
    if start < 0:
        start = max(start + size, 0)
    if is_string(obj):
        if not isinstance(x, str) or start >= size:
            return -1
        return obj.find(x, start)
    for i in range(start, size):
        if eq(x, obj[i]):
            return i
    return -1
