"""Equality and ordering primitives.

`eq` and `comp` honor the rich-comparison methods of `Comparable` values
(`eq`, `ne`, `lt`, `gt`) before falling back to Python's operators.
"""

from __future__ import annotations

from typing import Any, Literal


def identity[T](x: T) -> T:
    """Return the argument unchanged."""
    return x


def eq(a: Any, b: Any) -> bool:
    """Check two values for equality.

    Tries in order:
    1. Identity
    2. `a.eq(b)` if `a` defines a callable `eq`
    3. `a == b`

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        True if the values are considered equal.
    """
    if a is b:
        return True
    custom = getattr(a, "eq", None)
    if callable(custom):
        return bool(custom(b))
    return bool(a == b)


def ne(a: Any, b: Any) -> bool:
    """Logical negation of `eq`."""
    return not eq(a, b)


def comp(a: Any, b: Any) -> Literal[-1, 0, 1]:
    """Three-way comparison suitable for `functools.cmp_to_key`.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        -1 if a < b, 1 if a > b, 0 otherwise.
    """
    if eq(a, b):
        return 0
    lt = getattr(a, "lt", None)
    if callable(lt):
        return -1 if lt(b) else 1
    gt = getattr(a, "gt", None)
    if callable(gt):
        return 1 if gt(b) else -1
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
