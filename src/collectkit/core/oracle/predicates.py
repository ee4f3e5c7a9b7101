"""Runtime type predicates and property access.

These classify operands so the collection algorithms can branch on shape:

    type_of([1, 2])        -> "array"
    type_of({"a": 1})      -> "object"
    type_of(float("nan"))  -> "nan"
    type_of(None)          -> "null"

Lookups through `prop` never raise for a missing key; they return the default.
"""

from __future__ import annotations

import inspect
import math
from collections.abc import Callable, Mapping, Set
from typing import Any


def is_pydantic(obj: Any) -> bool:
    """Check if value is a Pydantic model instance without importing pydantic."""
    for base in type(obj).__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def type_of(value: Any) -> str:
    """Return the shape tag of a value.

    Args:
        value: Any value.

    Returns:
        One of "null", "boolean", "nan", "number", "string", "array",
        "object", "set", "function", or the class name for anything else.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float) and math.isnan(value):
        return "nan"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Set):
        return "set"
    if callable(value) and not isinstance(value, type):
        return "function"
    return type(value).__name__


def is_bool(x: Any) -> bool:
    return type_of(x) == "boolean"


def is_number(x: Any) -> bool:
    """Check if value is a number. NaN and booleans are not numbers."""
    return type_of(x) == "number"


def is_string(x: Any) -> bool:
    return type_of(x) == "string"


def is_array(x: Any) -> bool:
    """Check if value is an ordered sequence (list or tuple)."""
    return type_of(x) == "array"


def is_object(x: Any) -> bool:
    """Check if value is a keyed mapping."""
    return type_of(x) == "object"


def is_func(x: Any) -> bool:
    return type_of(x) == "function"


def is_null(x: Any) -> bool:
    return x is None


def is_empty(x: Any) -> bool:
    """Return True for zero-length containers and falsy values."""
    return length(x) == 0 or not x


def length(value: Any) -> int | None:
    """Return the number of elements in a collection.

    Uses `len()` when supported, then a callable `size()`.

    Returns:
        The element count, or None if the value is not a collection.
    """
    if value is None:
        return None
    if hasattr(value, "__len__"):
        return len(value)
    size = getattr(value, "size", None)
    if callable(size):
        return size()
    return None


def keys(obj: Any) -> list[Any]:
    """Return the own key names of an object in enumeration order.

    Mappings yield their keys, Pydantic models their declared fields, and
    plain objects their public instance attributes.
    """
    if obj is None:
        return []
    if isinstance(obj, Mapping):
        return list(obj.keys())
    if is_pydantic(obj):
        return list(type(obj).model_fields)
    if hasattr(obj, "__dict__"):
        return [k for k in vars(obj) if not k.startswith("_")]
    return []


def prop(obj: Any, key: Any, default: Any = None) -> Any:
    """Read a single property from an object, returning `default` on a miss.

    Args:
        obj: Mapping, sequence, or plain object.
        key: Mapping key, integer index, or attribute name.
        default: Value returned when the property is absent.

    Returns:
        The property value or `default`.
    """
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(key, default)
    if isinstance(obj, (list, tuple, str)):
        if isinstance(key, int) and not isinstance(key, bool) and -len(obj) <= key < len(obj):
            return obj[key]
        return default
    if isinstance(key, str):
        return getattr(obj, key, default)
    return default


def has_method(obj: Any, name: str) -> bool:
    """Check if `obj.name` exists and is callable."""
    return obj is not None and callable(getattr(obj, name, None))


def call(obj: Any, name: str, *args: Any) -> Any:
    """Call `obj.name(*args)` if it is a callable attribute.

    Returns:
        The method's result, or None when the method is missing.
    """
    if has_method(obj, name):
        return getattr(obj, name)(*args)
    return None


def _positional_arity(fn: Callable[..., Any]) -> int | None:
    if isinstance(fn, type):
        # Classes such as `int` or `bool` act as unary conversions
        return 1
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1
    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def iteratee(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Adapt a callback to the `(value, key, collection)` calling convention.

    Collection algorithms always pass three arguments; the returned wrapper
    drops the trailing ones `fn` cannot accept, so `lambda x: x > 2` works
    wherever an iteratee is expected.
    """
    arity = _positional_arity(fn)
    if arity is None:
        return fn

    def wrapper(*args: Any) -> Any:
        return fn(*args[:arity])

    return wrapper


def invoke(fn: Callable[..., Any], *args: Any) -> Any:
    """Call `fn` once with as many leading arguments as it accepts."""
    return iteratee(fn)(*args)
