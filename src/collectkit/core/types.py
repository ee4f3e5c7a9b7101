"""Core type definitions for collectkit."""

from collections.abc import Callable, Mapping
from typing import Any, Literal

type Iteratee = Callable[..., Any]
"""Function applied to each element: called as `fn(value, key, collection)`.

Iteratees may declare fewer parameters; trailing arguments they cannot accept
are dropped (see `collectkit.core.oracle.invoke`).
"""

type Predicate = Callable[..., Any]
"""Iteratee whose result is only tested for truthiness."""

type Selector = Predicate | str | Mapping[Any, Any]
"""Predicate, property-name shorthand, or structural template."""

type Comp = Callable[[Any, Any], Literal[-1, 0, 1]]
"""Three-way comparison function."""

type Depth = bool | int
"""Flattening depth: an int budget, or `True` for unbounded."""
