"""Functional combinators: binding, currying, composition and caching."""

from collectkit.combinators.core import (
    bind,
    cache,
    compose,
    curry,
    false_,
    flow,
    memoize,
    once,
    partial,
    pipe,
    result,
    true_,
)

__all__ = [
    "bind",
    "partial",
    "curry",
    "flow",
    "pipe",
    "compose",
    "memoize",
    "cache",
    "once",
    "result",
    "true_",
    "false_",
]
