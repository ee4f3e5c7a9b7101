"""Functional combinators.

Usage:
    inc_then_double = flow(lambda x: x + 1, lambda x: x * 2)
    inc_then_double(3)  # 8

    @cache
    def load(name): ...

    safe_int = result(int)
    safe_int("x")  # (None, ValueError(...))
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any


def true_(*args: Any) -> bool:
    """Predicate that always returns True."""
    return True


def false_(*args: Any) -> bool:
    """Predicate that always returns False."""
    return False


def bind(fn: Callable[..., Any], this: Any, *partials: Any) -> Callable[..., Any]:
    """Bind `fn` as a method of `this`, with `partials` prepended to its arguments.

    Args:
        fn: Plain function whose first parameter receives `this`.
        this: Object to bind as the first argument.
        *partials: Further arguments to prepend.

    Returns:
        New callable taking the remaining arguments.
    """
    return functools.partial(fn, this, *partials)


def partial(fn: Callable[..., Any], *args: Any) -> Callable[..., Any]:
    """Prepend `args` to the arguments `fn` receives."""
    return functools.partial(fn, *args)


def curry(fn: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """Collect positional arguments until `fn` can be called.

    Args:
        fn: Function to curry.
        arity: Number of arguments to wait for. Defaults to the number of
            required positional parameters of `fn`.

    Returns:
        A function that calls `fn` once at least `arity` arguments were given,
        and otherwise returns a function awaiting the rest.
    """
    if arity is None:
        arity = sum(
            1
            for p in inspect.signature(fn).parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
        )

    @functools.wraps(fn)
    def curried(*args: Any) -> Any:
        if len(args) >= arity:
            return fn(*args)
        return lambda *more: curried(*args, *more)

    return curried


def flow(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right: `flow(f, g)(x) == g(f(x))`."""

    def run(x: Any) -> Any:
        for fn in fns:
            x = fn(x)
        return x

    return run


pipe = flow


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right to left: `compose(f, g)(x) == f(g(x))`."""
    return flow(*reversed(fns))


def memoize[T](fn: Callable[..., T], resolver: Callable[..., Any] | None = None) -> Callable[..., T]:
    """Cache the results of `fn`.

    The cache key is `resolver(*args)` when a resolver is given, otherwise the
    first argument, so calls that differ only in later arguments share an
    entry. None results are not cached, and calls whose key is unhashable
    run `fn` without caching.

    Args:
        fn: Function whose results are cached.
        resolver: Function computing the cache key from the arguments.

    Returns:
        Memoized function. The cache is exposed as its `cache` attribute.
    """
    store: dict[Any, T] = {}

    @functools.wraps(fn)
    def memoized(*args: Any, **kwargs: Any) -> T:
        key = resolver(*args, **kwargs) if resolver else (args[0] if args else None)
        try:
            hash(key)
        except TypeError:
            return fn(*args, **kwargs)
        cached = store.get(key)
        if cached is not None:
            return cached
        value = fn(*args, **kwargs)
        if value is not None:
            store[key] = value
        return value

    memoized.cache = store  # type: ignore[attr-defined]
    return memoized


def cache[T](fn: Callable[..., T]) -> Callable[..., T]:
    """Decorator form of `memoize`, keyed by the first argument."""
    return memoize(fn)


def once[T](fn: Callable[..., T]) -> Callable[..., T]:
    """Restrict `fn` to a single invocation; later calls return the first result."""
    called = False
    value: Any = None

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        nonlocal called, value
        if not called:
            value = fn(*args, **kwargs)
            called = True
        return value  # type: ignore[no-any-return]

    return wrapper


def result[T](fn: Callable[..., T]) -> Callable[..., tuple[T | None, Exception | None]]:
    """Wrap `fn` to return a `(value, error)` tuple instead of raising.

    Only `Exception` subclasses are captured; KeyboardInterrupt and
    SystemExit still propagate.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> tuple[T | None, Exception | None]:
        try:
            return fn(*args, **kwargs), None
        except Exception as e:
            return None, e

    return wrapper
