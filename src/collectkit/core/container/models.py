"""Container models: capability protocols, abstract bases, and FrozenSet.

Capability protocols are structural: any value exposing the named methods
satisfies them without inheriting from anything. `Collection` and `Sequence`
are extension points for user-defined containers; their defaults either
describe an empty container or raise NotImplementedError until overridden.

Usage:
    class Stack(Sequence[int]):
        def __init__(self):
            self._items = []

        def get(self, key):
            return self._items[key]

        def size(self):
            return len(self._items)
        ...

    frozen = FrozenSet([1, 2, 3])
    frozen.add(4)  # raises FrozenMutationError
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterable, Iterator
from typing import Any, NoReturn, Protocol, Self, runtime_checkable


class FrozenMutationError(TypeError):
    """Raised when a FrozenSet is modified after construction."""

    pass


@runtime_checkable
class Container(Protocol):
    """Answers membership queries."""

    def contains(self, x: Any) -> bool: ...


@runtime_checkable
class Comparable(Protocol):
    """Rich comparison, as in Python's data model.

    `eq` and `ne` are required and must negate each other. `lt`, `le`, `gt`
    and `ge` are optional; `collectkit.core.oracle.comp` uses `lt` or `gt`
    when present.
    """

    def eq(self, other: Any) -> bool: ...
    def ne(self, other: Any) -> bool: ...


@runtime_checkable
class Reversible[T](Protocol):
    """Iterable that also supports backward iteration."""

    def reversed(self) -> Iterator[T]: ...


class Collection(ABC):
    """An iterable container type.

    Abstract base class for user-defined collections. The collection is its
    own iterator: subclasses advance their iteration state in `next()` and
    raise StopIteration when done. The default `next()` never advances, so a
    bare Collection iterates as empty.
    """

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Any:
        return self.next()

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def next(self) -> Any:
        """Return the next item of the iteration."""
        raise StopIteration

    def add(self, item: Any) -> None:
        """Add a new item to the container. No-op until overridden."""

    def contains(self, item: Any) -> bool:
        """Check if item is present in the container."""
        return False

    def size(self) -> int:
        """Return the total number of elements in the container."""
        raise NotImplementedError(f"{type(self).__name__}.size() is not implemented")

    def remove(self, x: Any) -> None:
        """Remove the first item equal to `x`.

        The default only checks membership; subclasses override it to
        perform the removal.

        Raises:
            ValueError: If `x` is not in the container.
        """
        if not self.contains(x):
            raise ValueError(f"{type(self).__name__}.remove(x): x not in collection")

    def pop(self, i: Any = None) -> Any:
        """Retrieve and remove the item at index `i`.

        Returns:
            The item, or None if not found.
        """
        return None

    def clear(self) -> None:
        """Remove all items from the container. No-op until overridden."""


class Sequence[T](Collection):
    """An iterable type with efficient index-based access.

    A fresh sequence is empty (`size()` is 0), but key access, search and
    reverse iteration have no sound default and raise NotImplementedError.
    """

    def __getitem__(self, key: Any) -> T | None:
        return self.get(key)

    def __setitem__(self, key: Any, val: T) -> None:
        self.set(key, val)

    def __delitem__(self, key: Any) -> None:
        self.delete(key)

    def __reversed__(self) -> Iterator[T]:
        return self.reversed()

    def get(self, key: Any) -> T | None:
        """Return the item at the given key or index."""
        raise NotImplementedError(f"{type(self).__name__}.get() is not implemented")

    def set(self, key: Any, val: T) -> None:
        """Set a new value at the given key or index."""
        raise NotImplementedError(f"{type(self).__name__}.set() is not implemented")

    def delete(self, key: Any) -> None:
        """Delete the given key or index and its value."""
        raise NotImplementedError(f"{type(self).__name__}.delete() is not implemented")

    def append(self, x: T) -> None:
        """Add a new item to the end of the sequence."""

    def extend(self, iterable: Iterable[T]) -> None:
        """Append all the items to the sequence."""

    def index(self, item: T) -> int | None:
        """Return the lowest index of `item`, or None if not found."""
        raise NotImplementedError(f"{type(self).__name__}.index() is not implemented")

    def size(self) -> int:
        return 0

    def reversed(self) -> Iterator[T]:
        """Iterate the items from last to first."""
        raise NotImplementedError(f"{type(self).__name__}.reversed() is not implemented")


class FrozenSet[T](set[T]):
    """A set that can only be populated by its constructor.

    Every mutating method raises FrozenMutationError and leaves the elements
    untouched.
    """

    __slots__ = ("_frozen",)

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        if getattr(self, "_frozen", False):
            self._refuse()
        super().__init__(iterable)
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            self._refuse()
        super().__setattr__(name, value)

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(frozenset(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self, key=repr)!r})"

    def __reduce__(self) -> tuple[type[Self], tuple[list[T]]]:
        return (type(self), (list(self),))

    def _refuse(self) -> NoReturn:
        raise FrozenMutationError(f"{type(self).__name__} cannot be modified.")

    def contains(self, x: Any) -> bool:
        return x in self

    def size(self) -> int:
        return len(self)

    def add(self, item: T) -> NoReturn:
        self._refuse()

    def delete(self, item: T) -> NoReturn:
        self._refuse()

    def clear(self) -> NoReturn:
        self._refuse()

    def discard(self, item: T) -> NoReturn:
        self._refuse()

    def remove(self, item: T) -> NoReturn:
        self._refuse()

    def pop(self) -> NoReturn:
        self._refuse()

    def update(self, *others: Iterable[T]) -> NoReturn:
        self._refuse()

    def intersection_update(self, *others: Iterable[Any]) -> NoReturn:
        self._refuse()

    def difference_update(self, *others: Iterable[Any]) -> NoReturn:
        self._refuse()

    def symmetric_difference_update(self, other: Iterable[T]) -> NoReturn:
        self._refuse()

    def __ior__(self, other: Any) -> NoReturn:
        self._refuse()

    def __iand__(self, other: Any) -> NoReturn:
        self._refuse()

    def __isub__(self, other: Any) -> NoReturn:
        self._refuse()

    def __ixor__(self, other: Any) -> NoReturn:
        self._refuse()
