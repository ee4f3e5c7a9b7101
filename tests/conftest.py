"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from collectkit import Sequence
from collectkit.core.oracle import eq


class ListSequence(Sequence[int]):
    """Concrete Sequence backed by a list, iterating with its own cursor."""

    def __init__(self, items=()):
        self._items = list(items)
        self._cursor = 0

    def __iter__(self):
        self._cursor = 0
        return self

    def next(self):
        if self._cursor >= len(self._items):
            raise StopIteration
        item = self._items[self._cursor]
        self._cursor += 1
        return item

    def add(self, item):
        self._items.append(item)

    def contains(self, item):
        return any(eq(x, item) for x in self._items)

    def size(self):
        return len(self._items)

    def remove(self, x):
        for i, item in enumerate(self._items):
            if eq(item, x):
                del self._items[i]
                return
        raise ValueError(f"{x!r} not in sequence")

    def pop(self, i=-1):
        if not self._items or not -len(self._items) <= i < len(self._items):
            return None
        return self._items.pop(i)

    def clear(self):
        self._items.clear()

    def get(self, key):
        return self._items[key] if 0 <= key < len(self._items) else None

    def set(self, key, val):
        self._items[key] = val

    def delete(self, key):
        del self._items[key]

    def append(self, x):
        self._items.append(x)

    def extend(self, iterable):
        self._items.extend(iterable)

    def index(self, item):
        for i, x in enumerate(self._items):
            if eq(x, item):
                return i
        return None

    def reversed(self):
        return iter(self._items[::-1])


@pytest.fixture
def sequence_cls():
    return ListSequence


@pytest.fixture
def users():
    """Small list of user records."""
    return [
        {"name": "ada", "role": "admin", "active": True},
        {"name": "bob", "role": "user", "active": False},
        {"name": "cy", "role": "admin", "active": False},
        {"name": "dee", "role": "user", "active": True},
    ]


@pytest.fixture
def nested():
    """Nested mapping with arrays, mappings and scalar leaves."""
    return {
        "name": "root",
        "size": 3,
        "flags": {"on": True, "off": None},
        "tags": ["a", "b"],
        "items": [{"id": 1}, {"id": 2, "meta": {"x": 1.5}}],
    }
