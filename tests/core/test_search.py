"""Tests for contains and index, including duck-typed delegation."""

from collections import deque

import pytest

from collectkit import FrozenSet, Sequence, contains, index


def test_contains_on_lists():
    assert contains([1, 2, 3], 2) is True
    assert contains([1, 2, 3], 9) is False


def test_contains_uses_structural_equality():
    assert contains([{"a": 1}, [2]], {"a": 1})
    assert contains(([1, 2],), [1, 2])


def test_contains_on_strings_is_substring_search():
    assert contains("hello", "ell")
    assert not contains("hello", "z")


def test_string_search_with_non_string_needle():
    assert index("a1b", 1) == -1
    assert contains("abc", None) is False
    assert contains("abc", 5) is False


def test_contains_on_sets_and_mappings():
    assert contains({1, 2}, 1)
    assert contains({"k": 1}, "k")
    assert not contains({"k": 1}, 1)


def test_contains_delegates_to_contains_method():
    class Evens:
        def contains(self, x):
            return x % 2 == 0

    assert contains(Evens(), 4) is True
    assert contains(Evens(), 3) is False


def test_contains_delegates_to_frozen_set():
    assert contains(FrozenSet([1, 2, 3]), 2)
    assert not contains(FrozenSet([1, 2, 3]), 4)


def test_contains_falls_back_to_index_method():
    class Indexed:
        def indexOf(self, x):
            return 0 if x == "here" else -1

    assert contains(Indexed(), "here")
    assert not contains(Indexed(), "gone")


def test_index_on_strings():
    assert index("hello", "l", 0) == 2
    assert index("hello", "l", 3) == 3
    assert index("hello", "z") == -1
    assert index("hello", "h", 10) == -1


def test_index_on_sequences():
    assert index([5, 6, 7], 7) == 2
    assert index([5, 6, 7], 8) == -1
    assert index((5, 6), 5) == 0
    assert index(deque([1, 2]), 2) == 1


def test_index_start_position():
    assert index([1, 2, 1, 2], 1, 1) == 2
    assert index([1, 2, 3], 1, 5) == -1


def test_index_negative_start_counts_from_end():
    assert index([1, 2, 1, 2], 1, -2) == 2
    assert index([1, 2, 3], 1, -10) == 0
    assert index("abcabc", "a", -3) == 3


def test_index_non_sequences():
    assert index({"a": 1}, "a") == -1
    assert index(None, 1) == -1
    assert index(42, 1) == -1


def test_index_prefers_index_of_over_index():
    class Both:
        def indexOf(self, x):
            return 1

        def index(self, x):
            return 2

    assert index(Both(), "x") == 1


def test_index_uses_index_method_verbatim():
    class OnlyIndex:
        def index(self, x):
            return 42

    assert index(OnlyIndex(), "x", 5) == 42


def test_index_none_from_override_falls_back_to_generic(sequence_cls):
    """An override answering None is treated as absent."""
    seq = sequence_cls([1, 2, 3])
    assert index(seq, 2) == 1
    assert index(seq, 9) == -1


def test_non_callable_attribute_is_not_an_override():
    class Weird:
        indexOf = "not a method"

        def index(self, x):
            return 7

    assert index(Weird(), 2) == 7


def test_abstract_sequence_index_propagates():
    class Bare(Sequence[int]):
        pass

    with pytest.raises(NotImplementedError):
        index(Bare(), 1)


def test_contains_on_concrete_sequence(sequence_cls):
    assert contains(sequence_cls([1, 2]), 2)
    assert not contains(sequence_cls([]), 2)
