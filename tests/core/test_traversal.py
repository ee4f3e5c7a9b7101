"""Tests for for_each and map_."""

import pytest

from collectkit import for_each, map_


def test_for_each_over_array_passes_value_index_array():
    calls = []
    arr = [10, 20]
    result = for_each(lambda v, i, a: calls.append((v, i, a is arr)), arr)

    assert result is None
    assert calls == [(10, 0, True), (20, 1, True)]


def test_for_each_over_mapping_follows_key_order():
    calls = []
    data = {"b": 1, "a": 2}
    for_each(lambda v, k: calls.append((k, v)), data)
    assert calls == [("b", 1), ("a", 2)]


def test_for_each_ignores_scalars():
    calls = []
    for_each(calls.append, 5)
    assert calls == []


def test_map_over_array_returns_new_list():
    arr = [1, 2, 3]
    result = map_(lambda x: x * 10, arr)

    assert result == [10, 20, 30]
    assert arr == [1, 2, 3]


def test_map_passes_index():
    assert map_(lambda x, i: (i, x), ["a", "b"]) == [(0, "a"), (1, "b")]


def test_map_property_shorthand(users):
    assert map_("name", users) == ["ada", "bob", "cy", "dee"]
    assert map_("missing", [{"a": 1}]) == [None]


def test_map_over_mapping():
    data = {"x": 1, "y": 2}
    assert map_(lambda v, k, o: f"{k}={v}/{len(o)}", data) == ["x=1/2", "y=2/2"]


def test_map_over_mapping_rejects_property_shorthand():
    with pytest.raises(TypeError):
        map_("name", {"a": {"name": 1}})


def test_map_over_tuple_returns_list():
    assert map_(str, (1, 2)) == ["1", "2"]


def test_map_other_operands_yield_none():
    assert map_(lambda x: x, 3) is None
    assert map_(lambda x: x, None) is None
