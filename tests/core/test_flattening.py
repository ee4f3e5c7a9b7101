"""Tests for flatten, flatten_array and flatten_obj."""

from hypothesis import given
from hypothesis import strategies as st

from collectkit import flatten, flatten_array, flatten_obj

nested_lists = st.recursive(
    st.integers(),
    lambda children: st.lists(children, max_size=4),
    max_leaves=25,
)

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=5),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(min_size=1, max_size=3), children, max_size=4),
    max_leaves=20,
)


# flatten dispatch


def test_falsy_depth_is_a_no_op():
    arr = [1, [2]]
    assert flatten(arr, 0) is arr
    assert flatten(arr, False) is arr
    assert arr == [1, [2]]


def test_flatten_scalars_unchanged():
    assert flatten(5) == 5
    assert flatten("abc") == "abc"
    assert flatten(None) is None


def test_flatten_mapping_uses_dotted_paths():
    assert flatten({"a": {"b": 1}}) == {"a.b": 1}


def test_flatten_tuple_returns_new_tuple():
    assert flatten((1, (2, 3), [4])) == (1, 2, 3, 4)


# flatten_array


def test_flatten_array_mutates_in_place():
    """The input list itself is rewritten and returned."""
    arr = [1, [2, 3], 4]
    result = flatten_array(arr)

    assert result is arr
    assert arr == [1, 2, 3, 4]


def test_flatten_array_drops_empty_nested_lists():
    assert flatten_array([[], 1, [[]], 2]) == [1, 2]


def test_spliced_elements_are_scanned_again():
    """Arrays spliced in at the current position are flattened in turn."""
    assert flatten_array([[[1]], 2]) == [1, 2]
    assert flatten_array([1, [2, [3, [4]]]]) == [1, 2, 3, 4]


def test_unbounded_depth():
    assert flatten_array([1, [2, [3, [4, [5]]]]], True) == [1, 2, 3, 4, 5]


def test_nested_arrays_inside_mappings_are_left_alone():
    inner = {"k": [1, [2]]}
    assert flatten_array([[inner]]) == [inner]
    assert inner == {"k": [1, [2]]}


@given(st.lists(nested_lists, max_size=5))
def test_depth_one_leaves_no_array_elements(arr):
    """PROPERTY: after flatten(A, 1) no top-level element is an array."""
    result = flatten(list(arr), 1)
    assert not any(isinstance(x, list) for x in result)


@given(st.lists(nested_lists, max_size=5))
def test_flatten_preserves_leaf_order(arr):
    def leaves(x):
        if isinstance(x, list):
            for item in x:
                yield from leaves(item)
        else:
            yield x

    expected = list(leaves(arr))
    assert flatten_array(arr, True) == expected


# flatten_obj


def test_flatten_obj_paths(nested):
    assert flatten_obj(nested) == {
        "name": "root",
        "size": 3,
        "flags.on": True,
        "tags[0]": "a",
        "tags[1]": "b",
        "items[0].id": 1,
        "items[1].id": 2,
        "items[1].meta.x": 1.5,
    }


def test_flatten_obj_keep_null(nested):
    result = flatten_obj(nested, keep_null=True)
    assert "flags.off" in result
    assert result["flags.off"] is None


def test_flatten_obj_top_level_array():
    assert flatten_obj([1, {"a": 2}]) == {"[0]": 1, "[1].a": 2}


def test_flatten_obj_prefix_and_existing_result():
    existing = {"keep": 1}
    result = flatten_obj({"a": 2}, prefix="root", result=existing)
    assert result is existing
    assert existing == {"keep": 1, "root.a": 2}


def test_flatten_obj_does_not_share_results_between_calls():
    flatten_obj({"a": 1})
    assert flatten_obj({"b": 2}) == {"b": 2}


def test_flatten_obj_scalar_root():
    assert flatten_obj(7) == {"": 7}


def test_flatten_obj_drops_nan_and_unknown_leaves():
    assert flatten_obj({"n": float("nan"), "o": object(), "v": 1}) == {"v": 1}


@given(json_values)
def test_flatten_obj_values_are_leaves(value):
    """PROPERTY: every value in the result is a scalar, None only with keep_null."""
    for keep_null in (False, True):
        for leaf in flatten_obj(value, keep_null=keep_null).values():
            assert not isinstance(leaf, (list, tuple, dict))
            if not keep_null:
                assert leaf is not None
