import pytest
from hypothesis import given
from hypothesis import strategies as st

from cdatax.dynarray import DynamicArray


def test_default_capacity_doubles_after_fourth_append():
    array = DynamicArray()
    for value in range(4):
        array.append(value)
    assert array.capacity == 4
    array.append(4)
    assert array.capacity == 8
    assert len(array) == 5


def test_indexing_returns_appended_values():
    array = DynamicArray(reserve=2)
    for word in ["a", "b", "c"]:
        array.append(word)
    assert [array[0], array[1], array[2]] == ["a", "b", "c"]
    assert array[-1] == "c"


@pytest.mark.parametrize("index", [3, -4, 100])
def test_out_of_range_index_raises(index):
    array = DynamicArray()
    for value in (1, 2, 3):
        array.append(value)
    with pytest.raises(IndexError):
        array[index]
    assert list(array) == [1, 2, 3]
    assert len(array) == 3


def test_empty_array_index_raises():
    array = DynamicArray()
    with pytest.raises(IndexError):
        array[0]
    assert len(array) == 0
    assert list(array) == []


@pytest.mark.parametrize("reserve", [0, -1])
def test_invalid_reserve_rejected(reserve):
    with pytest.raises(ValueError):
        DynamicArray(reserve)


@given(st.lists(st.integers()), st.integers(min_value=1, max_value=16))
def test_iteration_matches_appends_and_capacity_invariant(values, reserve):
    array = DynamicArray(reserve)
    for value in values:
        array.append(value)
    assert list(array) == values
    assert len(array) == len(values)
    assert array.capacity >= len(array)
    ratio, remainder = divmod(array.capacity, reserve)
    assert remainder == 0
    assert ratio & (ratio - 1) == 0