import pytest
from hypothesis import given
from hypothesis import strategies as st

from cdatax.linkedlist import LinkedList


def test_append_and_iterate():
    items = LinkedList()
    for word in ["x", "y", "z"]:
        items.append(word)
    assert list(items) == ["x", "y", "z"]
    assert len(items) == 3


def test_constructor_items():
    items = LinkedList([1, 2, 3])
    assert list(items) == [1, 2, 3]
    assert list(reversed(items)) == [3, 2, 1]


def test_insert_at_front_middle_and_end():
    items = LinkedList([1, 2, 3, 4])
    items.insert(0, "front")
    items.insert(2, "middle")
    items.insert(len(items), "end")
    assert list(items) == ["front", 1, "middle", 2, 3, 4, "end"]
    assert list(reversed(items)) == list(reversed(list(items)))


def test_first_and_last():
    items = LinkedList(["a", "b", "c"])
    assert items.first() == "a"
    assert items.last() == "c"


def test_first_last_of_empty_raise():
    items = LinkedList()
    with pytest.raises(IndexError):
        items.first()
    with pytest.raises(IndexError):
        items.last()


def test_getitem_from_both_halves():
    values = list(range(10))
    items = LinkedList(values)
    assert [items[i] for i in range(10)] == values
    assert items[-1] == 9


@pytest.mark.parametrize("index", [4, -5])
def test_getitem_out_of_range(index):
    with pytest.raises(IndexError):
        LinkedList([1, 2, 3, 4])[index]


def test_insert_out_of_range():
    items = LinkedList([1])
    with pytest.raises(IndexError):
        items.insert(2, "bad")
    assert list(items) == [1]


@given(
    st.lists(
        st.tuples(st.integers(min_value=0, max_value=1000), st.integers()),
        max_size=40,
    )
)
def test_inserts_match_builtin_list(operations):
    expected = []
    items = LinkedList()
    for raw_index, value in operations:
        index = raw_index % (len(expected) + 1)
        expected.insert(index, value)
        items.insert(index, value)
    assert list(items) == expected
    assert list(reversed(items)) == expected[::-1]
    assert [items[i] for i in range(len(expected))] == expected
    assert len(items) == len(expected)