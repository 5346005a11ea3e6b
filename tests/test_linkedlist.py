import math

import pytest

from dslab.linkedlist import LinkedList


def test_construction_keeps_order_and_length():
    linked = LinkedList([2, 13, 4, 16])
    assert list(linked) == [2, 13, 4, 16]
    assert len(linked) == 4


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0
    assert str(linked) == "NULL"


def test_str_format():
    assert str(LinkedList([1, 2, 3])) == "1 -> 2 -> 3 -> NULL"


def test_append_adds_to_end():
    linked = LinkedList([1])
    linked.append(5)
    linked.append(7)
    assert list(linked) == [1, 5, 7]
    assert len(linked) == 3


def test_contains():
    linked = LinkedList([2, 13, 4, 16])
    assert 13 in linked
    assert 99 not in linked


def test_find_is_one_based():
    linked = LinkedList([2, 13, 4, 16])
    assert linked.find(2) == 1
    assert linked.find(16) == 4
    assert linked.find(99) is None


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_at_places_value_at_position(position):
    linked = LinkedList([10, 20, 30])
    linked.insert_at(position, 99)
    assert list(linked)[position - 1] == 99
    assert len(linked) == 4
    assert [v for v in linked if v != 99] == [10, 20, 30]


def test_insert_at_end_then_append_keeps_tail():
    linked = LinkedList([1, 2])
    linked.insert_at(3, 3)
    linked.append(4)
    assert list(linked) == [1, 2, 3, 4]


@pytest.mark.parametrize("position", [0, 5, -1])
def test_insert_at_out_of_range(position):
    linked = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.insert_at(position, 9)
    assert list(linked) == [1, 2, 3]


@pytest.mark.parametrize("value", [0, 3, 5, 8, 12, 20])
def test_insert_sorted_keeps_order(value):
    original = [1, 5, 8, 12]
    linked = LinkedList(original)
    position = linked.insert_sorted(value)
    assert list(linked) == sorted(original + [value])
    assert list(linked)[position - 1] == value


def test_insert_sorted_into_empty():
    linked = LinkedList()
    assert linked.insert_sorted(4) == 1
    assert list(linked) == [4]


def test_remove_at_returns_value():
    linked = LinkedList([10, 20, 30])
    assert linked.remove_at(2) == 20
    assert list(linked) == [10, 30]
    assert linked.remove_at(1) == 10
    assert list(linked) == [30]


def test_remove_last_updates_tail():
    linked = LinkedList([10, 20, 30])
    assert linked.remove_at(3) == 30
    linked.append(40)
    assert list(linked) == [10, 20, 40]


def test_remove_only_element_then_append():
    linked = LinkedList([1])
    assert linked.remove_at(1) == 1
    assert len(linked) == 0
    linked.append(2)
    assert list(linked) == [2]


@pytest.mark.parametrize("position", [0, 4])
def test_remove_at_out_of_range(position):
    linked = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.remove_at(position)


def test_remove_at_from_empty():
    with pytest.raises(IndexError):
        LinkedList().remove_at(1)


def test_remove_first_occurrence():
    linked = LinkedList([3, 7, 3, 9])
    linked.remove(3)
    assert list(linked) == [7, 3, 9]


def test_remove_missing_raises():
    linked = LinkedList([1, 2])
    with pytest.raises(ValueError):
        linked.remove(5)
    assert list(linked) == [1, 2]


def test_sort():
    values = [2, 13, 4, 16, -1, 4]
    linked = LinkedList(values)
    linked.sort()
    assert list(linked) == sorted(values)
    assert len(linked) == len(values)


def test_sort_then_append_keeps_tail():
    linked = LinkedList([3, 1, 2])
    linked.sort()
    linked.append(0)
    assert list(linked) == [1, 2, 3, 0]


def test_stats():
    values = [2, 13, 4, 16]
    summary = LinkedList(values).stats()
    assert summary.maximum == max(values)
    assert summary.minimum == min(values)
    assert summary.total == sum(values)
    assert summary.average == pytest.approx(sum(values) / len(values))
    assert [value for value, _ in summary.sines] == values
    assert all(math.isclose(s, math.sin(v)) for v, s in summary.sines)


def test_stats_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().stats()