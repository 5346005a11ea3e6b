import pytest

from dslab.bst import ArrayBST


def _build(values, capacity=100):
    tree = ArrayBST(capacity)
    for value in values:
        tree.insert(value)
    return tree


def test_duplicate_insert_reports_existing_slot():
    tree = _build([3, 4, 5, 6])
    before = tree.slots()
    assert tree.insert(4) == tree.index(4)
    assert tree.slots() == before


def test_first_value_is_the_root():
    tree = _build([3, 4, 5, 6])
    assert tree.index(3) == 0


def test_right_leaning_chain_position():
    tree = _build([3, 4, 5, 6])
    assert tree.slots(15)[14] == 6


def test_default_view_has_fifteen_slots():
    tree = _build([3])
    slots = tree.slots()
    assert len(slots) == 15
    assert slots.count(None) == 14


def _check_order(slots, index=0, low=None, high=None):
    if index >= len(slots) or slots[index] is None:
        return
    value = slots[index]
    assert low is None or value > low
    assert high is None or value < high
    _check_order(slots, 2 * index + 1, low, value)
    _check_order(slots, 2 * index + 2, value, high)


def test_slots_obey_search_tree_order():
    values = [50, 30, 70, 20, 40, 60, 80, 35, 65]
    tree = _build(values, capacity=200)
    _check_order(tree.slots(200))
    for value in values:
        assert tree.slots(200)[tree.index(value)] == value


def test_missing_value_has_no_index():
    tree = _build([8, 4, 12])
    assert tree.index(5) is None


def test_capacity_exceeded():
    tree = _build([1, 2], capacity=3)
    with pytest.raises(IndexError):
        tree.insert(3)
    assert tree.index(3) is None


def test_invalid_arguments():
    with pytest.raises(ValueError):
        ArrayBST(0)
    with pytest.raises(ValueError):
        ArrayBST().slots(-1)