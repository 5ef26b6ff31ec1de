"""
Tests for the HeapItem total order: both priorities absent, one absent, both present.
"""
import pytest
from heapqueue import HeapItem


def item(priority, sequence):
    return HeapItem(data=f"v{sequence}", priority=priority, sequence=sequence)


def test_both_absent_earlier_sequence_wins():
    older = item(None, 1)
    newer = item(None, 2)
    assert older.outranks(newer)
    assert not newer.outranks(older)


def test_present_priority_beats_absent():
    present = item(-1000, 5)
    absent = item(None, 0)
    assert present.outranks(absent)
    assert not absent.outranks(present)


def test_absent_loses_even_when_inserted_first():
    absent = item(None, 0)
    present = item(0, 1)
    assert not absent.outranks(present)
    assert present.outranks(absent)


def test_higher_priority_wins():
    high = item(9, 10)
    low = item(5, 0)
    assert high.outranks(low)
    assert not low.outranks(high)


def test_equal_priority_breaks_tie_by_sequence():
    first = item(5, 3)
    second = item(5, 4)
    assert first.outranks(second)
    assert not second.outranks(first)


def test_order_is_never_equal():
    pairs = [
        (item(None, 0), item(None, 1)),
        (item(None, 0), item(3, 1)),
        (item(3, 0), item(3, 1)),
        (item(2, 0), item(3, 1)),
    ]
    for a, b in pairs:
        assert a.outranks(b) != b.outranks(a)


def test_comparison_operators_follow_outranks():
    high = item(9, 0)
    low = item(None, 1)
    assert high > low
    assert low < high
    assert not (low > high)


def test_float_and_string_priorities():
    assert item(1.5, 1).outranks(item(1.25, 0))
    assert item("b", 1).outranks(item("a", 0))


def test_items_are_immutable():
    entry = item(1, 0)
    with pytest.raises(AttributeError):
        entry.priority = 2
    assert entry.priority == 1
