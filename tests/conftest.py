import random

import pytest

from heapqueue import HeapConfig, PriorityHeap


def drain(heap):
    """Extract every value from heap, checking heap order after each removal."""
    values = []
    while not heap.is_empty():
        values.append(heap.extract_max())
        assert heap.is_heap_ordered()
    return values


@pytest.fixture
def heap():
    return PriorityHeap()


@pytest.fixture
def verified_heap():
    """Heap that re-checks its ordering after every mutation."""
    return PriorityHeap(HeapConfig(name="verified", verify=True))


@pytest.fixture
def rng():
    return random.Random(1234)
