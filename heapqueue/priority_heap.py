import logging
from typing import Any, Iterator, Optional
from dataclasses import dataclass

from .base import PriorityQueue
from .config import HeapConfig
from .errors import EmptyQueueError, HeapInvariantError
from .snapshot import EntrySnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class HeapItem:
    data: Any
    priority: Optional[Any]
    sequence: int

    def outranks(self, other: "HeapItem") -> bool:
        """Total order over items: True if self should be served before other.

        A missing priority ranks below every present one. Among items without
        a priority, and among items with equal priorities, the earlier
        sequence wins.
        """
        if self.priority is None and other.priority is None:
            return self.sequence < other.sequence
        if self.priority is None:
            return False
        if other.priority is None:
            return True
        if self.priority > other.priority:
            return True
        if self.priority < other.priority:
            return False
        return self.sequence < other.sequence

    def __gt__(self, other):
        return self.outranks(other)

    def __lt__(self, other):
        return other.outranks(self)


class PriorityHeap(PriorityQueue):
    """Array-backed binary max-heap with FIFO tie-breaking.

    Not thread-safe: callers sharing an instance must serialize every call.
    """

    def __init__(self, config: Optional[HeapConfig] = None):
        self.config = config or HeapConfig()
        self._heap = []
        self._sequence = 0

    def __repr__(self):
        return f"PriorityHeap(name={self.config.name!r}, size={len(self._heap)})"

    def __len__(self):
        return len(self._heap)

    @staticmethod
    def _parent(i: int):
        return (i - 1) // 2

    @staticmethod
    def _left(i: int):
        return 2 * i + 1

    @staticmethod
    def _right(i: int):
        return 2 * i + 2

    def _is_valid(self, i: int):
        return 0 <= i < len(self._heap)

    def _has_parent(self, i: int):
        return i > 0

    def _has_left(self, i: int):
        return self._is_valid(self._left(i))

    def _has_right(self, i: int):
        return self._is_valid(self._right(i))

    def _swap(self, i: int, j: int):
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _higher_child(self, i: int):
        """Index of the child that outranks node i, or None if none does."""
        if not self._has_left(i):
            return None
        best = self._left(i)
        if self._has_right(i):
            right = self._right(i)
            if self._heap[right].outranks(self._heap[best]):
                best = right
        if self._heap[best].outranks(self._heap[i]):
            return best
        return None

    def _sift_up(self, i: int):
        while self._has_parent(i):
            parent = self._parent(i)
            if self._heap[i].outranks(self._heap[parent]):
                self._swap(i, parent)
                i = parent
            else:
                break

    def _sift_down(self, i: int):
        while True:
            child = self._higher_child(i)
            if child is None:
                break
            self._swap(i, child)
            i = child

    def _verify(self, operation: str):
        if self.config.verify and not self.is_heap_ordered():
            logger.error("heap %s lost heap order after %s", self.config.name, operation)
            raise HeapInvariantError(f"heap order violated after {operation}")

    def insert(self, value: Any, priority: Optional[Any] = None):
        item = HeapItem(data=value, priority=priority, sequence=self._sequence)
        self._sequence += 1
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)
        logger.debug("heap %s: inserted seq=%d priority=%r size=%d",
                     self.config.name, item.sequence, priority, len(self._heap))
        self._verify("insert")

    def extract_max(self):
        if not self._heap:
            logger.debug("heap %s: extract_max on empty queue", self.config.name)
            raise EmptyQueueError("extract_max")

        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)

        logger.debug("heap %s: extracted priority=%r size=%d",
                     self.config.name, top.priority, len(self._heap))
        self._verify("extract_max")
        return top.data

    def peek(self):
        if not self._heap:
            logger.debug("heap %s: peek on empty queue", self.config.name)
            raise EmptyQueueError("peek")
        return self._heap[0].data

    def size(self):
        return len(self._heap)

    def is_heap_ordered(self, index: int = 0) -> bool:
        """Check heap order for the subtree rooted at index (whole heap by default)."""
        if not self._is_valid(index):
            return True
        pending = [index]
        while pending:
            i = pending.pop()
            for child in (self._left(i), self._right(i)):
                if not self._is_valid(child):
                    continue
                if not self._heap[i].outranks(self._heap[child]):
                    return False
                pending.append(child)
        return True

    def entries(self) -> Iterator[EntrySnapshot]:
        """Yield a snapshot of every entry in array order.

        Each call starts a fresh pass. Mutating the heap while a pass is in
        progress gives undefined snapshots.
        """
        position = 0
        while position < len(self._heap):
            item = self._heap[position]
            yield EntrySnapshot(position=position, value=item.data, priority=item.priority)
            position += 1
