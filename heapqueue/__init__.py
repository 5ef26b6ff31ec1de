from .base import PriorityQueue
from .config import HeapConfig
from .errors import HeapError, EmptyQueueError, HeapInvariantError
from .priority_heap import HeapItem, PriorityHeap
from .snapshot import EntrySnapshot

__all__ = [
    'PriorityQueue',
    'HeapConfig',
    'HeapError',
    'EmptyQueueError',
    'HeapInvariantError',
    'HeapItem',
    'PriorityHeap',
    'EntrySnapshot',
]
