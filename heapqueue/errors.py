class HeapError(Exception):
    """Base class for heapqueue errors."""


class EmptyQueueError(HeapError, IndexError):
    """Raised by peek() and extract_max() when the queue holds no entries."""

    def __init__(self, operation: str):
        super().__init__(f"{operation} from an empty priority queue")
        self.operation = operation


class HeapInvariantError(HeapError):
    """Raised in verify mode when a mutation leaves the heap unordered."""
