from abc import ABC, abstractmethod
from typing import Any, Optional


class PriorityQueue(ABC):
    """Contract shared by priority queue implementations.

    Values come out highest priority first. A priority of None is allowed and
    ranks below every present priority.
    """

    @abstractmethod
    def insert(self, value: Any, priority: Optional[Any] = None) -> None:
        ...

    @abstractmethod
    def peek(self) -> Any:
        """Return the highest-ranked value without removing it."""

    @abstractmethod
    def extract_max(self) -> Any:
        """Remove and return the highest-ranked value."""

    @abstractmethod
    def size(self) -> int:
        ...

    def is_empty(self) -> bool:
        return self.size() == 0
