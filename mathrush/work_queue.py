"""Thread-safe FIFO of pending problems shared by the producer and consumer.

Every operation holds one lock for its whole duration. There is no blocking
``get``: callers peek and handle ``None`` themselves.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ConcurrentQueue(Generic[T]):
    """FIFO guarded by a single mutex."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()

    def enqueue(self, item: T) -> None:
        with self._lock:
            self._items.append(item)

    def dequeue(self) -> Optional[T]:
        """Remove and return the front item, or None if the queue is empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items.popleft()

    def peek(self) -> Optional[T]:
        """Return the front item without removing it, or None if empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items[0]

    def size(self) -> int:
        with self._lock:
            return len(self._items)

    def snapshot(self) -> List[T]:
        """Copy of the current contents, front first."""
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        return self.size()
