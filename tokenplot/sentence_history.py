import threading
from collections import deque
from typing import List

DEFAULT_CAPACITY = 5


class SentenceHistory:
    """Most recent submitted sentences, oldest first.

    Holds at most ``capacity`` entries; adding one more drops the oldest.
    Every access takes the lock, so concurrent submissions are applied one
    at a time and readers always see a consistent copy.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"history capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def add(self, sentence: str) -> None:
        with self._lock:
            self._items.append(sentence)

    def snapshot(self) -> List[str]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
