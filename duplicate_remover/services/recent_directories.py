"""Most-recently-scanned directories."""

import threading
from collections import deque


class RecentDirectories:
    def __init__(self, limit: int = 10):
        self._items: deque[str] = deque(maxlen=limit)
        self._lock = threading.Lock()

    def add(self, directory: str) -> None:
        with self._lock:
            if directory in self._items:
                self._items.remove(directory)
            self._items.appendleft(directory)

    def list(self) -> list[str]:
        with self._lock:
            return list(self._items)
