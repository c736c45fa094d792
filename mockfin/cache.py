import time
from typing import Any, Callable, Dict, Tuple, Optional

class TTLCache:
    """In-process cache whose TTL doubles as the dashboard refresh interval."""

    def __init__(self, ttl_seconds: int = 60, max_items: int = 1000,
                 clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl_seconds
        self.max_items = max_items
        self._clock = clock
        self._store: Dict[str, Tuple[float, Any]] = {}

    def __len__(self):
        return len(self._store)

    def _evict_if_needed(self):
        while len(self._store) > self.max_items:
            oldest_key = min(self._store, key=lambda k: self._store[k][0])
            self._store.pop(oldest_key, None)

    def get(self, key: str) -> Optional[Any]:
        item = self._store.get(key)
        if item is None:
            return None
        ts, value = item
        if self._clock() - ts > self.ttl:
            self._store.pop(key, None)
            return None
        return value

    def set(self, key: str, value: Any):
        self._store[key] = (self._clock(), value)
        self._evict_if_needed()

    def clear(self):
        self._store.clear()
