from collections import OrderedDict
from threading import Lock


class LRUCache:
    """A bounded key/value cache that evicts the least recently used entry."""

    class NotFound(KeyError):
        pass

    def __init__(self, max_size=1024):
        """
        Args:
            max_size: The number of entries kept before the oldest is evicted.
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")

        self._cache = OrderedDict()
        self._lock = Lock()
        self.max_size = max_size

    def get(self, key):
        with self._lock:
            if key not in self._cache:
                raise self.NotFound(f"Cache key {key} not found.")

            self._cache.move_to_end(key)
            return self._cache[key]

    def set(self, key, value):
        with self._lock:
            self._cache[key] = value
            self._cache.move_to_end(key)

            while len(self._cache) > self.max_size:
                self._cache.popitem(last=False)

    def clear(self):
        with self._lock:
            self._cache.clear()

    def __contains__(self, key):
        return key in self._cache

    def __len__(self):
        return len(self._cache)
