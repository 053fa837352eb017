"""A key-only cache that evicts the least recently used key when full."""

from collections import OrderedDict


class LRUCache:
    """Holds up to `capacity` keys, most recently used last."""

    def __init__(self, capacity):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._keys = OrderedDict()

    def get(self, key):
        """Return True and mark key as recently used if present, else False."""
        if key not in self._keys:
            return False
        self._keys.move_to_end(key)
        return True

    def put(self, key):
        """Insert key as most recently used.

        Returns True if it fit without eviction, False if the least recently
        used key had to make room for it.
        """
        if key in self._keys:
            self._keys.move_to_end(key)
            return True
        evicted = len(self._keys) >= self.capacity
        if evicted:
            self._keys.popitem(last=False)
        self._keys[key] = None
        return not evicted

    def __len__(self):
        return len(self._keys)

    def __contains__(self, key):
        return key in self._keys