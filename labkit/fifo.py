"""First-in first-out queue of identified objects."""

from collections import deque


class ObjectQueue:
    """Queue of (identifier, data) entries, searchable by identifier."""

    def __init__(self):
        self._entries = deque()

    def enqueue(self, ident, data):
        """Append data under ident at the back of the queue."""
        self._entries.append((ident, data))

    def dequeue(self):
        """Remove and return the data at the front; IndexError if empty."""
        if not self._entries:
            raise IndexError("dequeue from an empty queue")
        return self._entries.popleft()[1]

    def find(self, ident):
        """Return the data of the first entry with ident, or None."""
        return next((data for key, data in self._entries if key == ident), None)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)