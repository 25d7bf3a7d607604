"""A hash table of positive integer keys using quadratic probing."""

from __future__ import annotations


class QuadraticProbingTable:
    """Open-addressing table where 0 marks an empty slot."""

    def __init__(self, size: int = 10) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._slots = [0] * size

    def hash(self, key: int) -> int:
        return key % self.size

    def _probe(self, key: int):
        start = self.hash(key)
        for i in range(self.size):
            yield i, (start + i * i) % self.size

    def insert(self, key: int) -> int:
        """Store key and return its slot; raise ValueError if no slot is reachable."""
        if key == 0:
            raise ValueError("0 marks an empty slot and cannot be stored")
        for _, slot in self._probe(key):
            if self._slots[slot] == 0:
                self._slots[slot] = key
                return slot
        raise ValueError(f"no free slot reachable for key {key}")

    def search(self, key: int) -> int:
        """Return the slot holding key, or -1 if it is absent."""
        if key == 0:
            return -1
        for i, slot in self._probe(key):
            value = self._slots[slot]
            if value == key:
                return slot
            if i > 0 and value == 0:
                return -1
        return -1

    def slots(self) -> list[int]:
        """A copy of the table's slots."""
        return list(self._slots)