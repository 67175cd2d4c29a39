"""A separately chained hash table keyed by strings, doubling when its load passes one."""

from __future__ import annotations

from typing import Any


class HashTable:
    """String-keyed hash table with chains, where the newest entry of a key shadows older ones."""

    def __init__(self, size: int = 1) -> None:
        if size < 1:
            raise ValueError(f"table size must be at least 1, got {size}")
        self._buckets: list[list[tuple[str, Any]]] = [[] for _ in range(size)]
        self._count = 0

    def _index(self, key: str) -> int:
        size = len(self._buckets)
        return sum(ord(ch) * ord(ch) % size for ch in key) % size

    def _rehash(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old))]
        for chain in old:
            for key, value in chain:
                self._buckets[self._index(key)].insert(0, (key, value))

    def _find(self, key: str) -> tuple[list[tuple[str, Any]], int]:
        chain = self._buckets[self._index(key)]
        for position, (stored, _) in enumerate(chain):
            if stored == key:
                return chain, position
        raise KeyError(key)

    def insert(self, key: str, value: Any) -> None:
        """Put a new entry at the head of its chain, growing the table if it gets too full."""
        self._buckets[self._index(key)].insert(0, (key, value))
        self._count += 1
        if self._count / len(self._buckets) > 1:
            self._rehash()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self._find(key)
        except KeyError:
            return False
        return True

    def __getitem__(self, key: str) -> Any:
        chain, position = self._find(key)
        return chain[position][1]

    def get(self, key: str, default: Any = None) -> Any:
        """Value of the newest entry for key, or default when there is none."""
        try:
            return self[key]
        except KeyError:
            return default

    def remove(self, key: str) -> None:
        """Drop the newest entry for key; raise KeyError if the key is absent."""
        chain, position = self._find(key)
        del chain[position]
        self._count -= 1

    def buckets(self) -> list[list[tuple[str, Any]]]:
        """Every bucket's (key, value) entries, each chain from its head."""
        return [list(chain) for chain in self._buckets]

    def __len__(self) -> int:
        return self._count