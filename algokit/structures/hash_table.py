"""Hash table of integers using separate chaining."""

from __future__ import annotations


class HashTable:
    """A fixed number of buckets, each a list, indexed by ``value % size``."""

    def __init__(self, size: int = 5) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, value: int) -> list[int]:
        return self._buckets[value % self.size]

    def insert(self, value: int) -> None:
        """Append ``value`` to the chain of its bucket."""
        self._bucket(value).append(value)

    def remove(self, value: int) -> None:
        """Remove every occurrence of ``value``; absent values are ignored."""
        bucket = self._bucket(value)
        bucket[:] = [item for item in bucket if item != value]

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and value in self._bucket(value)

    def format_table(self) -> str:
        """Render each bucket as ``index --> v v `` on its own line."""
        return "".join(
            f"{index} --> " + "".join(f"{value} " for value in bucket) + "\n"
            for index, bucket in enumerate(self._buckets)
        )