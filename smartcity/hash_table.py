"""Separate-chaining hash table keyed by strings."""

from __future__ import annotations

from typing import Any, Iterator

_BASE = 31
_MAX_LOAD_FACTOR = 0.75


def is_prime(num: int) -> bool:
    """Return True if ``num`` is a prime number."""
    if num < 2:
        return False
    if num == 2:
        return True
    if num % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= num:
        if num % divisor == 0:
            return False
        divisor += 2
    return True


def next_prime(num: int) -> int:
    """Return the smallest prime that is at least ``num`` (2 for small values)."""
    if num <= 2:
        return 2
    if num % 2 == 0:
        num += 1
    while not is_prime(num):
        num += 2
    return num


def polynomial_hash(key: str, table_size: int) -> int:
    """Polynomial rolling hash of the UTF-8 bytes of ``key``, base 31."""
    if table_size <= 0:
        raise ValueError("table size must be positive")
    value = 0
    power = 1
    for byte in key.encode("utf-8"):
        value = (value + byte * power) % table_size
        power = (power * _BASE) % table_size
    return value % table_size


class HashTable:
    """A hash table using chaining; grows to a larger prime when over-loaded."""

    def __init__(self, size: int = 101) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._buckets: list[list[list[Any]]] = [[] for _ in range(size)]
        self._count = 0

    def _bucket(self, key: str) -> list[list[Any]]:
        return self._buckets[polynomial_hash(key, len(self._buckets))]

    def insert(self, key: str, data: Any) -> None:
        """Store ``data`` under ``key``, replacing any previous value."""
        if not key:
            raise ValueError("key must not be empty")
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = data
                return
        bucket.append([key, data])
        self._count += 1
        if self.load_factor > _MAX_LOAD_FACTOR:
            self.resize(next_prime(len(self._buckets) * 2))

    def search(self, key: str) -> Any:
        """Return the value stored under ``key``, or None if absent."""
        if not key:
            return None
        for stored_key, data in self._bucket(key):
            if stored_key == key:
                return data
        return None

    def remove(self, key: str) -> None:
        """Delete ``key``; raise KeyError if it is not present."""
        if key:
            bucket = self._bucket(key)
            for position, entry in enumerate(bucket):
                if entry[0] == key:
                    del bucket[position]
                    self._count -= 1
                    return
        raise KeyError(key)

    def is_empty(self) -> bool:
        return self._count == 0

    @property
    def table_size(self) -> int:
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        return self._count / len(self._buckets)

    def resize(self, new_size: int) -> None:
        """Rehash into ``new_size`` buckets; sizes not larger are ignored."""
        if new_size <= len(self._buckets):
            return
        old_buckets = self._buckets
        self._buckets = [[] for _ in range(new_size)]
        for bucket in old_buckets:
            for entry in bucket:
                self._bucket(entry[0]).append(entry)

    def clear(self) -> None:
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        return any(stored_key == key for stored_key, _ in self._bucket(key))

    def __iter__(self) -> Iterator[str]:
        """Iterate over keys in bucket order, then chain order."""
        keys = [entry[0] for bucket in self._buckets for entry in bucket]
        return iter(keys)

    def __str__(self) -> str:
        lines = [f"HashTable Contents (Size: {self._count}):"]
        for index, bucket in enumerate(self._buckets):
            if bucket:
                chain = "".join(f"{entry[0]} -> " for entry in bucket)
                lines.append(f"Bucket[{index}]: {chain}null")
        return "\n".join(lines)