"""Insertion-ordered string-keyed hash table with seeded lookup3 hashing."""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from typing import Any

from .lookup3 import hashlittle, hashmask, hashsize
from .seed import current_seed

__all__ = ["HashTable"]

INITIAL_ORDER = 3


class _Pair:
    __slots__ = ("key", "hash", "value", "prev", "next")

    def __init__(self, key: str, key_hash: int, value: Any) -> None:
        self.key = key
        self.hash = key_hash
        self.value = value
        self.prev: _Pair = self
        self.next: _Pair = self


class HashTable(MutableMapping):
    """A mapping from strings to values that remembers insertion order.

    Iteration stays valid when the entry just produced is deleted, and
    entries added during iteration are reached as well.
    """

    def __init__(self) -> None:
        self._order = INITIAL_ORDER
        self._size = 0
        self._buckets: list[list[_Pair]] = [[] for _ in range(hashsize(self._order))]
        self._head = _Pair("", 0, None)

    @staticmethod
    def _hash(key: str) -> int:
        if not isinstance(key, str):
            raise TypeError(f"hash table keys must be str, not {type(key).__name__}")
        return hashlittle(key.encode("utf-8"), current_seed())

    def _bucket(self, key_hash: int) -> list[_Pair]:
        return self._buckets[key_hash & hashmask(self._order)]

    def _find(self, key: str) -> _Pair | None:
        key_hash = self._hash(key)
        for pair in self._bucket(key_hash):
            if pair.hash == key_hash and pair.key == key:
                return pair
        return None

    def _rehash(self) -> None:
        self._order += 1
        self._buckets = [[] for _ in range(hashsize(self._order))]
        node = self._head.next
        while node is not self._head:
            self._bucket(node.hash).append(node)
            node = node.next

    def __getitem__(self, key: str) -> Any:
        pair = self._find(key)
        if pair is None:
            raise KeyError(key)
        return pair.value

    def __setitem__(self, key: str, value: Any) -> None:
        key_hash = self._hash(key)
        # Grow when the load ratio reaches 1, before looking the key up.
        if self._size >= hashsize(self._order):
            self._rehash()
        bucket = self._bucket(key_hash)
        for pair in bucket:
            if pair.hash == key_hash and pair.key == key:
                pair.value = value
                return
        pair = _Pair(key, key_hash, value)
        bucket.insert(0, pair)
        tail = self._head.prev
        pair.prev = tail
        pair.next = self._head
        tail.next = pair
        self._head.prev = pair
        self._size += 1

    def __delitem__(self, key: str) -> None:
        pair = self._find(key)
        if pair is None:
            raise KeyError(key)
        self._bucket(pair.hash).remove(pair)
        # The pair keeps its own links so a live iterator can move past it.
        pair.prev.next = pair.next
        pair.next.prev = pair.prev
        self._size -= 1

    def _walk(self, start: _Pair) -> Iterator[_Pair]:
        node = start
        while node is not self._head:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[str]:
        for pair in self._walk(self._head.next):
            yield pair.key

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def clear(self) -> None:
        """Remove every entry; the bucket count is kept."""
        self._buckets = [[] for _ in range(hashsize(self._order))]
        self._head.next = self._head.prev = self._head
        self._size = 0

    def items_from(self, key: str) -> Iterator[tuple[str, Any]]:
        """Yield ``(key, value)`` pairs in order, starting at ``key``."""
        pair = self._find(key)
        if pair is None:
            raise KeyError(key)
        return ((node.key, node.value) for node in self._walk(pair))

    def bucket_count(self) -> int:
        """Number of buckets currently allocated."""
        return len(self._buckets)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{body}}})"