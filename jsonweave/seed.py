"""Process-wide seed for the object hash table's hash function."""

from __future__ import annotations

import os
import threading
import time

__all__ = ["generate_seed", "object_seed", "current_seed"]

_MASK = 0xFFFFFFFF

_lock = threading.Lock()
_seed = 0


def _seed_from_urandom() -> int | None:
    try:
        data = os.urandom(4)
    except (OSError, NotImplementedError):
        return None
    if len(data) != 4:
        return None
    return int.from_bytes(data, "big")


def _seed_from_timestamp_and_pid() -> int:
    seconds, micros = divmod(time.time_ns() // 1000, 1_000_000)
    return ((seconds & _MASK) ^ micros ^ (os.getpid() & _MASK)) & _MASK


def generate_seed() -> int:
    """Produce a random, non-zero 32-bit seed."""
    seed = _seed_from_urandom()
    if seed is None:
        seed = _seed_from_timestamp_and_pid()
    return seed or 1


def object_seed(seed: int = 0) -> None:
    """Set the hash seed once; a zero ``seed`` asks for a random one.

    Later calls have no effect once the seed has been set.
    """
    global _seed
    with _lock:
        if _seed == 0:
            new_seed = seed & _MASK
            _seed = new_seed or generate_seed()


def current_seed() -> int:
    """Return the hash seed, choosing a random one if none is set yet."""
    if _seed == 0:
        object_seed(0)
    return _seed