"""Bob Jenkins' lookup3 ``hashlittle`` hash and bucket-size helpers."""

from __future__ import annotations

__all__ = ["hashlittle", "hashsize", "hashmask"]

_MASK = 0xFFFFFFFF


def _rot(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _MASK


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    a = (a - c) & _MASK
    a ^= _rot(c, 4)
    c = (c + b) & _MASK
    b = (b - a) & _MASK
    b ^= _rot(a, 6)
    a = (a + c) & _MASK
    c = (c - b) & _MASK
    c ^= _rot(b, 8)
    b = (b + a) & _MASK
    a = (a - c) & _MASK
    a ^= _rot(c, 16)
    c = (c + b) & _MASK
    b = (b - a) & _MASK
    b ^= _rot(a, 19)
    a = (a + c) & _MASK
    c = (c - b) & _MASK
    c ^= _rot(b, 4)
    b = (b + a) & _MASK
    return a, b, c


def _final(a: int, b: int, c: int) -> int:
    c ^= b
    c = (c - _rot(b, 14)) & _MASK
    a ^= c
    a = (a - _rot(c, 11)) & _MASK
    b ^= a
    b = (b - _rot(a, 25)) & _MASK
    c ^= b
    c = (c - _rot(b, 16)) & _MASK
    a ^= c
    a = (a - _rot(c, 4)) & _MASK
    b ^= a
    b = (b - _rot(a, 14)) & _MASK
    c ^= b
    c = (c - _rot(b, 24)) & _MASK
    return c


def _words(block: bytes) -> tuple[int, int, int]:
    return (
        int.from_bytes(block[0:4], "little"),
        int.from_bytes(block[4:8], "little"),
        int.from_bytes(block[8:12], "little"),
    )


def hashlittle(key: bytes | bytearray | memoryview | str, initval: int = 0) -> int:
    """Hash ``key`` into a 32-bit value; strings are hashed as UTF-8."""
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    length = len(data)
    a = b = c = (0xDEADBEEF + (length & _MASK) + initval) & _MASK

    if length == 0:
        return c

    pos = 0
    while length - pos > 12:
        wa, wb, wc = _words(data[pos : pos + 12])
        a = (a + wa) & _MASK
        b = (b + wb) & _MASK
        c = (c + wc) & _MASK
        a, b, c = _mix(a, b, c)
        pos += 12

    # The last block holds 1..12 bytes; zero padding matches the tail cases.
    wa, wb, wc = _words(data[pos:].ljust(12, b"\0"))
    a = (a + wa) & _MASK
    b = (b + wb) & _MASK
    c = (c + wc) & _MASK
    return _final(a, b, c)


def hashsize(order: int) -> int:
    """Number of buckets in a table of the given order (``2 ** order``)."""
    if not 0 <= order < 32:
        raise ValueError(f"hash table order out of range: {order}")
    return 1 << order


def hashmask(order: int) -> int:
    """Bit mask selecting a bucket index for a table of the given order."""
    return hashsize(order) - 1