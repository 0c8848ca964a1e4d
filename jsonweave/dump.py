"""Serialise Python values to JSON text with jansson-style flags."""

from __future__ import annotations

import enum
import math
import os
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TextIO

from .errors import ErrorCode, JsonError

__all__ = [
    "DumpFlags",
    "MAX_INDENT",
    "indent",
    "real_precision",
    "dump_callback",
    "dumps",
    "dumpb",
    "dumpf",
    "dumpfd",
    "dump_file",
]

MAX_INDENT = 0x1F
_DEFAULT_PRECISION = 17


class DumpFlags(enum.IntFlag):
    """Flags controlling the encoder's output."""

    COMPACT = 0x20
    ENSURE_ASCII = 0x40
    SORT_KEYS = 0x80
    PRESERVE_ORDER = 0x100
    ENCODE_ANY = 0x200
    ESCAPE_SLASH = 0x400
    EMBED = 0x10000


def indent(n: int) -> int:
    """Flag value requesting ``n`` spaces of indentation (at most 31)."""
    return n & MAX_INDENT


def real_precision(n: int) -> int:
    """Flag value requesting ``n`` significant digits for reals (at most 31)."""
    return (n & 0x1F) << 11


def _flags_to_indent(flags: int) -> int:
    return flags & MAX_INDENT


def _flags_to_precision(flags: int) -> int:
    return (flags >> 11) & 0x1F


_SHORT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "/": "\\/",
}


def _escape(ch: str) -> str:
    short = _SHORT_ESCAPES.get(ch)
    if short is not None:
        return short
    cp = ord(ch)
    if cp < 0x10000:
        return f"\\u{cp:04X}"
    cp -= 0x10000
    first = 0xD800 | ((cp & 0xFFC00) >> 10)
    last = 0xDC00 | (cp & 0x003FF)
    return f"\\u{first:04X}\\u{last:04X}"


def _format_real(value: float, precision: int) -> str:
    if not math.isfinite(value):
        raise JsonError("Invalid floating point value", ErrorCode.NUMERIC_OVERFLOW)
    text = f"{value:.{precision or _DEFAULT_PRECISION}g}"
    if "e" in text:
        mantissa, exponent = text.split("e")
        sign = "-" if exponent.startswith("-") else ""
        digits = exponent.lstrip("+-").lstrip("0") or "0"
        return f"{mantissa}e{sign}{digits}"
    if "." not in text:
        text += ".0"
    return text


class _Encoder:
    def __init__(self, flags: int) -> None:
        self.flags = flags & ~DumpFlags.EMBED
        self.indent = _flags_to_indent(flags)
        self.compact = bool(flags & DumpFlags.COMPACT)
        self.ensure_ascii = bool(flags & DumpFlags.ENSURE_ASCII)
        self.escape_slash = bool(flags & DumpFlags.ESCAPE_SLASH)
        self.sort_keys = bool(flags & DumpFlags.SORT_KEYS)
        self.precision = _flags_to_precision(flags)
        self.separator = ":" if self.compact else ": "
        self._parents: set[int] = set()

    @contextmanager
    def _guard(self, container: Any) -> Iterator[None]:
        key = id(container)
        if key in self._parents:
            raise JsonError("cannot dump circular reference", ErrorCode.INVALID_ARGUMENT)
        self._parents.add(key)
        try:
            yield
        finally:
            self._parents.discard(key)

    def _newline(self, depth: int, space: bool) -> Iterator[str]:
        if self.indent > 0:
            yield "\n" + " " * (depth * self.indent)
        elif space and not self.compact:
            yield " "

    def _needs_escape(self, ch: str) -> bool:
        cp = ord(ch)
        if 0xD800 <= cp <= 0xDFFF:
            raise JsonError("Invalid UTF-8 string", ErrorCode.INVALID_UTF8)
        return (
            ch in '\\"'
            or cp < 0x20
            or (self.escape_slash and ch == "/")
            or (self.ensure_ascii and cp > 0x7F)
        )

    def string(self, text: str) -> Iterator[str]:
        yield '"'
        start = 0
        for pos, ch in enumerate(text):
            if self._needs_escape(ch):
                if start < pos:
                    yield text[start:pos]
                yield _escape(ch)
                start = pos + 1
        if start < len(text):
            yield text[start:]
        yield '"'

    def value(self, value: Any, depth: int, embed: bool = False) -> Iterator[str]:
        if value is None:
            yield "null"
        elif value is True:
            yield "true"
        elif value is False:
            yield "false"
        elif isinstance(value, int):
            yield str(value)
        elif isinstance(value, float):
            yield _format_real(value, self.precision)
        elif isinstance(value, str):
            yield from self.string(value)
        elif isinstance(value, (list, tuple)):
            yield from self.array(value, depth, embed)
        elif isinstance(value, Mapping):
            yield from self.object(value, depth, embed)
        else:
            raise JsonError(
                f"cannot dump value of type {type(value).__name__}", ErrorCode.WRONG_TYPE
            )

    def array(self, items: list | tuple, depth: int, embed: bool) -> Iterator[str]:
        with self._guard(items):
            if not embed:
                yield "["
            if items:
                yield from self._newline(depth + 1, False)
                last = len(items) - 1
                for pos, item in enumerate(items):
                    yield from self.value(item, depth + 1)
                    if pos < last:
                        yield ","
                        yield from self._newline(depth + 1, True)
                    else:
                        yield from self._newline(depth, False)
            if not embed:
                yield "]"

    def object(self, mapping: Mapping, depth: int, embed: bool) -> Iterator[str]:
        with self._guard(mapping):
            if not embed:
                yield "{"
            keys = list(mapping)
            for key in keys:
                if not isinstance(key, str):
                    raise JsonError(
                        f"object key must be str, not {type(key).__name__}",
                        ErrorCode.WRONG_TYPE,
                    )
            if keys:
                if self.sort_keys:
                    keys.sort()
                yield from self._newline(depth + 1, False)
                last = len(keys) - 1
                for pos, key in enumerate(keys):
                    yield from self.string(key)
                    yield self.separator
                    yield from self.value(mapping[key], depth + 1)
                    if pos < last:
                        yield ","
                        yield from self._newline(depth + 1, True)
                    else:
                        yield from self._newline(depth, False)
            if not embed:
                yield "}"


def _chunks(value: Any, flags: int) -> Iterator[str]:
    if not flags & DumpFlags.ENCODE_ANY and not isinstance(
        value, (list, tuple, Mapping)
    ):
        raise JsonError(
            "top-level value must be an array or an object", ErrorCode.INVALID_ARGUMENT
        )
    encoder = _Encoder(flags)
    return encoder.value(value, 0, embed=bool(flags & DumpFlags.EMBED))


def dump_callback(value: Any, callback: Callable[[str], Any], flags: int = 0) -> None:
    """Feed the encoding of ``value`` to ``callback`` piece by piece.

    A true return value from ``callback`` stops dumping and raises JsonError.
    """
    for chunk in _chunks(value, flags):
        if callback(chunk):
            raise JsonError("dump callback failed", ErrorCode.UNKNOWN)


def dumps(value: Any, flags: int = 0) -> str:
    """Return the JSON text for ``value``."""
    return "".join(_chunks(value, flags))


def dumpb(value: Any, size: int, flags: int = 0) -> bytes:
    """Return the UTF-8 encoding of ``value``; it must fit in ``size`` bytes."""
    data = dumps(value, flags).encode("utf-8")
    if len(data) > size:
        raise JsonError(
            f"buffer too small: {len(data)} bytes needed, {size} available",
            ErrorCode.INVALID_ARGUMENT,
        )
    return data


def dumpf(value: Any, stream: TextIO, flags: int = 0) -> None:
    """Write the JSON text for ``value`` to a text stream."""

    def write(chunk: str) -> None:
        stream.write(chunk)

    dump_callback(value, write, flags)


def dumpfd(value: Any, fd: int, flags: int = 0) -> None:
    """Write the UTF-8 JSON text for ``value`` to a file descriptor."""

    def write(chunk: str) -> bool:
        data = chunk.encode("utf-8")
        return os.write(fd, data) != len(data)

    dump_callback(value, write, flags)


def dump_file(value: Any, path: str | os.PathLike, flags: int = 0) -> None:
    """Write the JSON text for ``value`` to the file at ``path``."""
    with open(path, "w", encoding="utf-8") as output:
        dumpf(value, output, flags)