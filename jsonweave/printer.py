"""Human-readable tree description of a JSON value."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping
from typing import Any, TextIO

from .errors import ErrorCode, JsonError

__all__ = ["plural", "format_tree", "print_json"]


def plural(count: int) -> str:
    """Return the plural suffix for ``count`` items."""
    return "" if count == 1 else "s"


def _lines(value: Any, indent: int) -> Iterator[str]:
    pad = " " * indent
    if isinstance(value, Mapping):
        size = len(value)
        yield f"{pad}JSON Object of {size} pair{plural(size)}:"
        for key, item in value.items():
            yield f'{pad}  JSON Key: "{key}"'
            yield from _lines(item, indent + 2)
    elif isinstance(value, (list, tuple)):
        size = len(value)
        yield f"{pad}JSON Array of {size} element{plural(size)}:"
        for item in value:
            yield from _lines(item, indent + 2)
    elif isinstance(value, str):
        yield f'{pad}JSON String: "{value}"'
    elif value is True:
        yield f"{pad}JSON True"
    elif value is False:
        yield f"{pad}JSON False"
    elif value is None:
        yield f"{pad}JSON Null"
    elif isinstance(value, int):
        yield f'{pad}JSON Integer: "{value}"'
    elif isinstance(value, float):
        yield f"{pad}JSON Real: {value:f}"
    else:
        raise JsonError(
            f"unrecognized JSON type {type(value).__name__}", ErrorCode.WRONG_TYPE
        )


def format_tree(value: Any, indent: int = 0) -> str:
    """Describe ``value`` one element per line, nested by ``indent`` spaces."""
    return "".join(line + "\n" for line in _lines(value, indent))


def print_json(value: Any, stream: TextIO | None = None) -> None:
    """Write the tree description of ``value`` to ``stream`` (stdout by default)."""
    (stream if stream is not None else sys.stdout).write(format_tree(value))