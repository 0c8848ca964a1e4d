"""Error codes and the exception raised by encoding and decoding."""

from __future__ import annotations

import enum

__all__ = [
    "ErrorCode",
    "JsonError",
    "truncate_source",
    "TEXT_LENGTH",
    "SOURCE_LENGTH",
]

TEXT_LENGTH = 160
SOURCE_LENGTH = 80


class ErrorCode(enum.IntEnum):
    """Classification of an error."""

    UNKNOWN = 0
    OUT_OF_MEMORY = enum.auto()
    STACK_OVERFLOW = enum.auto()
    CANNOT_OPEN_FILE = enum.auto()
    INVALID_ARGUMENT = enum.auto()
    INVALID_UTF8 = enum.auto()
    PREMATURE_END_OF_INPUT = enum.auto()
    END_OF_INPUT_EXPECTED = enum.auto()
    INVALID_SYNTAX = enum.auto()
    INVALID_FORMAT = enum.auto()
    WRONG_TYPE = enum.auto()
    NULL_CHARACTER = enum.auto()
    NULL_VALUE = enum.auto()
    NULL_BYTE_IN_KEY = enum.auto()
    DUPLICATE_KEY = enum.auto()
    NUMERIC_OVERFLOW = enum.auto()
    ITEM_NOT_FOUND = enum.auto()
    INDEX_OUT_OF_RANGE = enum.auto()


def truncate_source(source: str) -> str:
    """Shorten a source description, keeping its tail behind a '...' prefix."""
    if len(source) < SOURCE_LENGTH:
        return source
    extra = len(source) - SOURCE_LENGTH + 4
    return "..." + source[extra:]


class JsonError(Exception):
    """Raised when a value cannot be loaded, dumped, packed or unpacked."""

    def __init__(
        self,
        text: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        source: str = "",
        line: int = -1,
        column: int = -1,
        position: int = 0,
    ) -> None:
        self.text = text[: TEXT_LENGTH - 2]
        self.code = ErrorCode(code)
        self.source = truncate_source(source)
        self.line = line
        self.column = column
        self.position = position
        super().__init__(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(text={self.text!r}, code={self.code.name}, "
            f"source={self.source!r}, line={self.line}, column={self.column}, "
            f"position={self.position})"
        )