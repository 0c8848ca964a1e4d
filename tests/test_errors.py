import pytest

from jsonweave.errors import (
    SOURCE_LENGTH,
    TEXT_LENGTH,
    ErrorCode,
    JsonError,
    truncate_source,
)

LONG_NAME = "a" * 90


def test_short_source_unchanged():
    assert truncate_source("<string>") == "<string>"


def test_long_source_gets_ellipsis():
    result = truncate_source(LONG_NAME)
    assert result.startswith("...aaa")


def test_long_source_fits_buffer():
    result = truncate_source(LONG_NAME)
    assert len(result) < SOURCE_LENGTH


def test_long_source_keeps_tail():
    source = "/very/long/" + "x" * 100 + "/file.json"
    result = truncate_source(source)
    assert source.endswith(result[3:])


def test_source_exactly_at_limit_is_truncated():
    source = "b" * SOURCE_LENGTH
    result = truncate_source(source)
    assert result.startswith("...")
    assert len(result) < SOURCE_LENGTH


def test_source_just_below_limit_unchanged():
    source = "c" * (SOURCE_LENGTH - 1)
    assert truncate_source(source) == source


def test_error_fields():
    err = JsonError(
        "duplicate object key near '\"foo\"'",
        ErrorCode.DUPLICATE_KEY,
        "<string>",
        1,
        16,
        16,
    )
    assert err.text == "duplicate object key near '\"foo\"'"
    assert err.code is ErrorCode.DUPLICATE_KEY
    assert err.source == "<string>"
    assert (err.line, err.column, err.position) == (1, 16, 16)


def test_error_defaults():
    err = JsonError("NULL or empty format string")
    assert err.code is ErrorCode.UNKNOWN
    assert (err.line, err.column, err.position) == (-1, -1, 0)
    assert err.source == ""


def test_error_is_exception_and_str_is_text():
    err = JsonError("real number overflow", ErrorCode.NUMERIC_OVERFLOW)
    assert isinstance(err, Exception)
    assert str(err) == "real number overflow"
    assert err.code is ErrorCode.NUMERIC_OVERFLOW


def test_error_source_is_truncated():
    err = JsonError("unable to open", ErrorCode.CANNOT_OPEN_FILE, LONG_NAME)
    assert err.source.startswith("...aaa")
    assert err.code is ErrorCode.CANNOT_OPEN_FILE


def test_long_text_is_shortened():
    text = "z" * 500
    err = JsonError(text, ErrorCode.INVALID_SYNTAX)
    assert len(err.text) < TEXT_LENGTH
    assert text.startswith(err.text)


def test_integer_code_is_converted():
    err = JsonError("x", int(ErrorCode.END_OF_INPUT_EXPECTED))
    assert err.code is ErrorCode.END_OF_INPUT_EXPECTED


def test_unknown_integer_code_rejected():
    with pytest.raises(ValueError):
        JsonError("x", 999)


def test_every_code_round_trips_through_error():
    codes = list(ErrorCode)
    values = [code.value for code in codes]
    assert values == sorted(set(values))
    assert codes[0] is ErrorCode.UNKNOWN
    assert codes[-1] is ErrorCode.INDEX_OUT_OF_RANGE
    for code in codes:
        assert JsonError("x", code.value).code is code