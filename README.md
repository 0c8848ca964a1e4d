# jsonweave

A small JSON library for Python. It contains these modules:

- `jsonweave.dump` turns Python values into JSON text. Flags control indentation, compact separators, ASCII-only output, sorted keys, escaped slashes, real-number precision and embedding. It detects circular references and rejects them.
- `jsonweave.errors` provides `JsonError`, the exception the package raises, and the `ErrorCode` enum.
- `jsonweave.lookup3` provides the lookup3 `hashlittle` hash and the `hashsize` and `hashmask` helpers.
- `jsonweave.hashtable` provides `HashTable`, a string-keyed mapping that keeps insertion order. It hashes with `hashlittle` and grows its buckets as entries are added.
- `jsonweave.seed` holds the process-wide hash seed that `HashTable` uses.
- `jsonweave.printer` prints an indented outline of a value, one line per node.
- `jsonweave.version` provides `version_str()` and `version_cmp(major, minor, micro)`.

## Requirements

Python 3.10 or newer. There are no third-party dependencies.

## Encoding

```python
from jsonweave.dump import dumps, indent, real_precision, DumpFlags

dumps([1, 2, 3])                               # '[1, 2, 3]'
dumps([1, 2, 3], DumpFlags.COMPACT)            # '[1,2,3]'
dumps({"a": [1, 2]}, indent(2))
dumps({"b": 1, "a": 2}, DumpFlags.SORT_KEYS)   # '{"a": 2, "b": 1}'
dumps([0.1], real_precision(3))
dumps("text", DumpFlags.ENCODE_ANY)            # '"text"'
```

The encoder accepts these Python values:

- `None`, `True` and `False`
- `int` and `float`
- `str`
- `list` and `tuple`, which are written as arrays
- any `Mapping` with `str` keys, which is written as an object in iteration order

Flags are integers that you combine with `|`.

- `indent(n)` sets the indentation width, up to 31 spaces.
- `real_precision(n)` sets the number of significant digits for floats. The default is 17.
- `DumpFlags` holds the remaining switches:
  - `COMPACT` writes no spaces after `,` and `:`.
  - `ENSURE_ASCII` escapes every non-ASCII character as `\uXXXX`, using surrogate pairs where needed.
  - `SORT_KEYS` writes object keys in sorted order.
  - `ENCODE_ANY` allows a top-level value that is not an array or an object.
  - `ESCAPE_SLASH` writes `/` as `\/`.
  - `EMBED` leaves out the outermost brackets or braces.
  - `PRESERVE_ORDER` is accepted, but it changes nothing, because keys are always written in the mapping's own order.

Without `ENCODE_ANY`, the top-level value must be a list, a tuple or a mapping.

The following raise `JsonError`:

- a circular reference
- a non-finite float
- a lone surrogate in a string
- an unsupported type
- a non-string key

The module offers several ways to write the output:

- `dumps(value, flags)` returns a string.
- `dumpb(value, size, flags)` returns the UTF-8 bytes. It raises `JsonError` if they do not fit in `size` bytes.
- `dumpf(value, stream, flags)` writes to a text stream.
- `dumpfd(value, fd, flags)` writes UTF-8 to a file descriptor.
- `dump_file(value, path, flags)` writes UTF-8 to the file at `path`.
- `dump_callback(value, callback, flags)` passes each chunk of text to `callback`. If `callback` returns a true value, dumping stops with `JsonError`.

## Errors

```python
from jsonweave.errors import JsonError, ErrorCode, truncate_source

err = JsonError("unable to open file", ErrorCode.CANNOT_OPEN_FILE, "<string>", -1, -1, 0)
err.code, err.source, err.line, err.column, err.position
truncate_source("a" * 100)   # '...' followed by the last 76 characters
```

`JsonError` has these attributes: `text`, `code`, `source`, `line`, `column` and `position`. The constructor cuts `text` to 158 characters and shortens `source` with `truncate_source` when it is 80 characters or longer.

## Hash table

```python
from jsonweave.hashtable import HashTable

table = HashTable()
table["one"] = 1
table["two"] = 2
list(table)                   # ['one', 'two']: insertion order
list(table.items_from("two")) # [('two', 2)]
del table["one"]
len(table)                    # 1
table.bucket_count()          # 8 until the table grows
```

`HashTable` is a `MutableMapping` and accepts only `str` keys. Iteration remains valid when the entry it has just produced is deleted.

The hash seed is chosen once per process. Call `jsonweave.seed.object_seed(n)` before the first table is used to fix it to `n`, or let `current_seed()` pick a random non-zero seed. `generate_seed()` returns a fresh random seed and does not store it.

## Printing a value's structure

```python
import sys
from jsonweave.printer import print_json, format_tree

print_json([True, None, 1, "", {"name": "barney"}], sys.stdout)
```

This prints:

```
JSON Array of 5 elements:
  JSON True
  JSON Null
  JSON Integer: "1"
  JSON String: ""
  JSON Object of 1 pair:
    JSON Key: "name"
    JSON String: "barney"
```

`format_tree(value, indent)` returns the same text as a string. Floats are shown with six decimals, for example `JSON Real: 0.000000`.

## Version

`version_str()` returns `"2.13.1"`. `version_cmp(major, minor, micro)` compares that version with the one given. It returns a negative number when that version is older than the one given, zero when they are equal, and a positive number when it is newer.

## What this package does not do

There is no decoder: the package cannot parse JSON text into Python values. There is no pack or unpack format language either. Both `jsonweave.dump` and `jsonweave.printer` work on Python values that already exist, for example ones produced by the standard `json` module. The package has no command-line program.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.