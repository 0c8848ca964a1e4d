import pytest

from jsonweave.hashtable import HashTable
from jsonweave.lookup3 import hashsize


def test_set_and_get():
    table = HashTable()
    table["foo"] = 1
    table["bar"] = 2
    assert table["foo"] == 1
    assert table["bar"] == 2
    assert len(table) == 2


def test_missing_key_raises():
    table = HashTable()
    table["present"] = 1
    with pytest.raises(KeyError) as info:
        table["nope"]
    assert info.value.args == ("nope",)
    with pytest.raises(KeyError) as info:
        del table["nope"]
    assert info.value.args == ("nope",)
    assert len(table) == 1
    assert table["present"] == 1


def test_replace_keeps_size_and_position():
    table = HashTable()
    table["a"] = 1
    table["b"] = 2
    table["a"] = 3
    assert len(table) == 2
    assert list(table.items()) == [("a", 3), ("b", 2)]


def test_iteration_in_insertion_order():
    table = HashTable()
    keys = [f"key{i}" for i in range(50)]
    for i, key in enumerate(keys):
        table[key] = i
    assert list(table) == keys
    assert list(table.values()) == list(range(50))


def test_delete():
    table = HashTable()
    for key in "abcde":
        table[key] = key.upper()
    del table["c"]
    assert "c" not in table
    assert len(table) == 4
    assert list(table) == ["a", "b", "d", "e"]


def test_initial_bucket_count_and_growth():
    table = HashTable()
    assert table.bucket_count() == hashsize(3)
    for i in range(hashsize(3)):
        table[str(i)] = i
    assert table.bucket_count() == hashsize(3)
    table["extra"] = 0
    assert table.bucket_count() == hashsize(4)
    assert all(table[str(i)] == i for i in range(hashsize(3)))


def test_many_keys_survive_rehashing():
    table = HashTable()
    for i in range(1000):
        table[f"k{i}"] = i
    assert len(table) == 1000
    assert all(table[f"k{i}"] == i for i in range(1000))
    assert table.bucket_count() >= 1000


def test_clear_keeps_buckets():
    table = HashTable()
    for i in range(20):
        table[str(i)] = i
    buckets = table.bucket_count()
    table.clear()
    assert len(table) == 0
    assert list(table) == []
    assert table.bucket_count() == buckets
    table["x"] = 1
    assert list(table.items()) == [("x", 1)]


def test_items_from():
    table = HashTable()
    for i, key in enumerate("abcd"):
        table[key] = i
    assert list(table.items_from("b")) == [("b", 1), ("c", 2), ("d", 3)]
    with pytest.raises(KeyError):
        table.items_from("z")


def test_delete_current_during_iteration():
    table = HashTable()
    for key in "abcd":
        table[key] = key
    seen = []
    for key in table:
        seen.append(key)
        del table[key]
    assert seen == ["a", "b", "c", "d"]
    assert len(table) == 0


def test_add_during_iteration_is_reached():
    table = HashTable()
    table["a"] = 1
    seen = []
    for key in table:
        seen.append(key)
        if key == "a":
            table["b"] = 2
    assert seen == ["a", "b"]


def test_unicode_keys():
    table = HashTable()
    table["\u00e4\u00f6"] = 1
    table["\U0001f600"] = 2
    assert table["\u00e4\u00f6"] == 1
    assert table["\U0001f600"] == 2


def test_non_string_key_rejected():
    table = HashTable()
    with pytest.raises(TypeError):
        table[1] = "x"
    assert 1 not in table


def test_mapping_helpers():
    table = HashTable()
    table.update({"a": 1, "b": 2})
    assert table.get("a") == 1
    assert table.get("missing", 9) == 9
    assert table.pop("a") == 1
    assert dict(table) == {"b": 2}