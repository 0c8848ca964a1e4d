"""JSON encoding, error reporting, lookup3 hashing and an ordered hash table."""

__version__ = "0.1.0"

__all__ = ["dump", "errors", "hashtable", "lookup3", "printer", "seed", "version"]