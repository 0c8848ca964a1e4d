"""Library version information and runtime version comparison."""

from __future__ import annotations

__all__ = [
    "MAJOR_VERSION",
    "MINOR_VERSION",
    "MICRO_VERSION",
    "VERSION",
    "VERSION_HEX",
    "version_str",
    "version_cmp",
]

MAJOR_VERSION = 2
MINOR_VERSION = 13
MICRO_VERSION = 1

VERSION = "2.13.1"

VERSION_HEX = (MAJOR_VERSION << 16) | (MINOR_VERSION << 8) | MICRO_VERSION


def version_str() -> str:
    """Return the library version as a string."""
    return VERSION


def version_cmp(major: int, minor: int, micro: int) -> int:
    """Compare the library version with ``major.minor.micro``.

    The result is negative when the library is older than the given
    version, zero when they are equal and positive when it is newer.
    """
    if major != MAJOR_VERSION:
        return MAJOR_VERSION - major
    if minor != MINOR_VERSION:
        return MINOR_VERSION - minor
    return MICRO_VERSION - micro