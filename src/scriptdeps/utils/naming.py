"""String normalization helpers for binary names and project directories."""

from __future__ import annotations

import re

from scriptdeps.constants.runtime import NATIVE_LIBRARY_PREFIX, NATIVE_LIBRARY_SUFFIXES

_NON_DIR_NAME_PATTERN: re.Pattern[str] = re.compile(r"[^a-z0-9._-]+")
_COLLAPSE_DASH_PATTERN: re.Pattern[str] = re.compile(r"-{2,}")


def binary_key(name: str) -> str:
    """Normalize a binary simple name for case-insensitive lookup."""
    return name.strip().casefold()


def native_library_keys(name: str) -> tuple[str, ...]:
    """Return lookup keys for a native library name or file name.

    ``libe_sqlite3.so``, ``e_sqlite3`` and ``e_sqlite3.dll`` all share the key
    ``e_sqlite3``.
    """
    key = binary_key(name)
    for suffix in NATIVE_LIBRARY_SUFFIXES:
        if key.endswith(suffix):
            key = key[: -len(suffix)]
            break
    keys = [key]
    if key.startswith(NATIVE_LIBRARY_PREFIX) and len(key) > len(NATIVE_LIBRARY_PREFIX):
        keys.append(key[len(NATIVE_LIBRARY_PREFIX) :])
    return tuple(keys)


def sanitize_dir_name(raw_name: str, fallback: str = "script") -> str:
    """Normalize a name for use as a single directory component."""
    normalized = raw_name.strip().lower()
    normalized = _NON_DIR_NAME_PATTERN.sub("-", normalized)
    normalized = _COLLAPSE_DASH_PATTERN.sub("-", normalized)
    normalized = normalized.strip("-._")
    return normalized or fallback
