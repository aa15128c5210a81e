"""Shared utility helpers."""

from __future__ import annotations

from .naming import binary_key, native_library_keys, sanitize_dir_name
from .versions import PackageVersion, is_pinned_version

__all__ = [
    "PackageVersion",
    "binary_key",
    "is_pinned_version",
    "native_library_keys",
    "sanitize_dir_name",
]
