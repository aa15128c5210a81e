"""Shared typing helpers."""

from __future__ import annotations

from .common import JsonObject, JsonScalar, JsonValue
from .lock import LibraryEntry, LockOutput, RuntimeTargetEntry, TargetLibrary

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "LibraryEntry",
    "LockOutput",
    "RuntimeTargetEntry",
    "TargetLibrary",
]
