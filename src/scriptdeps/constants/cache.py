"""Constants used by the restore cache and atomic writes."""

from __future__ import annotations

CACHE_SUFFIX: str = ".cache"
TEMP_PREFIX: str = ".scriptdeps-"
TEMP_SUFFIX: str = ".tmp"
PROJECT_DIR_HASH_LENGTH: int = 8
CACHE_DIRNAME: str = "scriptdeps"
