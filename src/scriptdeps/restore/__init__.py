"""Cached restore orchestration and external restorer adapters."""

from __future__ import annotations

from .base import Restorer
from .cached import CachedRestorer, cache_path_for
from .command import CommandRestorer
from .resolver import default_project_dir, lock_file_path, resolve, write_project_file

__all__ = [
    "CachedRestorer",
    "CommandRestorer",
    "Restorer",
    "cache_path_for",
    "default_project_dir",
    "lock_file_path",
    "resolve",
    "write_project_file",
]
