"""Shared file I/O helpers."""

from .files import is_managed_binary, read_bytes_if_exists, read_text_if_exists, write_bytes_atomic, write_text_atomic

__all__ = [
    "is_managed_binary",
    "read_bytes_if_exists",
    "read_text_if_exists",
    "write_bytes_atomic",
    "write_text_atomic",
]
