"""Atomic text persistence helpers."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path

from scriptdeps.constants.cache import TEMP_PREFIX, TEMP_SUFFIX
from scriptdeps.constants.runtime import PE_HEADER_MAGIC


def write_text_atomic(
    path: Path,
    text: str,
    *,
    temp_prefix: str = TEMP_PREFIX,
    temp_suffix: str = TEMP_SUFFIX,
) -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    _write_atomic(path, text, mode="w", temp_prefix=temp_prefix, temp_suffix=temp_suffix)


def write_bytes_atomic(
    path: Path,
    data: bytes,
    *,
    temp_prefix: str = TEMP_PREFIX,
    temp_suffix: str = TEMP_SUFFIX,
) -> None:
    """Persist raw bytes atomically, preserving line endings exactly."""
    _write_atomic(path, data, mode="wb", temp_prefix=temp_prefix, temp_suffix=temp_suffix)


def _write_atomic(path: Path, content: str | bytes, *, mode: str, temp_prefix: str, temp_suffix: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    text_options = {"encoding": "utf-8", "newline": ""} if mode == "w" else {}

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode=mode,
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
            **text_options,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)


def read_text_if_exists(path: Path) -> str | None:
    """Return the UTF-8 text of *path*, or ``None`` when it does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def read_bytes_if_exists(path: Path) -> bytes | None:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None


def is_managed_binary(path: Path) -> bool:
    """Return True when *path* is a readable file starting with a PE header."""
    try:
        with path.open("rb") as handle:
            return handle.read(len(PE_HEADER_MAGIC)) == PE_HEADER_MAGIC
    except OSError:
        return False
