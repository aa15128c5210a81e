"""Script preparation pipeline."""

from __future__ import annotations

from typing import Any

__all__ = ["prepare_code", "prepare_script"]


def __getattr__(name: str) -> Any:
    """Lazily expose pipeline APIs to avoid import cycles at package import time."""
    if name == "prepare_script":
        from .orchestrator import prepare_script

        return prepare_script
    if name == "prepare_code":
        from .orchestrator import prepare_code

        return prepare_code
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
