"""Shared exception hierarchy for scriptdeps."""

from __future__ import annotations

from .base import ScriptDepsError
from .config import (
    ConfigurationError,
    HostRuntimeError,
    LockFileError,
    NoRuntimeTargetError,
    UnsupportedSdkError,
)
from .input import InputError, LoadTargetIsDirectoryError, ScriptFileNotFoundError
from .restore import RestoreError

__all__ = [
    "ConfigurationError",
    "HostRuntimeError",
    "InputError",
    "LoadTargetIsDirectoryError",
    "LockFileError",
    "NoRuntimeTargetError",
    "RestoreError",
    "ScriptDepsError",
    "ScriptFileNotFoundError",
    "UnsupportedSdkError",
]
