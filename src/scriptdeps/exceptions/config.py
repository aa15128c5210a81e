"""Configuration-related exceptions."""

from __future__ import annotations

from scriptdeps.exceptions.base import ScriptDepsError


class ConfigurationError(ScriptDepsError, ValueError):
    """Raised when configuration, SDK selection or restore output is unusable."""


class UnsupportedSdkError(ConfigurationError):
    """Raised when an ``sdk:`` directive names an SDK outside the allow-list."""


class NoRuntimeTargetError(ConfigurationError):
    """Raised when lock output lacks a runtime-qualified target section."""


class HostRuntimeError(ConfigurationError):
    """Raised when the host runtime version or shared framework cannot be resolved."""


class LockFileError(ConfigurationError):
    """Raised when lock output cannot be read or references missing assets."""
