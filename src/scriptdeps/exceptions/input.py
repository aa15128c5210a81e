"""Input-related exceptions: bad root paths and missing load targets."""

from __future__ import annotations

from scriptdeps.exceptions.base import ScriptDepsError


class InputError(ScriptDepsError, ValueError):
    """Raised when a script path or load target is malformed."""


class ScriptFileNotFoundError(InputError, FileNotFoundError):
    """Raised when a script file or ``#load`` target does not exist."""


class LoadTargetIsDirectoryError(InputError, IsADirectoryError):
    """Raised when a ``#load`` target resolves to a directory."""
