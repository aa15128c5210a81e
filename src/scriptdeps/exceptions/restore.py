"""Restore-related exceptions."""

from __future__ import annotations

from scriptdeps.exceptions.base import ScriptDepsError


class RestoreError(ScriptDepsError, RuntimeError):
    """Raised by the command-line restorer when the restore command fails."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
