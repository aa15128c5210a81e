"""Command-line restorer adapter (``dotnet restore`` by default)."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from scriptdeps.constants.config import DEFAULT_RESTORE_COMMAND
from scriptdeps.exceptions import RestoreError
from scriptdeps.model import ProjectFileInfo

logger = logging.getLogger(__name__)


class CommandRestorer:
    """Run an external restore command against a project file."""

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_RESTORE_COMMAND,
        *,
        runtime_identifier: str | None = None,
        timeout: float | None = None,
    ) -> None:
        if not command:
            raise ValueError("restore command must not be empty")
        self._command = tuple(command)
        self._runtime_identifier = runtime_identifier
        self._timeout = timeout

    def build_arguments(self, project: ProjectFileInfo, package_sources: Sequence[str]) -> list[str]:
        """Return the argv used to restore *project*."""
        arguments = [*self._command, str(project.path)]
        if self._runtime_identifier:
            arguments.extend(["-r", self._runtime_identifier])
        for source in package_sources:
            arguments.extend(["-s", source])
        return arguments

    def restore(self, project: ProjectFileInfo, package_sources: Sequence[str]) -> None:
        arguments = self.build_arguments(project, package_sources)
        logger.debug("Executing restore command: %s", " ".join(arguments))
        try:
            completed = subprocess.run(
                arguments,
                cwd=project.directory,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise RestoreError(f"Restore command not found: {self._command[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise RestoreError(f"Restore of {project.path} timed out after {self._timeout}s") from exc

        if completed.stdout:
            logger.debug("%s", completed.stdout.rstrip())
        if completed.returncode != 0:
            raise RestoreError(
                f"Restore of {project.path} failed with exit code {completed.returncode}",
                returncode=completed.returncode,
                stderr=completed.stderr or completed.stdout or "",
            )
