"""Restorer protocol consumed by the cached restore orchestrator."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from scriptdeps.model import ProjectFileInfo


class Restorer(Protocol):
    """External package restorer.

    Implementations write lock output beside the project file and raise on
    failure; the orchestrator never reinterprets or retries the error.
    """

    def restore(self, project: ProjectFileInfo, package_sources: Sequence[str]) -> None: ...
