"""Config data model for script dependency resolution."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path

from scriptdeps.constants.cache import CACHE_DIRNAME
from scriptdeps.constants.config import DEFAULT_RESTORE_COMMAND


@dataclass(frozen=True)
class ScriptDepsConfig:
    """Resolved resolver config.

    An empty ``target_framework`` means "derive it from the host runtime".
    """

    target_framework: str = ""
    package_sources: tuple[str, ...] = ()
    cache_root: Path | None = None
    restore_command: tuple[str, ...] = DEFAULT_RESTORE_COMMAND
    runtime_dir: Path | None = None
    runtime_identifier: str = ""
    no_cache: bool = False
    restore_timeout_seconds: int | None = None

    @property
    def effective_cache_root(self) -> Path:
        """Directory holding per-script project directories."""
        if self.cache_root is not None:
            return self.cache_root
        return Path(tempfile.gettempdir()) / CACHE_DIRNAME
