"""Cached restore orchestration keyed on the serialized project descriptor."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextlib import suppress
from pathlib import Path

from scriptdeps.constants.cache import CACHE_SUFFIX
from scriptdeps.io import read_bytes_if_exists, write_bytes_atomic
from scriptdeps.model import PackageReference, ProjectFileInfo, RestoreOutcome
from scriptdeps.project.descriptor import read_package_versions
from scriptdeps.restore.base import Restorer

logger = logging.getLogger(__name__)


def cache_path_for(project_path: Path) -> Path:
    """Return the cache entry path stored beside *project_path*."""
    return project_path.with_name(project_path.name + CACHE_SUFFIX)


class CachedRestorer:
    """Skip the external restore while the descriptor is byte-identical to the last cached one.

    A cache entry is written only after a successful restore of a descriptor
    whose package versions are all pinned; floating versions would silently
    freeze a stale resolution.
    """

    def __init__(self, restorer: Restorer, *, no_cache: bool = False) -> None:
        self._restorer = restorer
        self._no_cache = no_cache

    def restore(self, project: ProjectFileInfo, package_sources: Sequence[str] = ()) -> RestoreOutcome:
        """Restore *project* unless its cache entry still matches."""
        cache_path = cache_path_for(project.path)
        project_bytes = project.path.read_bytes()

        if self._no_cache:
            logger.debug("Restore cache disabled for %s", project.path)
            self._restorer.restore(project, tuple(package_sources))
            return RestoreOutcome(cache_hit=False, cached=False)

        cached_bytes = read_bytes_if_exists(cache_path)
        if cached_bytes is not None:
            if cached_bytes == project_bytes:
                logger.debug("Using cached restore for %s", project.path)
                return RestoreOutcome(cache_hit=True, cached=True)
            logger.debug("Cache miss for %s, removing stale entry %s", project.path, cache_path)
            with suppress(FileNotFoundError):
                cache_path.unlink()

        self._restorer.restore(project, tuple(package_sources))

        floating = _floating_references(project, project_bytes)
        if floating:
            warning = (
                f"Unable to cache restore for {project.path}: floating package versions "
                f"({', '.join(str(reference) for reference in floating)}) are not reproducible."
            )
            logger.warning(warning)
            return RestoreOutcome(cache_hit=False, cached=False, warnings=(warning,))

        write_bytes_atomic(cache_path, project_bytes)
        logger.debug("Cached restore for %s at %s", project.path, cache_path)
        return RestoreOutcome(cache_hit=False, cached=True)


def _floating_references(project: ProjectFileInfo, project_bytes: bytes) -> tuple[PackageReference, ...]:
    if project.descriptor is not None:
        return project.descriptor.floating_references
    references = read_package_versions(project_bytes.decode("utf-8"))
    return tuple(reference for reference in references if not reference.is_pinned)
