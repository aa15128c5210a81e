"""End-to-end resolution: descriptor on disk, cached restore, typed context."""

from __future__ import annotations

import hashlib
import logging
import tempfile
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from scriptdeps.constants.cache import CACHE_DIRNAME, PROJECT_DIR_HASH_LENGTH
from scriptdeps.constants.runtime import LOCK_FILE_DIRNAME, LOCK_FILE_NAME, PROJECT_FILE_NAME
from scriptdeps.context.host import HostEnvironment
from scriptdeps.context.reader import read_dependency_context
from scriptdeps.io import read_text_if_exists, write_text_atomic
from scriptdeps.model import DependencyContext, ProjectDescriptor, ProjectFileInfo
from scriptdeps.project.descriptor import serialize_descriptor
from scriptdeps.restore.base import Restorer
from scriptdeps.restore.cached import CachedRestorer
from scriptdeps.utils.naming import sanitize_dir_name

logger = logging.getLogger(__name__)


def resolve(
    descriptor: ProjectDescriptor,
    package_sources: Sequence[str] = (),
    *,
    project_dir: Path,
    restorer: Restorer,
    host: HostEnvironment | None = None,
    no_cache: bool = False,
) -> DependencyContext:
    """Restore *descriptor* in *project_dir* and return its dependency context.

    Restore warnings (for example a non-cacheable descriptor) are prepended
    to the context's own warnings.
    """
    project = write_project_file(descriptor, project_dir)
    outcome = CachedRestorer(restorer, no_cache=no_cache).restore(project, tuple(package_sources))
    context = read_dependency_context(lock_file_path(project_dir), host=host)
    if outcome.warnings:
        context = replace(context, warnings=outcome.warnings + context.warnings)
    return context


def write_project_file(descriptor: ProjectDescriptor, project_dir: Path) -> ProjectFileInfo:
    """Serialize *descriptor* into *project_dir*, rewriting only when content changed."""
    path = project_dir / PROJECT_FILE_NAME
    serialized = serialize_descriptor(descriptor)
    if read_text_if_exists(path) != serialized:
        logger.debug("Writing project file %s", path)
        write_text_atomic(path, serialized)
    return ProjectFileInfo(path=path, descriptor=descriptor)


def lock_file_path(project_dir: Path) -> Path:
    """Return where the restorer writes lock output for *project_dir*."""
    return project_dir / LOCK_FILE_DIRNAME / LOCK_FILE_NAME


def default_project_dir(
    script_root: Path,
    target_framework: str,
    cache_root: Path | None = None,
) -> Path:
    """Return a per-script project directory keyed by the script's absolute path."""
    resolved = script_root.expanduser().resolve()
    digest = hashlib.sha256(str(resolved).encode("utf-8")).hexdigest()[:PROJECT_DIR_HASH_LENGTH]
    base = cache_root if cache_root is not None else Path(tempfile.gettempdir()) / CACHE_DIRNAME
    name = sanitize_dir_name(resolved.stem if resolved.suffix else resolved.name)
    return base / f"{name}-{digest}" / sanitize_dir_name(target_framework, fallback="default")
