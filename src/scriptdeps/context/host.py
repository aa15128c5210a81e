"""Host runtime discovery: shared frameworks, platform and runtime identifiers."""

from __future__ import annotations

import logging
import platform
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from scriptdeps.constants.config import (
    ARCHITECTURE_ALIASES,
    DEFAULT_TARGET_FRAMEWORK,
    DOTNET_EXECUTABLE,
    PLATFORM_IDENTIFIERS,
)
from scriptdeps.constants.runtime import CORE_FRAMEWORK_NAME, SHARED_FRAMEWORK_DIRNAME
from scriptdeps.exceptions import HostRuntimeError
from scriptdeps.utils.versions import PackageVersion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostEnvironment:
    """The runtime hosting script execution.

    ``runtime_dir`` is a shared framework version directory such as
    ``<dotnet>/shared/Microsoft.NETCore.App/8.0.4``.
    """

    runtime_dir: Path | None = None
    runtime_identifier: str = ""

    @property
    def runtime_version(self) -> str | None:
        if self.runtime_dir is None:
            return None
        return self.runtime_dir.name

    @property
    def shared_root(self) -> Path | None:
        """The ``shared`` directory holding every installed framework."""
        if self.runtime_dir is None:
            return None
        return self.runtime_dir.parent.parent

    def parsed_runtime_version(self) -> PackageVersion:
        """Return the host runtime version, raising when it cannot be parsed."""
        version = PackageVersion.try_parse(self.runtime_version)
        if version is None:
            raise HostRuntimeError(f"Unable to parse host runtime version from '{self.runtime_dir}'")
        return version

    @property
    def target_framework(self) -> str:
        return target_framework_for(self.runtime_version)


def detect_host_environment(
    runtime_dir: Path | None = None,
    runtime_identifier: str | None = None,
) -> HostEnvironment:
    """Build a host environment from explicit settings or the ``dotnet`` on PATH.

    Returns an environment without a runtime directory when no runtime is found.
    """
    rid = runtime_identifier or _machine_runtime_identifier()
    if runtime_dir is not None:
        return HostEnvironment(runtime_dir=runtime_dir.expanduser().resolve(), runtime_identifier=rid)

    executable = shutil.which(DOTNET_EXECUTABLE)
    if executable is None:
        logger.debug("No %s executable on PATH; host runtime unavailable", DOTNET_EXECUTABLE)
        return HostEnvironment(runtime_identifier=rid)

    framework_root = Path(executable).resolve().parent / SHARED_FRAMEWORK_DIRNAME / CORE_FRAMEWORK_NAME
    detected = highest_framework_dir(framework_root)
    if detected is None:
        logger.debug("No shared %s installation under %s", CORE_FRAMEWORK_NAME, framework_root)
        return HostEnvironment(runtime_identifier=rid)
    logger.debug("Detected host runtime at %s", detected)
    return HostEnvironment(runtime_dir=detected, runtime_identifier=rid)


def highest_framework_dir(framework_root: Path, major: int | None = None) -> Path | None:
    """Return the highest version directory under *framework_root*.

    When *major* is given only versions with that major are considered.
    """
    if not framework_root.is_dir():
        return None
    candidates: list[tuple[PackageVersion, Path]] = []
    for child in framework_root.iterdir():
        if not child.is_dir():
            continue
        version = PackageVersion.try_parse(child.name)
        if version is None:
            continue
        if major is not None and version.major != major:
            continue
        candidates.append((version, child))
    if not candidates:
        return None
    return max(candidates, key=lambda item: item[0].sort_key())[1]


def platform_identifier() -> str:
    """Return ``win``, ``osx`` or ``linux`` for the current platform."""
    if sys.platform.startswith("win"):
        return PLATFORM_IDENTIFIERS["windows"]
    if sys.platform == "darwin":
        return PLATFORM_IDENTIFIERS["darwin"]
    return PLATFORM_IDENTIFIERS["linux"]


def runtime_identifier() -> str:
    """Return the runtime identifier for this machine, e.g. ``linux-x64``."""
    return _machine_runtime_identifier()


def _machine_runtime_identifier() -> str:
    machine = platform.machine().lower()
    architecture = ARCHITECTURE_ALIASES.get(machine, machine or "x64")
    return f"{platform_identifier()}-{architecture}"


def target_framework_for(version: str | None, fallback: str = DEFAULT_TARGET_FRAMEWORK) -> str:
    """Map a runtime version to its target framework moniker."""
    parsed = PackageVersion.try_parse(version)
    if parsed is None:
        return fallback
    if parsed.major >= 5:
        return f"net{parsed.major}.{parsed.minor}"
    if parsed.major >= 3:
        return f"netcoreapp{parsed.major}.{parsed.minor}"
    return fallback
