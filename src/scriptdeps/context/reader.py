"""Read restore lock output into a typed ``DependencyContext``."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path, PurePosixPath
from typing import Any

from scriptdeps.constants.runtime import (
    ASSEMBLY_VERSION_PROPERTY,
    CORE_FRAMEWORK_NAME,
    MANAGED_BINARY_SUFFIX,
    MIN_SHARED_FRAMEWORK_MAJOR,
    NATIVE_ASSET_TYPE,
    PACKAGE_LIBRARY_TYPE,
    PLACEHOLDER_ASSET,
    RUNTIME_ASSET_TYPE,
    RUNTIME_TARGET_SEPARATOR,
    SCRIPT_CODE_LANGUAGE,
    SCRIPT_FILE_SUFFIX,
    WEB_FRAMEWORK_NAME,
)
from scriptdeps.context.host import HostEnvironment, highest_framework_dir
from scriptdeps.context.schema import validate_lock_output
from scriptdeps.exceptions import HostRuntimeError, LockFileError, NoRuntimeTargetError
from scriptdeps.io import is_managed_binary
from scriptdeps.model import Dependency, DependencyContext, RuntimeAsset
from scriptdeps.types import LockOutput, TargetLibrary
from scriptdeps.utils.naming import binary_key
from scriptdeps.utils.versions import PackageVersion

logger = logging.getLogger(__name__)


def read_dependency_context(lock_path: Path, *, host: HostEnvironment | None = None) -> DependencyContext:
    """Load lock output from *lock_path* and build its dependency context."""
    try:
        lock_text = lock_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LockFileError(f"Unable to read lock file {lock_path}: {exc}") from exc
    try:
        payload = json.loads(lock_text)
    except json.JSONDecodeError as exc:
        raise LockFileError(f"Unable to read lock file {lock_path}: invalid JSON ({exc})") from exc
    return parse_lock_output(payload, host=host, lock_text=lock_text, source=str(lock_path))


def parse_lock_output(
    payload: Any,
    *,
    host: HostEnvironment | None = None,
    lock_text: str | None = None,
    source: str = "<lock output>",
) -> DependencyContext:
    """Interpret an already-decoded lock document.

    Only package libraries of the runtime-qualified target contribute;
    placeholder assets are skipped and packages without assets are dropped.
    When *host* carries a runtime directory, its shared frameworks are
    appended as dependencies.
    """
    validate_lock_output(payload, source)
    lock: LockOutput = payload

    targets = lock["targets"]
    if len(targets) < 2:
        raise NoRuntimeTargetError(
            f"The lock file {source} does not contain a runtime target. "
            "Restore with a runtime identifier so runtime-specific assets are resolved."
        )
    target_name = _runtime_target_name(targets)
    rid = target_name.partition(RUNTIME_TARGET_SEPARATOR)[2]
    logger.debug("Using lock target '%s' from %s", target_name, source)

    package_folders = tuple(Path(folder) for folder in lock.get("packageFolders", {}))
    libraries = lock["libraries"]

    dependencies: list[Dependency] = []
    for key, entry in targets[target_name].items():
        if entry.get("type", PACKAGE_LIBRARY_TYPE) != PACKAGE_LIBRARY_TYPE:
            continue
        library = libraries.get(key, {})
        if library.get("type", PACKAGE_LIBRARY_TYPE) != PACKAGE_LIBRARY_TYPE:
            continue
        name, _, version = key.partition("/")
        relative = library.get("path") or f"{name.lower()}/{version.lower()}"
        dependency = _package_dependency(name, version, entry, relative, package_folders, rid, source)
        if dependency.has_assets:
            dependencies.append(dependency)
        else:
            logger.debug("Package %s/%s contributes no assets", name, version)

    host_runtime_version: str | None = None
    if host is not None and host.runtime_dir is not None:
        host_runtime_version = str(host.parsed_runtime_version())
        dependencies.extend(_host_dependencies(host, lock, lock_text))

    return DependencyContext(
        dependencies=tuple(dependencies),
        target=target_name,
        package_folders=package_folders,
        host_runtime_version=host_runtime_version,
    )


def runtime_dependency_map(context: DependencyContext) -> dict[str, RuntimeAsset]:
    """Map each runtime binary name to its highest-versioned asset.

    Keys are case-folded binary names. Among equal versions the first asset
    encountered wins; unparsable versions lose to any parsable one.
    """
    chosen: dict[str, tuple[PackageVersion | None, RuntimeAsset]] = {}
    for dependency in context.dependencies:
        for asset in dependency.runtime_assets:
            key = binary_key(asset.name)
            version = PackageVersion.try_parse(asset.version)
            current = chosen.get(key)
            if current is None or _is_higher(version, current[0]):
                if current is not None:
                    logger.debug(
                        "Binary %s: preferring %s (%s) over %s (%s)",
                        asset.name,
                        asset.path,
                        asset.version,
                        current[1].path,
                        current[1].version,
                    )
                chosen[key] = (version, asset)
    return {key: asset for key, (_, asset) in chosen.items()}


def _is_higher(candidate: PackageVersion | None, current: PackageVersion | None) -> bool:
    if candidate is None:
        return False
    if current is None:
        return True
    return candidate > current


def _runtime_target_name(targets: Mapping[str, Any]) -> str:
    for name in targets:
        if RUNTIME_TARGET_SEPARATOR in name:
            return name
    return list(targets)[-1]


def _package_dependency(
    name: str,
    version: str,
    entry: TargetLibrary,
    relative: str,
    package_folders: tuple[Path, ...],
    rid: str,
    source: str,
) -> Dependency:
    runtime_targets = entry.get("runtimeTargets", {})
    runtime_entries = [*_assets(entry.get("runtime")), *_rid_assets(runtime_targets, RUNTIME_ASSET_TYPE, rid)]
    native_entries = [*_assets(entry.get("native")), *_rid_assets(runtime_targets, NATIVE_ASSET_TYPE, rid)]
    compile_entries = _assets(entry.get("compile"))
    script_entries = [
        (path, properties)
        for path, properties in _assets(entry.get("contentFiles"))
        if str(properties.get("codeLanguage", "")).lower() == SCRIPT_CODE_LANGUAGE
        or path.lower().endswith(SCRIPT_FILE_SUFFIX)
    ]
    if not (runtime_entries or native_entries or compile_entries or script_entries):
        return Dependency(name=name, version=version)

    install_dir = _install_dir(relative, package_folders, source)

    def locate(asset: str) -> Path:
        path = install_dir.joinpath(*PurePosixPath(asset).parts)
        if not path.exists():
            raise LockFileError(f"Unable to locate asset path '{path}' for package {name}/{version}")
        return path

    return Dependency(
        name=name,
        version=version,
        runtime_assets=tuple(
            RuntimeAsset(path=locate(path), version=str(properties.get(ASSEMBLY_VERSION_PROPERTY) or version))
            for path, properties in runtime_entries
        ),
        native_paths=tuple(locate(path) for path, _ in native_entries),
        compile_paths=tuple(locate(path) for path, _ in compile_entries),
        script_paths=tuple(locate(path) for path, _ in script_entries),
    )


def _assets(section: Mapping[str, Any] | None) -> list[tuple[str, Mapping[str, Any]]]:
    if not section:
        return []
    return [
        (path, properties or {})
        for path, properties in section.items()
        if PurePosixPath(path).name != PLACEHOLDER_ASSET
    ]


def _rid_assets(
    runtime_targets: Mapping[str, Any],
    asset_type: str,
    rid: str,
) -> list[tuple[str, Mapping[str, Any]]]:
    if not rid:
        return []
    return [
        (path, properties)
        for path, properties in _assets(runtime_targets)
        if properties.get("assetType") == asset_type and properties.get("rid") == rid
    ]


def _install_dir(relative: str, package_folders: tuple[Path, ...], source: str) -> Path:
    if not package_folders:
        raise LockFileError(f"Unable to read lock file {source}: no package folders are declared")
    parts = PurePosixPath(relative).parts
    for folder in package_folders:
        candidate = folder.joinpath(*parts)
        if candidate.exists():
            return candidate
    return package_folders[0].joinpath(*parts)


def _host_dependencies(host: HostEnvironment, lock: LockOutput, lock_text: str | None) -> list[Dependency]:
    version = host.parsed_runtime_version()
    assert host.runtime_dir is not None
    if not host.runtime_dir.is_dir():
        raise HostRuntimeError(f"Host runtime directory does not exist: {host.runtime_dir}")
    dependencies: list[Dependency] = []
    if version.major >= MIN_SHARED_FRAMEWORK_MAJOR:
        dependencies.append(_framework_dependency(CORE_FRAMEWORK_NAME, str(version), host.runtime_dir))

    if _references_framework(lock, lock_text, WEB_FRAMEWORK_NAME):
        shared_root = host.shared_root
        framework_root = shared_root / WEB_FRAMEWORK_NAME if shared_root is not None else None
        web_dir = highest_framework_dir(framework_root, major=version.major) if framework_root else None
        if web_dir is None:
            raise HostRuntimeError(
                f"Failed to resolve the path to '{WEB_FRAMEWORK_NAME}' for runtime {version} under {framework_root}"
            )
        dependencies.append(_framework_dependency(WEB_FRAMEWORK_NAME, web_dir.name, web_dir))
    return dependencies


def _references_framework(lock: LockOutput, lock_text: str | None, framework: str) -> bool:
    frameworks = lock.get("project", {}).get("frameworks")
    if isinstance(frameworks, Mapping):
        for settings in frameworks.values():
            references = settings.get("frameworkReferences", {}) if isinstance(settings, Mapping) else {}
            if any(str(name).lower() == framework.lower() for name in references):
                return True
        return False
    return lock_text is not None and framework in lock_text


def _framework_dependency(name: str, version: str, directory: Path) -> Dependency:
    binaries = _managed_binaries(sorted(directory.glob(f"*{MANAGED_BINARY_SUFFIX}")))
    logger.debug("Shared framework %s %s contributes %d binaries", name, version, len(binaries))
    return Dependency(
        name=name,
        version=version,
        runtime_assets=tuple(RuntimeAsset(path=path, version=version) for path in binaries),
    )


def _managed_binaries(paths: Iterable[Path]) -> list[Path]:
    return [path for path in paths if is_managed_binary(path)]
