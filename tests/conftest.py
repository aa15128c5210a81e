"""Shared pytest fixtures for scripts, lock output and fake restorers."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from scriptdeps.constants.runtime import LOCK_FILE_DIRNAME, LOCK_FILE_NAME
from scriptdeps.model import ProjectFileInfo

TARGET = "net8.0"
RID = "linux-x64"
RUNTIME_TARGET = f"{TARGET}/{RID}"


class RecordingRestorer:
    """Fake restorer that records calls and writes canned lock output."""

    def __init__(self, payload: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls: list[tuple[Path, tuple[str, ...]]] = []

    def restore(self, project: ProjectFileInfo, package_sources: Sequence[str]) -> None:
        self.calls.append((project.path, tuple(package_sources)))
        if self.error is not None:
            raise self.error
        if self.payload is not None:
            lock_path = project.directory / LOCK_FILE_DIRNAME / LOCK_FILE_NAME
            lock_path.parent.mkdir(parents=True, exist_ok=True)
            lock_path.write_text(json.dumps(self.payload), encoding="utf-8")


@pytest.fixture()
def write_script(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing script files under ``tmp_path``."""

    def _write(name: str, text: str, root: Path | None = None) -> Path:
        path = (root or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def make_binary(path: Path, managed: bool = True) -> Path:
    """Write a tiny file that looks like a managed binary (or not)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"MZ\x90\x00" if managed else b"\x7fELF")
    return path


def package_entry(
    *,
    runtime: Sequence[str] = (),
    native: Sequence[str] = (),
    compile: Sequence[str] = (),
    content: Sequence[str] = (),
    runtime_targets: dict[str, dict[str, str]] | None = None,
    assembly_versions: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build a ``targets`` library entry."""
    versions = assembly_versions or {}
    entry: dict[str, Any] = {"type": "package"}
    if runtime:
        entry["runtime"] = {
            item: ({"assemblyVersion": versions[item]} if item in versions else {}) for item in runtime
        }
    if native:
        entry["native"] = {item: {} for item in native}
    if compile:
        entry["compile"] = {item: {} for item in compile}
    if content:
        entry["contentFiles"] = {item: {"buildAction": "Compile", "codeLanguage": "csx"} for item in content}
    if runtime_targets:
        entry["runtimeTargets"] = runtime_targets
    return entry


def lock_payload(
    packages: dict[str, dict[str, Any]],
    package_folder: Path,
    *,
    targets: Sequence[str] = (TARGET, RUNTIME_TARGET),
    framework_references: Sequence[str] = (),
) -> dict[str, Any]:
    """Build lock output with identical entries under every target section."""
    payload: dict[str, Any] = {
        "version": 3,
        "targets": {target: dict(packages) for target in targets},
        "libraries": {
            key: {"type": "package", "path": key.lower(), "files": []} for key in packages
        },
        "packageFolders": {f"{package_folder}/": {}},
    }
    if framework_references:
        payload["project"] = {
            "frameworks": {
                TARGET: {"frameworkReferences": {name: {"privateAssets": "all"} for name in framework_references}}
            }
        }
    return payload


def install_assets(package_folder: Path, key: str, assets: Sequence[str], managed: bool = True) -> None:
    """Create asset files for package *key* (``Id/Version``) under *package_folder*."""
    base = package_folder / key.lower()
    for asset in assets:
        make_binary(base / asset, managed=managed)


@pytest.fixture()
def package_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "packages"
    folder.mkdir()
    return folder
