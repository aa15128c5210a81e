"""Tests for host runtime discovery helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from scriptdeps.constants.runtime import CORE_FRAMEWORK_NAME
from scriptdeps.context import host as host_module
from scriptdeps.context import (
    HostEnvironment,
    detect_host_environment,
    highest_framework_dir,
    platform_identifier,
    runtime_identifier,
    target_framework_for,
)

from .conftest import make_binary


@pytest.mark.parametrize(
    ("version", "expected"),
    [("8.0.4", "net8.0"), ("5.0.17", "net5.0"), ("3.1.32", "netcoreapp3.1"), ("2.2.0", "net8.0"), (None, "net8.0")],
    ids=["net8", "net5", "netcoreapp31", "too_old", "unknown"],
)
def test_target_framework_for(version: str | None, expected: str) -> None:
    assert target_framework_for(version) == expected


def test_target_framework_for_uses_fallback() -> None:
    assert target_framework_for("garbage", fallback="net6.0") == "net6.0"


@pytest.mark.parametrize(
    ("platform_name", "expected"),
    [("win32", "win"), ("darwin", "osx"), ("linux", "linux")],
    ids=["windows", "mac", "linux"],
)
def test_platform_identifier(monkeypatch: pytest.MonkeyPatch, platform_name: str, expected: str) -> None:
    monkeypatch.setattr(host_module.sys, "platform", platform_name)

    assert platform_identifier() == expected


def test_runtime_identifier_normalizes_architecture(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(host_module.sys, "platform", "linux")
    monkeypatch.setattr(host_module.platform, "machine", lambda: "x86_64")

    assert runtime_identifier() == "linux-x64"


def test_highest_framework_dir_filters_by_major(tmp_path: Path) -> None:
    for version in ("6.0.30", "8.0.2", "8.0.11", "not-a-version"):
        (tmp_path / version).mkdir()

    assert highest_framework_dir(tmp_path) == tmp_path / "8.0.11"
    assert highest_framework_dir(tmp_path, major=6) == tmp_path / "6.0.30"
    assert highest_framework_dir(tmp_path, major=7) is None
    assert highest_framework_dir(tmp_path / "missing") is None


def test_detect_uses_explicit_runtime_dir(tmp_path: Path) -> None:
    runtime_dir = tmp_path / "8.0.4"
    runtime_dir.mkdir()

    host = detect_host_environment(runtime_dir, "linux-arm64")

    assert host == HostEnvironment(runtime_dir=runtime_dir.resolve(), runtime_identifier="linux-arm64")
    assert host.target_framework == "net8.0"


def test_detect_locates_dotnet_on_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    install = tmp_path / "dotnet"
    executable = make_binary(install / "dotnet")
    make_binary(install / "shared" / CORE_FRAMEWORK_NAME / "7.0.1" / "System.Runtime.dll")
    make_binary(install / "shared" / CORE_FRAMEWORK_NAME / "8.0.4" / "System.Runtime.dll")
    monkeypatch.setattr(host_module.shutil, "which", lambda name: str(executable))

    host = detect_host_environment(runtime_identifier="linux-x64")

    assert host.runtime_dir == (install / "shared" / CORE_FRAMEWORK_NAME / "8.0.4").resolve()
    assert host.shared_root == (install / "shared").resolve()


def test_detect_without_dotnet_has_no_runtime(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(host_module.shutil, "which", lambda name: None)

    host = detect_host_environment(runtime_identifier="linux-x64")

    assert host.runtime_dir is None
    assert host.runtime_version is None
