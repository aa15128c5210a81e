"""Typed views of the restore lock output consumed by the context reader."""

from __future__ import annotations

from typing import NotRequired, TypedDict

from scriptdeps.types.common import JsonObject


class RuntimeTargetEntry(TypedDict):
    """A runtime-identifier-specific asset inside a target library entry."""

    assetType: str
    rid: str


class TargetLibrary(TypedDict):
    """Assets contributed by one package within one target section."""

    type: NotRequired[str]
    compile: NotRequired[dict[str, JsonObject]]
    runtime: NotRequired[dict[str, JsonObject]]
    native: NotRequired[dict[str, JsonObject]]
    contentFiles: NotRequired[dict[str, JsonObject]]
    runtimeTargets: NotRequired[dict[str, RuntimeTargetEntry]]


class LibraryEntry(TypedDict):
    """Package metadata from the ``libraries`` section."""

    type: NotRequired[str]
    path: NotRequired[str]
    files: NotRequired[list[str]]


class LockOutput(TypedDict):
    """Top-level lock output document."""

    version: NotRequired[int]
    targets: dict[str, dict[str, TargetLibrary]]
    libraries: dict[str, LibraryEntry]
    packageFolders: NotRequired[dict[str, JsonObject]]
    project: NotRequired[JsonObject]
