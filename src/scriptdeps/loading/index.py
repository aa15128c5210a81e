"""Immutable name-to-path index built once per dependency context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from scriptdeps.context.reader import runtime_dependency_map
from scriptdeps.utils.naming import binary_key, native_library_keys

if TYPE_CHECKING:
    from scriptdeps.model import DependencyContext


@dataclass(frozen=True)
class LoadIndex:
    """Read-only lookup tables for runtime and native binaries."""

    runtime: Mapping[str, Path] = field(default_factory=lambda: MappingProxyType({}))
    native: Mapping[str, Path] = field(default_factory=lambda: MappingProxyType({}))

    def runtime_path(self, name: str) -> Path | None:
        return self.runtime.get(binary_key(name))

    def native_path(self, name: str) -> Path | None:
        for key in native_library_keys(name):
            path = self.native.get(key)
            if path is not None:
                return path
        return None


def build_load_index(context: DependencyContext) -> LoadIndex:
    """Index *context* so each binary name maps to exactly one path.

    Runtime names resolve to the highest-versioned asset. Native names keep
    the first path seen, keyed both with and without the ``lib`` prefix.
    """
    runtime = {key: asset.path for key, asset in runtime_dependency_map(context).items()}
    native: dict[str, Path] = {}
    for dependency in context.dependencies:
        for path in dependency.native_paths:
            for key in native_library_keys(path.name):
                native.setdefault(key, path)
    return LoadIndex(runtime=MappingProxyType(runtime), native=MappingProxyType(native))
