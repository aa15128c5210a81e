"""Core data models for scriptdeps."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from scriptdeps.constants.directives import DEFAULT_PROJECT_SDK
from scriptdeps.utils.versions import is_pinned_version

if TYPE_CHECKING:
    from scriptdeps.loading.context import ScriptLoadContext
    from scriptdeps.loading.index import LoadIndex


@dataclass(frozen=True)
class PackageReference:
    """A ``package:`` reference; an empty version means "latest"."""

    id: str
    version: str = ""

    @property
    def key(self) -> tuple[str, str]:
        """Identity used for deduplication (package ids are case-insensitive)."""
        return (self.id.lower(), self.version)

    @property
    def is_pinned(self) -> bool:
        return is_pinned_version(self.version)

    def __str__(self) -> str:
        if not self.version:
            return self.id
        return f"{self.id}, {self.version}"


@dataclass(frozen=True)
class ParsedDeclarations:
    """Directives extracted from one source unit (or merged across several)."""

    package_references: tuple[PackageReference, ...] = ()
    sdk: str = ""
    loads: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.package_references and not self.sdk and not self.loads


@dataclass(frozen=True)
class ScriptGraph:
    """Closure of a root script over its ``#load`` directives."""

    root: Path
    files: tuple[Path, ...]
    declarations: ParsedDeclarations
    remote_loads: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectDescriptor:
    """Deduplicated statement of everything a script closure needs to restore."""

    target_framework: str
    sdk: str = DEFAULT_PROJECT_SDK
    package_references: tuple[PackageReference, ...] = ()
    framework_references: tuple[str, ...] = ()
    files: tuple[str, ...] = ()

    @property
    def floating_references(self) -> tuple[PackageReference, ...]:
        """References whose version does not name exactly one release."""
        return tuple(reference for reference in self.package_references if not reference.is_pinned)

    @property
    def is_cacheable(self) -> bool:
        """A restore is reproducible only when every reference is pinned."""
        return not self.floating_references

    @property
    def conflicts(self) -> dict[str, tuple[str, ...]]:
        """Package ids referenced with more than one distinct version."""
        versions: dict[str, list[str]] = {}
        for reference in self.package_references:
            versions.setdefault(reference.id.lower(), []).append(reference.version)
        return {name: tuple(found) for name, found in sorted(versions.items()) if len(found) > 1}


@dataclass(frozen=True)
class ProjectFileInfo:
    """Location of a serialized descriptor and its restore working directory."""

    path: Path
    descriptor: ProjectDescriptor | None = None

    @property
    def directory(self) -> Path:
        return self.path.parent


@dataclass(frozen=True)
class RestoreOutcome:
    """Result of one cached restore request."""

    cache_hit: bool
    cached: bool
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class RuntimeAsset:
    """A runtime binary together with the version used for conflict resolution."""

    path: Path
    version: str

    @property
    def name(self) -> str:
        return self.path.stem


@dataclass(frozen=True)
class Dependency:
    """A resolved package (or host framework) and the assets it contributes."""

    name: str
    version: str
    runtime_assets: tuple[RuntimeAsset, ...] = ()
    native_paths: tuple[Path, ...] = ()
    compile_paths: tuple[Path, ...] = ()
    script_paths: tuple[Path, ...] = ()

    @property
    def runtime_paths(self) -> tuple[Path, ...]:
        return tuple(asset.path for asset in self.runtime_assets)

    @property
    def has_assets(self) -> bool:
        return bool(self.runtime_assets or self.native_paths or self.compile_paths or self.script_paths)


@dataclass(frozen=True)
class DependencyContext:
    """Typed, read-only view of restore lock output.

    Safe to share across threads; ``load_index`` is built once at construction
    and never mutated afterwards.
    """

    dependencies: tuple[Dependency, ...] = ()
    target: str = ""
    package_folders: tuple[Path, ...] = ()
    host_runtime_version: str | None = None
    warnings: tuple[str, ...] = field(default=(), compare=False)

    load_index: LoadIndex = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        from scriptdeps.loading.index import build_load_index

        object.__setattr__(self, "load_index", build_load_index(self))

    @property
    def compile_paths(self) -> tuple[Path, ...]:
        return tuple(path for dependency in self.dependencies for path in dependency.compile_paths)

    @property
    def script_paths(self) -> tuple[Path, ...]:
        return tuple(path for dependency in self.dependencies for path in dependency.script_paths)

    def get(self, name: str) -> Dependency | None:
        """Return the dependency named *name* (case-insensitive), if any."""
        wanted = name.lower()
        for dependency in self.dependencies:
            if dependency.name.lower() == wanted:
                return dependency
        return None


@dataclass(frozen=True)
class PreparedScript:
    """Everything a compiler or executor needs to run one script."""

    graph: ScriptGraph
    descriptor: ProjectDescriptor
    context: DependencyContext
    load_context: ScriptLoadContext
    project_dir: Path
    warnings: tuple[str, ...] = ()

    @property
    def compile_paths(self) -> tuple[Path, ...]:
        return self.context.compile_paths
