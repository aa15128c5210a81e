"""Core data models for scriptdeps."""

from .entities import (
    Dependency,
    DependencyContext,
    PackageReference,
    ParsedDeclarations,
    PreparedScript,
    ProjectDescriptor,
    ProjectFileInfo,
    RestoreOutcome,
    RuntimeAsset,
    ScriptGraph,
)

__all__ = [
    "Dependency",
    "DependencyContext",
    "PackageReference",
    "ParsedDeclarations",
    "PreparedScript",
    "ProjectDescriptor",
    "ProjectFileInfo",
    "RestoreOutcome",
    "RuntimeAsset",
    "ScriptGraph",
]
