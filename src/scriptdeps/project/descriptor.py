"""Project descriptor synthesis and deterministic serialization."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from pathlib import Path

from scriptdeps.constants.directives import DEFAULT_PROJECT_SDK
from scriptdeps.constants.runtime import FLOATING_VERSION_PLACEHOLDER, SDK_FRAMEWORK_REFERENCES
from scriptdeps.exceptions import ConfigurationError
from scriptdeps.model import PackageReference, ParsedDeclarations, ProjectDescriptor, ScriptGraph

logger = logging.getLogger(__name__)


def synthesize(
    target_framework: str,
    declarations: ParsedDeclarations | Iterable[ParsedDeclarations],
    *,
    files: Iterable[Path | str] = (),
) -> ProjectDescriptor:
    """Fold declarations into one descriptor for *target_framework*.

    References are deduplicated by ``(id, version)`` identity only; differing
    versions of one package are kept side by side and logged, never merged.
    """
    target_framework = target_framework.strip()
    if not target_framework:
        raise ConfigurationError("target_framework must be a non-empty string")

    parsed = (declarations,) if isinstance(declarations, ParsedDeclarations) else tuple(declarations)

    references: dict[tuple[str, str], PackageReference] = {}
    sdk = ""
    for item in parsed:
        for reference in item.package_references:
            references.setdefault(reference.key, reference)
        if item.sdk:
            sdk = item.sdk

    project_sdk = sdk or DEFAULT_PROJECT_SDK
    descriptor = ProjectDescriptor(
        target_framework=target_framework,
        sdk=project_sdk,
        package_references=tuple(sorted(references.values(), key=lambda ref: (ref.id.lower(), ref.version, ref.id))),
        framework_references=tuple(sorted(SDK_FRAMEWORK_REFERENCES.get(project_sdk, ()))),
        files=tuple(sorted({Path(item).as_posix() for item in files})),
    )
    for package_id, versions in descriptor.conflicts.items():
        logger.warning(
            "Package '%s' is referenced with conflicting versions: %s",
            package_id,
            ", ".join(version or "<latest>" for version in versions),
        )
    return descriptor


def synthesize_from_graph(target_framework: str, graph: ScriptGraph) -> ProjectDescriptor:
    """Build the descriptor for a resolved script graph."""
    return synthesize(target_framework, graph.declarations, files=graph.files)


def serialize_descriptor(descriptor: ProjectDescriptor) -> str:
    """Render *descriptor* as project-file XML.

    Output depends only on descriptor content, so structurally equal
    descriptors serialize to identical text.
    """
    project = ET.Element("Project", {"Sdk": descriptor.sdk})

    properties = ET.SubElement(project, "PropertyGroup")
    ET.SubElement(properties, "OutputType").text = "Exe"
    ET.SubElement(properties, "TargetFramework").text = descriptor.target_framework
    ET.SubElement(properties, "EnableDefaultItems").text = "false"

    if descriptor.package_references:
        packages = ET.SubElement(project, "ItemGroup")
        for reference in descriptor.package_references:
            ET.SubElement(
                packages,
                "PackageReference",
                {"Include": reference.id, "Version": reference.version or FLOATING_VERSION_PLACEHOLDER},
            )

    if descriptor.framework_references:
        frameworks = ET.SubElement(project, "ItemGroup")
        for name in descriptor.framework_references:
            ET.SubElement(frameworks, "FrameworkReference", {"Include": name})

    if descriptor.files:
        sources = ET.SubElement(project, "ItemGroup")
        for name in descriptor.files:
            ET.SubElement(sources, "None", {"Include": name})

    ET.indent(project, space="  ")
    return ET.tostring(project, encoding="unicode") + "\n"


def read_package_versions(serialized: str) -> tuple[PackageReference, ...]:
    """Recover package references from serialized project XML."""
    try:
        project = ET.fromstring(serialized)
    except ET.ParseError as exc:
        raise ConfigurationError(f"Project file is not valid XML: {exc}") from exc
    references: list[PackageReference] = []
    for element in project.iter("PackageReference"):
        version = element.get("Version", "")
        references.append(
            PackageReference(
                id=element.get("Include", ""),
                version="" if version == FLOATING_VERSION_PLACEHOLDER else version,
            )
        )
    return tuple(references)
