"""Tests for descriptor synthesis and serialization."""

from __future__ import annotations

import logging

import pytest

from scriptdeps.constants.directives import DEFAULT_PROJECT_SDK, WEB_SDK
from scriptdeps.constants.runtime import WEB_FRAMEWORK_NAME
from scriptdeps.exceptions import ConfigurationError
from scriptdeps.model import PackageReference, ParsedDeclarations
from scriptdeps.project import read_package_versions, serialize_descriptor, synthesize


def _declarations(*references: PackageReference, sdk: str = "") -> ParsedDeclarations:
    return ParsedDeclarations(package_references=references, sdk=sdk)


def test_synthesize_twice_serializes_identically() -> None:
    declarations = _declarations(PackageReference("Zeta", "1.0.0"), PackageReference("alpha", "2.0.0"))

    first = serialize_descriptor(synthesize("net8.0", declarations, files=["b.csx", "a.csx"]))
    second = serialize_descriptor(synthesize("net8.0", declarations, files=["a.csx", "b.csx"]))

    assert first == second


def test_references_are_sorted_and_deduplicated() -> None:
    descriptor = synthesize(
        "net8.0",
        [
            _declarations(PackageReference("Zeta", "1.0.0")),
            _declarations(PackageReference("Alpha", "1.0.0"), PackageReference("Zeta", "1.0.0")),
        ],
    )

    assert descriptor.package_references == (PackageReference("Alpha", "1.0.0"), PackageReference("Zeta", "1.0.0"))


def test_default_sdk_has_no_framework_references() -> None:
    descriptor = synthesize("net8.0", _declarations())

    assert descriptor.sdk == DEFAULT_PROJECT_SDK
    assert descriptor.framework_references == ()


def test_web_sdk_adds_framework_reference() -> None:
    descriptor = synthesize("net8.0", _declarations(sdk=WEB_SDK))

    assert descriptor.framework_references == (WEB_FRAMEWORK_NAME,)
    assert f'<FrameworkReference Include="{WEB_FRAMEWORK_NAME}" />' in serialize_descriptor(descriptor)


def test_conflicting_versions_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    declarations = _declarations(PackageReference("Alpha", "1.0.0"), PackageReference("Alpha", "2.0.0"))

    with caplog.at_level(logging.WARNING, logger="scriptdeps.project.descriptor"):
        descriptor = synthesize("net8.0", declarations)

    assert descriptor.conflicts == {"alpha": ("1.0.0", "2.0.0")}
    assert "conflicting versions" in caplog.text


def test_empty_target_framework_raises() -> None:
    with pytest.raises(ConfigurationError, match="target_framework"):
        synthesize("  ", _declarations())


def test_serialized_project_contains_expected_elements() -> None:
    descriptor = synthesize("net8.0", _declarations(PackageReference("Alpha", "1.0.0"), PackageReference("Beta")))

    text = serialize_descriptor(descriptor)

    assert text.startswith(f'<Project Sdk="{DEFAULT_PROJECT_SDK}">')
    assert "<TargetFramework>net8.0</TargetFramework>" in text
    assert '<PackageReference Include="Alpha" Version="1.0.0" />' in text
    assert '<PackageReference Include="Beta" Version="*" />' in text
    assert text.endswith("</Project>\n")


def test_read_package_versions_recovers_references() -> None:
    descriptor = synthesize("net8.0", _declarations(PackageReference("Alpha", "1.0.0"), PackageReference("Beta")))

    references = read_package_versions(serialize_descriptor(descriptor))

    assert references == (PackageReference("Alpha", "1.0.0"), PackageReference("Beta", ""))


def test_read_package_versions_rejects_invalid_xml() -> None:
    with pytest.raises(ConfigurationError, match="not valid XML"):
        read_package_versions("<Project>")


@pytest.mark.parametrize(
    ("version", "cacheable"),
    [("1.0.0", True), ("[1.0.0]", True), ("1.0.0-beta.1", True), ("", False), ("3.2", False), ("1.*", False)],
    ids=["exact", "bracketed", "prerelease", "latest", "two_segment", "wildcard"],
)
def test_cacheability_follows_version_pinning(version: str, cacheable: bool) -> None:
    descriptor = synthesize("net8.0", _declarations(PackageReference("Alpha", version)))

    assert descriptor.is_cacheable is cacheable
