"""Constants describing lock output, shared frameworks and binary loading."""

from __future__ import annotations

import re

LOCK_FILE_DIRNAME: str = "obj"
LOCK_FILE_NAME: str = "project.assets.json"
PROJECT_FILE_NAME: str = "script.csproj"

PLACEHOLDER_ASSET: str = "_._"
PACKAGE_LIBRARY_TYPE: str = "package"
RUNTIME_TARGET_SEPARATOR: str = "/"

RUNTIME_ASSET_TYPE: str = "runtime"
NATIVE_ASSET_TYPE: str = "native"
SCRIPT_CODE_LANGUAGE: str = "csx"
SCRIPT_FILE_SUFFIX: str = ".csx"
ASSEMBLY_VERSION_PROPERTY: str = "assemblyVersion"

CORE_FRAMEWORK_NAME: str = "Microsoft.NETCore.App"
WEB_FRAMEWORK_NAME: str = "Microsoft.AspNetCore.App"
SHARED_FRAMEWORK_DIRNAME: str = "shared"
MIN_SHARED_FRAMEWORK_MAJOR: int = 3

MANAGED_BINARY_SUFFIX: str = ".dll"
PE_HEADER_MAGIC: bytes = b"MZ"

SDK_FRAMEWORK_REFERENCES: dict[str, tuple[str, ...]] = {
    "Microsoft.NET.Sdk.Web": (WEB_FRAMEWORK_NAME,),
}

# Binaries shared with the host process; a second copy would split the session.
HOMOGENEOUS_BINARIES: frozenset[str] = frozenset(
    {
        "mscorlib",
        "netstandard",
        "system.private.corelib",
        "microsoft.codeanalysis.scripting",
        "microsoft.codeanalysis.csharp.scripting",
    }
)

NATIVE_LIBRARY_PREFIX: str = "lib"
NATIVE_LIBRARY_SUFFIXES: tuple[str, ...] = (".so", ".dylib", ".dll")

PINNED_VERSION_PATTERN: re.Pattern[str] = re.compile(
    r"^(?:\[\s*\d+(?:\.\d+){1,3}(?:-[0-9A-Za-z.-]+)?\s*\]|\d+(?:\.\d+){2,3}(?:-[0-9A-Za-z.-]+)?)$"
)
VERSION_PATTERN: re.Pattern[str] = re.compile(
    r"^v?(?P<numbers>\d+(?:\.\d+){0,3})(?:-(?P<prerelease>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)

FLOATING_VERSION_PLACEHOLDER: str = "*"
