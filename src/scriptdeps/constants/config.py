"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "scriptdeps.yaml"
DEFAULT_TARGET_FRAMEWORK: str = "net8.0"
DEFAULT_RESTORE_COMMAND: tuple[str, ...] = ("dotnet", "restore")
DOTNET_EXECUTABLE: str = "dotnet"

PLATFORM_IDENTIFIERS: dict[str, str] = {
    "windows": "win",
    "darwin": "osx",
    "linux": "linux",
}
ARCHITECTURE_ALIASES: dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "armv7l": "arm",
}
