"""Lock output reading and host runtime discovery."""

from __future__ import annotations

from .host import (
    HostEnvironment,
    detect_host_environment,
    highest_framework_dir,
    platform_identifier,
    runtime_identifier,
    target_framework_for,
)
from .reader import parse_lock_output, read_dependency_context, runtime_dependency_map
from .schema import lock_schema_errors, validate_lock_output

__all__ = [
    "HostEnvironment",
    "detect_host_environment",
    "highest_framework_dir",
    "lock_schema_errors",
    "parse_lock_output",
    "platform_identifier",
    "read_dependency_context",
    "runtime_dependency_map",
    "runtime_identifier",
    "target_framework_for",
    "validate_lock_output",
]
