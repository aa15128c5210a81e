"""Config loading and normalization for scriptdeps."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from scriptdeps.config.model import ScriptDepsConfig
from scriptdeps.constants.config import CONFIG_FILENAME, DEFAULT_RESTORE_COMMAND
from scriptdeps.exceptions import ConfigurationError


def load_config(root: Path, config_path: Path | None = None) -> ScriptDepsConfig:
    """Load and validate config from ``scriptdeps.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigurationError(f"Config file not found: {path}")
        return ScriptDepsConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file at {path} must be a YAML mapping")

    target_framework = raw.get("target_framework", "")
    if target_framework is None:
        target_framework = ""
    if not isinstance(target_framework, str):
        raise ConfigurationError("target_framework must be a string")

    restore_command = _ensure_string_list(
        raw.get("restore_command", list(DEFAULT_RESTORE_COMMAND)), "restore_command"
    )
    if not restore_command:
        raise ConfigurationError("restore_command must not be empty")

    runtime_identifier = raw.get("runtime_identifier", "")
    if runtime_identifier is None:
        runtime_identifier = ""
    if not isinstance(runtime_identifier, str):
        raise ConfigurationError("runtime_identifier must be a string")

    no_cache = raw.get("no_cache", False)
    if not isinstance(no_cache, bool):
        raise ConfigurationError("no_cache must be a boolean")

    timeout = raw.get("restore_timeout_seconds")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0):
        raise ConfigurationError("restore_timeout_seconds must be a positive integer")

    return ScriptDepsConfig(
        target_framework=target_framework.strip(),
        package_sources=tuple(
            source.strip()
            for source in _ensure_string_list(raw.get("package_sources", []), "package_sources")
            if source.strip()
        ),
        cache_root=_optional_path(raw.get("cache_root"), "cache_root", root),
        restore_command=tuple(restore_command),
        runtime_dir=_optional_path(raw.get("runtime_dir"), "runtime_dir", root),
        runtime_identifier=runtime_identifier.strip(),
        no_cache=no_cache,
        restore_timeout_seconds=timeout,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigurationError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(f"{key_name} must be a list of strings")
    return list(value)


def _optional_path(value: Any, key_name: str, root: Path) -> Path | None:
    """Resolve an optional path setting relative to the config root."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{key_name} must be a path string")
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()
