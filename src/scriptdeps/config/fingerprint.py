"""Config fingerprinting for resolution logging."""

from __future__ import annotations

import hashlib
import json

from scriptdeps.config.model import ScriptDepsConfig


def config_fingerprint(config: ScriptDepsConfig) -> str:
    """Return a stable hash over the settings that affect resolution."""
    payload = {
        "target_framework": config.target_framework,
        "package_sources": list(config.package_sources),
        "cache_root": str(config.effective_cache_root),
        "restore_command": list(config.restore_command),
        "runtime_dir": str(config.runtime_dir) if config.runtime_dir is not None else None,
        "runtime_identifier": config.runtime_identifier,
        "no_cache": config.no_cache,
    }
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()
