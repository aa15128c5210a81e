"""Configuration loading and normalization for scriptdeps."""

from __future__ import annotations

from scriptdeps.config.fingerprint import config_fingerprint
from scriptdeps.config.loader import load_config
from scriptdeps.config.model import ScriptDepsConfig

__all__ = ["ScriptDepsConfig", "config_fingerprint", "load_config"]
