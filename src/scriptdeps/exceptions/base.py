"""Base exception for scriptdeps."""

from __future__ import annotations


class ScriptDepsError(Exception):
    """Root of every error raised by scriptdeps."""
