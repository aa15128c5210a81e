"""Dynamic load resolution for script execution."""

from __future__ import annotations

from .context import LoadObserver, ScriptLoadContext, lookup
from .index import LoadIndex, build_load_index

__all__ = ["LoadIndex", "LoadObserver", "ScriptLoadContext", "build_load_index", "lookup"]
