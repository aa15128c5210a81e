"""Script graph resolution and project descriptor synthesis."""

from __future__ import annotations

from .descriptor import read_package_versions, serialize_descriptor, synthesize, synthesize_from_graph
from .graph import merge_declarations, resolve_graph, resolve_graph_from_code

__all__ = [
    "merge_declarations",
    "read_package_versions",
    "resolve_graph",
    "resolve_graph_from_code",
    "serialize_descriptor",
    "synthesize",
    "synthesize_from_graph",
]
