"""JSON Schema for restore lock output (``project.assets.json`` shape)."""

from __future__ import annotations

from typing import Any

_ASSET_MAP: dict[str, Any] = {
    "type": "object",
    "additionalProperties": {"type": "object"},
}

LOCK_OUTPUT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Restore lock output",
    "type": "object",
    "required": ["targets", "libraries"],
    "properties": {
        "version": {"type": "integer"},
        "targets": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "additionalProperties": {
                    "type": "object",
                    "properties": {
                        "type": {"type": "string"},
                        "compile": _ASSET_MAP,
                        "runtime": _ASSET_MAP,
                        "native": _ASSET_MAP,
                        "contentFiles": _ASSET_MAP,
                        "runtimeTargets": {
                            "type": "object",
                            "additionalProperties": {
                                "type": "object",
                                "properties": {
                                    "assetType": {"type": "string"},
                                    "rid": {"type": "string"},
                                },
                            },
                        },
                    },
                },
            },
        },
        "libraries": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {
                    "type": {"type": "string"},
                    "path": {"type": "string"},
                    "files": {"type": "array", "items": {"type": "string"}},
                },
            },
        },
        "packageFolders": {"type": "object"},
        "project": {
            "type": "object",
            "properties": {
                "frameworks": {
                    "type": "object",
                    "additionalProperties": {
                        "type": "object",
                        "properties": {
                            "frameworkReferences": {"type": "object"},
                        },
                    },
                },
            },
        },
    },
}
