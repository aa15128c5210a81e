"""Structural validation of lock output before it is interpreted."""

from __future__ import annotations

from typing import Any

import jsonschema

from scriptdeps.constants.lock_schema import LOCK_OUTPUT_SCHEMA
from scriptdeps.exceptions import LockFileError

_VALIDATOR = jsonschema.Draft202012Validator(LOCK_OUTPUT_SCHEMA)


def lock_schema_errors(payload: Any) -> list[str]:
    """Return every schema violation in *payload*, ordered by location."""
    errors = sorted(_VALIDATOR.iter_errors(payload), key=lambda error: [str(part) for part in error.absolute_path])
    messages: list[str] = []
    for error in errors:
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        messages.append(f"{location}: {error.message}")
    return messages


def validate_lock_output(payload: Any, source: str = "<lock output>") -> None:
    """Raise ``LockFileError`` when *payload* is not structurally valid lock output."""
    errors = lock_schema_errors(payload)
    if errors:
        raise LockFileError(f"Unable to read lock file {source}: {errors[0]}")
