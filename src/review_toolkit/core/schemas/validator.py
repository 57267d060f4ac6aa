"""
Schema Validation Utilities

Validates JSON data exchanged with the grading platform against the
schemas shipped next to this module:

- feedback.schema.json: one feedback record from a lock payload
- annotation_list.schema.json: one decoded archival chunk
- lock.schema.json: the envelope of a submission lock payload

Validation fails fast on the first violation and reports the JSON path.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Loaded lazily, keyed by schema name
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _validate(data: Any, schema_name: str, path: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        inner = ".".join(str(p) for p in e.absolute_path)
        full_path = ".".join(p for p in (path, inner) if p)
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=full_path,
            errors=[e.message],
        ) from e


def validate_feedback(data: dict[str, Any], *, path: str = "") -> None:
    """
    Validate one feedback record in wire format.

    Args:
        data: Feedback dictionary
        path: Location of the record, prefixed to error paths

    Raises:
        ValidationError: If data is invalid
    """
    _validate(data, "feedback", path)


def validate_annotation_list(data: Any, *, path: str = "") -> None:
    """
    Validate one decoded archival chunk.

    Args:
        data: Decoded JSON (must be a list of annotation objects)
        path: Location of the chunk, prefixed to error paths

    Raises:
        ValidationError: If data is invalid
    """
    _validate(data, "annotation_list", path)


def validate_lock(data: Any) -> None:
    """
    Validate the envelope of a lock payload.

    Feedback entries are only checked to be objects; validate_feedback()
    covers their fields.

    Raises:
        ValidationError: If data is invalid
    """
    _validate(data, "lock", "")
