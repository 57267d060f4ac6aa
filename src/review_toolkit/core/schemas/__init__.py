"""JSON Schema documents and validation helpers."""

from .validator import (
    ValidationError,
    validate_annotation_list,
    validate_feedback,
    validate_lock,
)

__all__ = [
    "ValidationError",
    "validate_annotation_list",
    "validate_feedback",
    "validate_lock",
]
