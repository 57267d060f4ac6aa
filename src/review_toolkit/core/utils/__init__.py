"""Formatting and serialization helpers for the core models."""

from .formatting import format_number
from .serialization import (
    AnnotationEncodingError,
    annotation_to_dict,
    decode_annotations,
    encode_annotations,
)

__all__ = [
    "format_number",
    "AnnotationEncodingError",
    "annotation_to_dict",
    "decode_annotations",
    "encode_annotations",
]
