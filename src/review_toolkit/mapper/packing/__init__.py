"""
Module: mapper.packing

Purpose:
    Fit text into the platform's size-limited feedback records.

Key Functions:
    - pack_lines(): Greedy line packing into headline-prefixed chunks
    - pack_annotations(): Recursive archival packing of annotations
    - unpack_annotations(): Restore annotations from archival records
"""

from .chunker import ChunkedText, pack_lines
from .archive import NonPackableAnnotationError, pack_annotations, unpack_annotations

__all__ = [
    "ChunkedText",
    "pack_lines",
    "NonPackableAnnotationError",
    "pack_annotations",
    "unpack_annotations",
]
