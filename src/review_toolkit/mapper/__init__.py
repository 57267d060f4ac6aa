"""
Module: mapper

Purpose:
    Turn review annotations into grading feedback and a score.

Key Classes:
    - AssessmentAssembler: Main entry point
    - MapperConfig: Size limits and fixed markers

Key Functions:
    - compute_rating_group_score(): Group score with range clamping
    - pack_annotations() / unpack_annotations(): Archival round trip
    - build_inline_feedback() / build_group_feedback(): Feedback texts
"""

from .config import MapperConfig
from .controller import AssessmentAssembler
from .feedback import build_group_feedback, build_inline_feedback, group_by_line
from .packing import (
    ChunkedText,
    NonPackableAnnotationError,
    pack_annotations,
    pack_lines,
    unpack_annotations,
)
from .scoring import compute_rating_group_score

__all__ = [
    # Config
    "MapperConfig",
    # Controller
    "AssessmentAssembler",
    # Feedback
    "build_group_feedback",
    "build_inline_feedback",
    "group_by_line",
    # Packing
    "ChunkedText",
    "NonPackableAnnotationError",
    "pack_annotations",
    "pack_lines",
    "unpack_annotations",
    # Scoring
    "compute_rating_group_score",
]
