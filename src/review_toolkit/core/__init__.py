"""
Review Toolkit Core Package

Shared data models, serialization and schema validation. The mapper
modules build on these and never define their own record types.
"""

from .models import (
    Annotation,
    AssessmentResult,
    Feedback,
    FeedbackType,
    MistakeCategory,
    PointResult,
    RatingGroup,
    ScoreRange,
)

__all__ = [
    "Annotation",
    "AssessmentResult",
    "Feedback",
    "FeedbackType",
    "MistakeCategory",
    "PointResult",
    "RatingGroup",
    "ScoreRange",
]
