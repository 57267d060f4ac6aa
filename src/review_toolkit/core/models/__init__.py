"""
Core Models Package

Immutable data models shared by the mapper modules.

All models in this package are frozen dataclasses, constructed fresh for
each assessment request and discarded afterwards.
"""

from .ratings import ScoreRange, MistakeCategory, RatingGroup, ScoringFunction, index_categories
from .annotations import Annotation
from .feedback import Feedback, FeedbackType
from .assessment import (
    Exercise,
    Submission,
    Assessor,
    LockSnapshot,
    PointResult,
    AssessmentResult,
)

__all__ = [
    "ScoreRange",
    "MistakeCategory",
    "RatingGroup",
    "ScoringFunction",
    "index_categories",
    "Annotation",
    "Feedback",
    "FeedbackType",
    "Exercise",
    "Submission",
    "Assessor",
    "LockSnapshot",
    "PointResult",
    "AssessmentResult",
]
