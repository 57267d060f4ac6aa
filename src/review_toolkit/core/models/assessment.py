"""
Module: assessment

Purpose:
    Provides the collaborator shapes consumed by the assembler (exercise,
    submission, assessor, lock snapshot) and the result types it produces
    (PointResult per rating group, AssessmentResult overall).

Key Classes:
    - Exercise, Submission, Assessor: Interface-only identity records
    - LockSnapshot: Feedback already stored for the locked submission
    - PointResult: Aggregated score of one rating group
    - AssessmentResult: Payload handed to the transport layer

Dependencies:
    - dataclasses (std)
    - .feedback.Feedback
    - .ratings.MistakeCategory
    - core.schemas.validator (lock payload validation)

Used By:
    - mapper.scoring.aggregator
    - mapper.controller
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from ..schemas.validator import validate_feedback, validate_lock
from .feedback import Feedback, FeedbackType
from .ratings import MistakeCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Exercise:
    """Exercise being graded; only the point maximum matters here."""

    id: int
    max_points: float

    def __post_init__(self) -> None:
        if self.max_points <= 0:
            raise ValueError(f"max_points must be positive: {self.max_points}")


@dataclass(frozen=True)
class Submission:
    id: int


@dataclass(frozen=True)
class Assessor:
    id: int
    login: str
    name: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"id": self.id, "login": self.login}
        if self.name is not None:
            d["name"] = self.name
        return d


@dataclass(frozen=True)
class LockSnapshot:
    """
    Feedback already stored on the platform when the submission was locked.

    Attributes:
        submission_id: Locked submission
        latest_feedback: Feedback records in platform order
    """

    submission_id: int
    latest_feedback: Tuple[Feedback, ...] = ()

    @property
    def automatic_feedback(self) -> Tuple[Feedback, ...]:
        """Only AUTOMATIC records; stale manual feedback is discarded."""
        return tuple(f for f in self.latest_feedback if f.type is FeedbackType.AUTOMATIC)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LockSnapshot:
        """
        Build a snapshot from the platform lock payload.

        Entries without a feedbackType are skipped, every other entry is
        validated against the feedback schema first.

        Args:
            data: {"submissionId": ..., "latestFeedback": [...]}

        Returns:
            LockSnapshot instance

        Raises:
            ValidationError: If the envelope or a feedback entry is malformed
        """
        validate_lock(data)
        feedback = []
        for i, entry in enumerate(data.get("latestFeedback") or []):
            if entry.get("feedbackType") is None:
                logger.debug(f"Skipping untyped feedback entry {i}")
                continue
            validate_feedback(entry, path=f"latestFeedback[{i}]")
            feedback.append(Feedback.from_dict(entry))
        return cls(submission_id=data["submissionId"], latest_feedback=tuple(feedback))


@dataclass(frozen=True)
class PointResult:
    """
    Aggregated score of one rating group.

    Attributes:
        points: Summed category scores, clamped to the group's range
        reached_limit: True iff clamping changed the sum
        scores: Pre-clamp score per category that has annotations,
            in the group's category order. Categories without
            annotations are absent.
    """

    points: float
    reached_limit: bool
    scores: Mapping[MistakeCategory, float] = field(default_factory=dict)

    # scores is a mapping, so results compare by value but cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    @property
    def has_annotations(self) -> bool:
        return bool(self.scores)


@dataclass(frozen=True)
class AssessmentResult:
    """
    Complete assessment payload (immutable).

    Attributes:
        submission_id: Assessed submission
        assessment_type: Fixed type tag, e.g. "SEMI_AUTOMATIC"
        score: Relative score in [0, 100]
        rated: Completion flag
        has_feedback: Completion flag
        assessor: Reviewer identity
        feedbacks: Automatic, inline, summary, then archival records
        code_issue_count: Static analysis findings among automatic feedback
        passed_test_case_count: Positive test results
        test_case_count: All test results
    """

    submission_id: int
    assessment_type: str
    score: float
    rated: bool
    has_feedback: bool
    assessor: Assessor
    feedbacks: Tuple[Feedback, ...]
    code_issue_count: int
    passed_test_case_count: int
    test_case_count: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the platform's wire format."""
        return {
            "id": self.submission_id,
            "assessmentType": self.assessment_type,
            "score": self.score,
            "rated": self.rated,
            "hasFeedback": self.has_feedback,
            "assessor": self.assessor.to_dict(),
            "feedbacks": [f.to_dict() for f in self.feedbacks],
            "codeIssueCount": self.code_issue_count,
            "passedTestCaseCount": self.passed_test_case_count,
            "testCaseCount": self.test_case_count,
        }
