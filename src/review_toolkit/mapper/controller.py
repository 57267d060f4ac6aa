"""
Module: mapper.controller

Purpose:
    Orchestrate turning a review session into an assessment payload.
    Automatic feedback → Inline feedback → Group summaries → Archive → Score

Key Classes:
    - AssessmentAssembler: Holds one request's inputs, assemble() builds the result

Dependencies:
    - mapper.feedback: Inline and summary feedback
    - mapper.packing.archive: Archival records
    - mapper.config: Size limits and fixed markers

Used By:
    - Callers submitting a manual review to the grading platform
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

from review_toolkit.core.models import (
    Annotation,
    AssessmentResult,
    Assessor,
    Exercise,
    Feedback,
    LockSnapshot,
    RatingGroup,
    Submission,
    index_categories,
)

from .config import MapperConfig
from .feedback import build_group_feedback, build_inline_feedback, group_by_line
from .packing.archive import pack_annotations

logger = logging.getLogger(__name__)


class AssessmentAssembler:
    """
    Builds the assessment for one locked submission.

    Every call to assemble() recomputes everything from the inputs; the
    assembler keeps no state between calls and nothing across requests.

    Example:
        >>> assembler = AssessmentAssembler(
        ...     exercise, submission, annotations, rating_groups, assessor, lock,
        ... )
        >>> result = assembler.assemble()
        >>> result.score
        87.5
    """

    def __init__(
        self,
        exercise: Exercise,
        submission: Submission,
        annotations: Sequence[Annotation],
        rating_groups: Sequence[RatingGroup],
        assessor: Assessor,
        lock: LockSnapshot,
        config: Optional[MapperConfig] = None,
    ):
        self.exercise = exercise
        self.submission = submission
        self.annotations = tuple(annotations)
        self.rating_groups = tuple(rating_groups)
        self.assessor = assessor
        self.lock = lock
        self.config = config or MapperConfig()

        if lock.submission_id != submission.id:
            raise ValueError(
                f"Lock is for submission {lock.submission_id}, not {submission.id}"
            )

        index = index_categories(self.rating_groups)
        for annotation in self.annotations:
            entry = index.get(annotation.category.id)
            if entry is None or entry[1] != annotation.category:
                raise ValueError(
                    f"Annotation {annotation.uuid} references unknown category "
                    f"{annotation.category.id!r}"
                )
        self._category_groups = {cid: group for cid, (group, _) in index.items()}

    # ─────────────────────────────────────────────────────────────────────────
    # Feedback
    # ─────────────────────────────────────────────────────────────────────────

    def automatic_feedback(self) -> List[Feedback]:
        """Pre-existing AUTOMATIC feedback, in snapshot order."""
        return list(self.lock.automatic_feedback)

    def manual_feedback(self) -> List[Feedback]:
        """Inline records by line, then summaries in rating group order."""
        feedbacks = build_inline_feedback(
            group_by_line(self.annotations), self._category_groups, self.config
        )
        for group in self.rating_groups:
            feedbacks.extend(build_group_feedback(group, self.annotations, self.config))
        return feedbacks

    def archival_feedback(self) -> List[Feedback]:
        return pack_annotations(
            self.annotations,
            self.config.detail_text_limit,
            marker=self.config.client_data_marker,
            visibility=self.config.client_data_visibility,
        )

    def all_feedback(self) -> List[Feedback]:
        feedbacks = self.automatic_feedback() + self.manual_feedback() + self.archival_feedback()
        return [f for f in feedbacks if f is not None]

    # ─────────────────────────────────────────────────────────────────────────
    # Scoring
    # ─────────────────────────────────────────────────────────────────────────

    def absolute_score(self, feedbacks: Sequence[Feedback]) -> float:
        """Sum of all credits, clamped to [0, max_points]."""
        total = sum(f.credits for f in feedbacks)
        return min(max(0.0, total), self.exercise.max_points)

    def relative_score(self, absolute_score: float) -> float:
        return absolute_score / self.exercise.max_points * 100.0

    # ─────────────────────────────────────────────────────────────────────────
    # Assembly
    # ─────────────────────────────────────────────────────────────────────────

    def assemble(self) -> AssessmentResult:
        """
        Build the complete assessment.

        Returns:
            AssessmentResult ready for the transport layer

        Raises:
            NonPackableAnnotationError: If one annotation cannot be archived
            AnnotationEncodingError: If annotations cannot be encoded
        """
        start_time = time.perf_counter()
        logger.info(
            f"Assembling assessment for submission {self.submission.id} "
            f"with {len(self.annotations)} annotations"
        )

        feedbacks = self.all_feedback()
        absolute = self.absolute_score(feedbacks)
        score = self.relative_score(absolute)

        automatic = self.automatic_feedback()
        tests = [f for f in automatic if f.is_test]
        code_issue_count = sum(1 for f in automatic if f.static_code_analysis)
        passed_test_case_count = sum(1 for f in tests if f.positive)

        elapsed = time.perf_counter() - start_time
        logger.info(
            f"Assessment for submission {self.submission.id}: {len(feedbacks)} feedbacks, "
            f"{absolute}/{self.exercise.max_points} points ({score:.2f}%) in {elapsed:.3f}s"
        )

        return AssessmentResult(
            submission_id=self.submission.id,
            assessment_type=self.config.assessment_type,
            score=score,
            rated=True,
            has_feedback=True,
            assessor=self.assessor,
            feedbacks=tuple(feedbacks),
            code_issue_count=code_issue_count,
            passed_test_case_count=passed_test_case_count,
            test_case_count=len(tests),
        )
