"""
Module: mapper.scoring.aggregator

Purpose:
    Compute a rating group's score: run each category's scoring function
    on that category's annotations, sum, and clamp to the group's range.

Key Functions:
    - compute_rating_group_score(): Main aggregation function

Algorithm:
    1. For each category (group order), collect its annotations
    2. No annotations -> category is absent from the score map
    3. Otherwise score them, record the score, add to the sum
    4. Clamp the sum to the group's range; reached_limit iff it changed

Dependencies:
    - core.models: RatingGroup, Annotation, PointResult

Used By:
    - mapper.feedback.summary: Group summary feedback
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from review_toolkit.core.models import Annotation, MistakeCategory, PointResult, RatingGroup

logger = logging.getLogger(__name__)


def annotations_for_category(
    category: MistakeCategory,
    annotations: Sequence[Annotation],
) -> List[Annotation]:
    """Annotations referencing `category`, in input order."""
    return [a for a in annotations if a.category == category]


def compute_rating_group_score(
    group: RatingGroup,
    annotations: Sequence[Annotation],
) -> PointResult:
    """
    Aggregate the score of one rating group.

    Pure with respect to its inputs; scoring functions are trusted to
    return finite numbers.

    Args:
        group: Rating group to score
        annotations: All annotations of the submission

    Returns:
        PointResult with clamped points, reached_limit flag and the
        pre-clamp score of every annotated category
    """
    logger.info(f"Calculating points for rating group {group.name!r}")

    total = 0.0
    scores: Dict[MistakeCategory, float] = {}
    for category in group.categories:
        matching = annotations_for_category(category, annotations)
        if not matching:
            continue
        score = category.score(matching)
        logger.debug(f"Category {category.label!r} -> {score}")
        scores[category] = score
        total += score

    clamped = group.clamp(total)
    reached_limit = group.has_range and clamped != total
    if reached_limit:
        logger.info(f"Rating group {group.name!r} reached limit: {total} -> {clamped}")

    return PointResult(points=clamped, reached_limit=reached_limit, scores=scores)
