"""
Module: mapper.feedback.summary

Purpose:
    Build the per-rating-group summary feedback that carries the group's
    points, split into chunks that fit the platform's detail-text limit.

Key Functions:
    - build_group_feedback(): Summary records for one group
    - render_headline(): "<name> [<points> (Range: <lo> -- <hi>) points]"

Algorithm:
    1. Aggregate the group score (no annotated category -> no records)
    2. Render one bullet per annotated category, one sub-bullet per
       annotation, and a note if the group hit its range limit
    3. Pack the lines into chunks headed "<headline> (annotation N)"
    4. The credited chunk gets the group's points, all others zero

Dependencies:
    - mapper.scoring.aggregator: Group score
    - mapper.packing.chunker: Line packing

Used By:
    - mapper.controller: Assessment assembly
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from review_toolkit.core.models import Annotation, Feedback, FeedbackType, PointResult, RatingGroup
from review_toolkit.core.utils.formatting import format_number

from ..config import MapperConfig
from ..packing.chunker import pack_lines
from ..scoring.aggregator import annotations_for_category, compute_rating_group_score

LIMIT_NOTE = "\n    * Note: The sum of penalties hit the limits for this rating group."
ELLIPSIS = "..."

logger = logging.getLogger(__name__)


def render_headline(group: RatingGroup, points: float, max_chars: Optional[int] = None) -> str:
    """
    Render the summary headline, e.g. "Style [-2.25 (Range: -10 -- 0) points]".

    If max_chars is given and the headline is longer, the group name is cut
    and suffixed with "..."; the points part is always kept whole.
    """
    suffix = f" [{format_number(points)}"
    if group.range is not None:
        suffix += (
            f" (Range: {format_number(group.range.lower)}"
            f" -- {format_number(group.range.upper)})"
        )
    suffix += " points]"

    name = group.name
    if max_chars is not None and len(name) + len(suffix) > max_chars:
        keep = max(0, max_chars - len(suffix) - len(ELLIPSIS))
        logger.warning(
            f"Name of rating group {group.id!r} ({len(name)} chars) "
            f"truncated to {keep} chars in summary headline"
        )
        name = name[:keep] + ELLIPSIS
    return name + suffix


def render_lines(
    result: PointResult,
    annotations: Sequence[Annotation],
) -> List[str]:
    """Body lines of a group summary, each starting with a newline."""
    lines: List[str] = []
    for category, score in result.scores.items():
        lines.append(f'\n    * "{category.label}" [{format_number(score)}P]:')
        for annotation in annotations_for_category(category, annotations):
            line = (
                f"\n        * {annotation.file_path}"
                f" at line {annotation.display_line}"
            )
            if category.custom_penalty:
                line += f" ({format_number(annotation.custom_penalty)}P)"
            lines.append(line)

    if result.reached_limit:
        lines.append(LIMIT_NOTE)
    return lines


def build_group_feedback(
    group: RatingGroup,
    annotations: Sequence[Annotation],
    config: MapperConfig,
) -> List[Feedback]:
    """
    Build the summary feedback for one rating group.

    Args:
        group: Rating group to summarize
        annotations: All annotations of the submission
        config: Size limits

    Returns:
        MANUAL_UNREFERENCED records in chunk order; exactly one carries the
        group's clamped points. Empty if no category has annotations.
    """
    result = compute_rating_group_score(group, annotations)
    if not result.has_annotations:
        return []

    # the headline repeats in every chunk header
    headline = render_headline(group, result.points, config.detail_text_limit // 4)
    capacity = config.max_detail_chars - len(headline) - config.safety_margin
    chunked = pack_lines(
        render_lines(result, annotations),
        capacity,
        header=lambda n: f"{headline} (annotation {n})",
    )

    return [
        Feedback(
            type=FeedbackType.MANUAL_UNREFERENCED,
            credits=chunked.credit_for(i, result.points),
            detail_text=chunk,
        )
        for i, chunk in enumerate(chunked.chunks)
    ]
