"""
Module: mapper.feedback.inline

Purpose:
    Build the feedback records shown next to annotated source lines.
    Inline records never carry credit; points are only granted by the
    rating group summaries.

Key Functions:
    - group_by_line(): Group annotations by (start line, file)
    - build_inline_feedback(): Render one record per group

Dependencies:
    - core.utils.formatting: Number formatting
    - mapper.packing.chunker: Splitting oversized line feedback

Used By:
    - mapper.controller: Assessment assembly
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence, Tuple

from review_toolkit.core.models import Annotation, Feedback, FeedbackType, RatingGroup
from review_toolkit.core.utils.formatting import format_number

from ..config import MapperConfig
from ..packing.chunker import pack_lines

logger = logging.getLogger(__name__)

LineKey = Tuple[int, str]

ENTRY_SEPARATOR = "\n\n"


def group_by_line(annotations: Sequence[Annotation]) -> Dict[LineKey, List[Annotation]]:
    """
    Group annotations by start line and file.

    Returns:
        Dict ordered by ascending line, ties by first appearance of the
        file; annotations keep their input order within a group
    """
    groups: Dict[LineKey, List[Annotation]] = {}
    for annotation in annotations:
        key = (annotation.start_line, annotation.file_path)
        groups.setdefault(key, []).append(annotation)
    return dict(sorted(groups.items(), key=lambda item: item[0][0]))


def render_entry(annotation: Annotation, group: RatingGroup) -> str:
    """Render one annotation's part of a line's detail text."""
    category = annotation.category
    text = f"[{group.name}:{category.label}] "
    if category.custom_penalty:
        text += f"{annotation.custom_message} ({format_number(annotation.custom_penalty)}P)"
    else:
        text += category.message
        if annotation.custom_message is not None:
            text += f"\nExplanation: {annotation.custom_message}"
    return text


def build_inline_feedback(
    line_groups: Mapping[LineKey, Sequence[Annotation]],
    category_groups: Mapping[str, RatingGroup],
    config: MapperConfig,
) -> List[Feedback]:
    """
    Render inline feedback for every annotated line.

    Args:
        line_groups: Output of group_by_line()
        category_groups: Owning rating group per category id
        config: Size limits

    Returns:
        MANUAL records with zero credit. Normally one per line; a line whose
        entries exceed the detail budget is split over several records with
        the same text and reference.
    """
    feedbacks: List[Feedback] = []
    for (line, file_path), annotations in line_groups.items():
        text = f"File {file_path} at line {line + 1}"
        reference = f"file:{file_path}.java_line:{line}"

        entries = [render_entry(a, category_groups[a.category.id]) for a in annotations]
        detail = ENTRY_SEPARATOR.join(entries).strip()

        if len(detail) <= config.detail_text_limit:
            details = [detail]
        else:
            logger.warning(
                f"Inline feedback for {reference} is {len(detail)} chars, splitting"
            )
            lines = [entries[0]] + [ENTRY_SEPARATOR + e for e in entries[1:]]
            chunked = pack_lines(lines, config.detail_text_limit)
            details = [chunk.strip() for chunk in chunked.chunks]

        for detail_text in details:
            feedbacks.append(Feedback(
                type=FeedbackType.MANUAL,
                credits=0.0,
                detail_text=detail_text,
                text=text,
                reference=reference,
            ))
    return feedbacks
