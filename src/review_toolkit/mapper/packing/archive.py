"""
Module: mapper.packing.archive

Purpose:
    Persist the complete annotation set inside the assessment itself, as
    hidden feedback records, so a later review session can restore it.
    Each record must respect the platform's detail-text limit.

Key Functions:
    - pack_annotations(): Encode annotations into hidden records
    - unpack_annotations(): Decode hidden records back into annotations

Algorithm:
    Recursive halving:
    1. Encode the whole list; if it fits, emit one record
    2. A single annotation that does not fit cannot be packed
    3. Otherwise split at len // 2 and pack both halves
    Split points are positional, so the same input always yields the same
    records, and concatenating the decoded records restores the input order.

Dependencies:
    - core.utils.serialization: Canonical annotation JSON
    - core.models: Annotation, Feedback

Used By:
    - mapper.controller: Assessment assembly
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Sequence

from review_toolkit.core.models import Annotation, Feedback, FeedbackType, MistakeCategory
from review_toolkit.core.utils.serialization import decode_annotations, encode_annotations

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "CLIENT_DATA"
DEFAULT_VISIBILITY = "NEVER"


class NonPackableAnnotationError(Exception):
    """A single annotation encodes to more than the size budget allows."""

    def __init__(self, encoded: str, max_chars: int):
        super().__init__(
            f"Annotation too large to archive ({len(encoded)} >= {max_chars} chars): {encoded}"
        )
        self.encoded = encoded
        self.max_chars = max_chars


def pack_annotations(
    annotations: Sequence[Annotation],
    max_chars: int,
    *,
    marker: str = DEFAULT_MARKER,
    visibility: str = DEFAULT_VISIBILITY,
) -> List[Feedback]:
    """
    Pack annotations into hidden, zero-credit archival records.

    Args:
        annotations: Annotations to archive, in restore order
        max_chars: Every record's encoded text is shorter than this
        marker: Reserved `text` value identifying archival records
        visibility: Visibility that keeps the records out of the UI

    Returns:
        Archival records in positional order (at least one)

    Raises:
        NonPackableAnnotationError: If one annotation alone does not fit
        AnnotationEncodingError: If an annotation cannot be encoded
    """
    encoded = encode_annotations(annotations)
    if len(encoded) < max_chars:
        return [Feedback(
            type=FeedbackType.MANUAL_UNREFERENCED,
            credits=0.0,
            detail_text=encoded,
            text=marker,
            visibility=visibility,
        )]

    if len(annotations) == 1:
        raise NonPackableAnnotationError(encoded, max_chars)

    middle = len(annotations) // 2
    logger.debug(
        f"Archive of {len(annotations)} annotations is {len(encoded)} chars, "
        f"splitting at {middle}"
    )
    return (
        pack_annotations(annotations[:middle], max_chars, marker=marker, visibility=visibility)
        + pack_annotations(annotations[middle:], max_chars, marker=marker, visibility=visibility)
    )


def unpack_annotations(
    feedbacks: Iterable[Feedback],
    categories: Mapping[str, MistakeCategory],
    *,
    marker: str = DEFAULT_MARKER,
) -> List[Annotation]:
    """
    Restore annotations from the archival records among `feedbacks`.

    Records whose `text` is not the marker are ignored.

    Args:
        feedbacks: Feedback records, archival ones in packing order
        categories: Known categories keyed by id
        marker: Reserved `text` value identifying archival records

    Returns:
        Annotations in their original order

    Raises:
        ValidationError: If a record cannot be decoded
    """
    annotations: List[Annotation] = []
    for i, feedback in enumerate(feedbacks):
        if feedback.text != marker:
            continue
        annotations.extend(
            decode_annotations(feedback.detail_text or "", categories, path=f"feedbacks[{i}]")
        )
    logger.info(f"Restored {len(annotations)} archived annotations")
    return annotations
