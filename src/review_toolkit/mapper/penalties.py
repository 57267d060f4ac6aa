"""
Module: mapper.penalties

Purpose:
    Factories for common mistake-category scoring functions. Each returns a
    plain callable `(annotations) -> float` suitable for
    MistakeCategory.scoring. Scores are credits: penalties are negative.

Key Functions:
    - stacking_penalty(): Fixed points per annotation, optionally capped
    - threshold_penalty(): Fixed points once enough annotations exist
    - custom_penalty(): Sum of the reviewer's per-annotation penalties
"""

from __future__ import annotations

from typing import Optional, Sequence

from review_toolkit.core.models import Annotation, ScoringFunction


def stacking_penalty(points: float, max_uses: Optional[int] = None) -> ScoringFunction:
    """
    Score `points` per annotation, counting at most `max_uses` annotations.

    Example:
        >>> stacking_penalty(-1.0, max_uses=2)([a, b, c])
        -2.0
    """
    if max_uses is not None and max_uses < 0:
        raise ValueError(f"max_uses must be non-negative: {max_uses}")

    def score(annotations: Sequence[Annotation]) -> float:
        uses = len(annotations) if max_uses is None else min(len(annotations), max_uses)
        return points * uses

    return score


def threshold_penalty(points: float, threshold: int = 1) -> ScoringFunction:
    """Score `points` once at least `threshold` annotations exist, else 0."""
    if threshold < 1:
        raise ValueError(f"threshold must be at least 1: {threshold}")

    def score(annotations: Sequence[Annotation]) -> float:
        return points if len(annotations) >= threshold else 0.0

    return score


def custom_penalty() -> ScoringFunction:
    """Sum the custom penalties the reviewer entered per annotation."""

    def score(annotations: Sequence[Annotation]) -> float:
        return sum(a.custom_penalty or 0.0 for a in annotations)

    return score
