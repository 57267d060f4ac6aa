"""
Module: mapper.scoring

Purpose:
    Per-rating-group score aggregation with range clamping.

Key Functions:
    - compute_rating_group_score(): Aggregate one group into a PointResult
    - annotations_for_category(): Filter annotations by category
"""

from .aggregator import annotations_for_category, compute_rating_group_score

__all__ = [
    "annotations_for_category",
    "compute_rating_group_score",
]
