"""
Module: ratings

Purpose:
    Provides the grading scheme the reviewer works against: rating groups,
    the mistake categories they own, and the optional score range each
    group is clamped to.

Key Classes:
    - ScoreRange: Inclusive, optionally unbounded numeric range
    - MistakeCategory: A kind of mistake with an injected scoring function
    - RatingGroup: Named, optionally ranged collection of categories

Dependencies:
    - dataclasses (std)
    - math (std)
    - typing (std)
    - .annotations.Annotation (TYPE_CHECKING only)

Used By:
    - core.models.annotations.Annotation
    - mapper.scoring.aggregator
    - mapper.feedback.inline / mapper.feedback.summary
    - mapper.controller

Design Note:
    Scoring is an injected callable, not a subclass hook. A category is
    identified by its id and label; two categories with the same id but
    different scoring callables compare equal.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .annotations import Annotation


ScoringFunction = Callable[[Sequence["Annotation"]], float]


@dataclass(frozen=True, slots=True)
class ScoreRange:
    """
    Inclusive score range for a rating group.

    Either bound may be None, meaning unbounded on that side.

    Attributes:
        low: Lower bound (None = -infinity)
        high: Upper bound (None = +infinity)

    Invariants:
        - low <= high when both are set

    Example:
        >>> ScoreRange(0, 10).clamp(12)
        10
        >>> ScoreRange(None, 0).clamp(-3)
        -3
    """

    low: Optional[float] = None
    high: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate bounds on construction."""
        if self.low is not None and self.high is not None and self.low > self.high:
            raise ValueError(f"Range low ({self.low}) exceeds high ({self.high})")

    @property
    def lower(self) -> float:
        """Lower bound with None mapped to -infinity."""
        return -math.inf if self.low is None else self.low

    @property
    def upper(self) -> float:
        """Upper bound with None mapped to +infinity."""
        return math.inf if self.high is None else self.high

    def clamp(self, value: float) -> float:
        """Clamp value into the range."""
        return min(max(value, self.lower), self.upper)

    def __repr__(self) -> str:
        return f"ScoreRange({self.low}, {self.high})"


@dataclass(frozen=True)
class MistakeCategory:
    """
    A kind of mistake a reviewer can annotate.

    Attributes:
        id: Stable identifier, referenced by the archival encoding
        label: Button/display text
        message: Canned message shown for fixed-penalty annotations
        scoring: Callable mapping this category's annotations to a score
        custom_penalty: True if each annotation carries its own penalty

    Example:
        >>> from review_toolkit.mapper.penalties import stacking_penalty
        >>> cat = MistakeCategory("jdEmpty", "JavaDoc Empty",
        ...                       "JavaDoc is empty", stacking_penalty(-0.5))
    """

    id: str
    label: str
    message: str = field(compare=False)
    scoring: ScoringFunction = field(compare=False, repr=False)
    custom_penalty: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("MistakeCategory id must not be empty")
        if not callable(self.scoring):
            raise ValueError(f"Scoring for category {self.id!r} is not callable")

    def score(self, annotations: Sequence[Annotation]) -> float:
        """Run the injected scoring function."""
        return self.scoring(annotations)


@dataclass(frozen=True)
class RatingGroup:
    """
    A named group of mistake categories scored together.

    Attributes:
        id: Stable identifier
        name: Display name used in feedback texts
        categories: Owned categories, in display order
        range: Optional inclusive clamp for the group's summed score

    Invariants:
        - category ids are unique within the group
    """

    id: str
    name: str
    categories: Tuple[MistakeCategory, ...] = ()
    range: Optional[ScoreRange] = None

    def __post_init__(self) -> None:
        ids = [c.id for c in self.categories]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(
                f"Duplicate category ids in rating group {self.id!r}: {duplicates}"
            )

    @property
    def has_range(self) -> bool:
        return self.range is not None

    def clamp(self, value: float) -> float:
        """Clamp value to the group's range (identity if unranged)."""
        if self.range is None:
            return value
        return self.range.clamp(value)


def index_categories(
    groups: Sequence[RatingGroup],
) -> dict[str, Tuple[RatingGroup, MistakeCategory]]:
    """
    Map each category id to its owning group and the category itself.

    Args:
        groups: Rating groups of the grading scheme

    Returns:
        Dict keyed by category id, in group then category order

    Raises:
        ValueError: If a category id is owned by more than one group
    """
    index: dict[str, Tuple[RatingGroup, MistakeCategory]] = {}
    for group in groups:
        for category in group.categories:
            if category.id in index:
                owner = index[category.id][0]
                raise ValueError(
                    f"Category {category.id!r} owned by both {owner.id!r} and {group.id!r}"
                )
            index[category.id] = (group, category)
    return index
