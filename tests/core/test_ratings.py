"""
Unit Tests for Rating Models

Tests for ScoreRange, MistakeCategory, RatingGroup and index_categories.
"""

import math

import pytest

from review_toolkit.core.models import (
    MistakeCategory,
    RatingGroup,
    ScoreRange,
    index_categories,
)


class TestScoreRange:
    """Tests for ScoreRange dataclass."""

    def test_init_when_low_exceeds_high_then_raises_error(self):
        with pytest.raises(ValueError, match="exceeds high"):
            ScoreRange(5, 1)

    def test_clamp_when_above_high_then_returns_high(self):
        assert ScoreRange(0, 10).clamp(12) == 10

    def test_clamp_when_below_low_then_returns_low(self):
        assert ScoreRange(-10, 0).clamp(-12.5) == -10

    def test_clamp_when_inside_then_unchanged(self):
        assert ScoreRange(-10, 0).clamp(-3.5) == -3.5

    def test_clamp_when_unbounded_low_then_only_caps_high(self):
        r = ScoreRange(None, 0)
        assert r.clamp(-1000) == -1000
        assert r.clamp(5) == 0
        assert r.lower == -math.inf

    def test_init_when_frozen_then_immutable(self):
        r = ScoreRange(0, 1)
        with pytest.raises(AttributeError):
            r.low = 5  # type: ignore


class TestMistakeCategory:
    """Tests for MistakeCategory dataclass."""

    def test_init_when_empty_id_then_raises_error(self):
        with pytest.raises(ValueError, match="must not be empty"):
            MistakeCategory("", "Label", "msg", lambda a: 0.0)

    def test_init_when_scoring_not_callable_then_raises_error(self):
        with pytest.raises(ValueError, match="not callable"):
            MistakeCategory("x", "Label", "msg", 5)  # type: ignore

    def test_eq_when_same_id_and_label_then_equal_regardless_of_scoring(self):
        a = MistakeCategory("x", "Label", "one", lambda a: 1.0)
        b = MistakeCategory("x", "Label", "two", lambda a: 2.0)
        assert a == b
        assert hash(a) == hash(b)

    def test_score_when_called_then_uses_injected_function(self):
        cat = MistakeCategory("x", "Label", "msg", lambda anns: -2.0 * len(anns))
        assert cat.score([object(), object()]) == -4.0


class TestRatingGroup:
    """Tests for RatingGroup dataclass."""

    def test_init_when_duplicate_category_ids_then_raises_error(self, category_factory):
        c = category_factory("dup")
        with pytest.raises(ValueError, match="Duplicate category ids"):
            RatingGroup("g", "Group", categories=(c, category_factory("dup", "Other")))

    def test_clamp_when_no_range_then_identity(self):
        group = RatingGroup("g", "Group")
        assert not group.has_range
        assert group.clamp(-1e9) == -1e9


class TestIndexCategories:
    """Tests for index_categories()."""

    def test_index_when_groups_given_then_maps_id_to_owner(self, style_group, jdoc_category):
        index = index_categories([style_group])
        assert index["jdEmpty"] == (style_group, jdoc_category)
        assert list(index) == ["jdEmpty", "custom"]

    def test_index_when_category_in_two_groups_then_raises_error(self, jdoc_category):
        g1 = RatingGroup("g1", "One", categories=(jdoc_category,))
        g2 = RatingGroup("g2", "Two", categories=(jdoc_category,))
        with pytest.raises(ValueError, match="owned by both"):
            index_categories([g1, g2])
