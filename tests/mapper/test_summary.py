"""
Unit Tests for Rating Group Summary Feedback
"""

import pytest

from review_toolkit.core.models import Annotation, FeedbackType, MistakeCategory, RatingGroup, ScoreRange
from review_toolkit.mapper.config import MapperConfig
from review_toolkit.mapper.feedback import build_group_feedback
from review_toolkit.mapper.feedback.summary import render_headline
from review_toolkit.mapper.penalties import threshold_penalty
from review_toolkit.mapper.scoring import compute_rating_group_score


class TestRenderHeadline:
    """Tests for render_headline()."""

    def test_headline_when_ranged_then_includes_range(self, style_group):
        assert render_headline(style_group, -2.25) == "Style [-2.25 (Range: -10 -- 0) points]"

    def test_headline_when_half_open_range_then_renders_infinity(self):
        group = RatingGroup("g", "Group", range=ScoreRange(None, 0))
        assert render_headline(group, -3) == "Group [-3 (Range: -∞ -- 0) points]"

    def test_headline_when_unranged_then_omits_range(self):
        assert render_headline(RatingGroup("g", "Group"), 1.5) == "Group [1.5 points]"

    def test_headline_when_name_exceeds_max_then_name_truncated_points_kept(self, style_group):
        group = RatingGroup("g", "N" * 100, range=style_group.range)

        headline = render_headline(group, -2.25, max_chars=60)

        assert len(headline) == 60
        assert headline.endswith("... [-2.25 (Range: -10 -- 0) points]")
        assert headline.startswith("N" * 24)

    def test_headline_when_within_max_then_unchanged(self, style_group):
        assert render_headline(style_group, -2.25, max_chars=60) == render_headline(style_group, -2.25)


class TestBuildGroupFeedback:
    """Tests for build_group_feedback()."""

    def test_build_when_no_annotations_then_no_records(self, style_group):
        assert build_group_feedback(style_group, [], MapperConfig()) == []

    def test_build_when_annotated_then_lists_categories_and_locations(self, style_group, sample_annotations):
        feedbacks = build_group_feedback(style_group, sample_annotations, MapperConfig())

        assert len(feedbacks) == 1
        f = feedbacks[0]
        assert f.type is FeedbackType.MANUAL_UNREFERENCED
        assert f.credits == pytest.approx(-2.25)
        assert f.detail_text == (
            "Style [-2.25 (Range: -10 -- 0) points] (annotation 1)"
            '\n    * "JavaDoc Empty" [-1P]:'
            "\n        * src/Main at line 4"
            "\n        * src/Util at line 11"
            '\n    * "Custom Penalty" [-1.25P]:'
            "\n        * src/Main at line 4 (-1.25P)"
        )

    def test_build_when_limit_reached_then_appends_note(self, category_factory):
        c = category_factory("c", "Big", points=-8)
        group = RatingGroup("g", "Group", categories=(c,), range=ScoreRange(-10, 0))

        feedbacks = build_group_feedback(group, [Annotation("A", 0, c)] * 2, MapperConfig())

        assert feedbacks[0].credits == -10
        assert feedbacks[0].detail_text.endswith(
            "\n    * Note: The sum of penalties hit the limits for this rating group."
        )

    def test_build_when_text_exceeds_budget_then_three_chunks_credit_once(self):
        """~12000 chars of summary with a 40-char headline give 3 chunks."""
        category = MistakeCategory("t", "Threshold", "msg", threshold_penalty(-5.0))
        group = RatingGroup("g", "N" * 28, categories=(category,))
        path = "p" * 79  # 11 + 79 + 10 = 100 chars per location line
        annotations = [Annotation(path, 0, category) for _ in range(120)]
        config = MapperConfig()

        feedbacks = build_group_feedback(group, annotations, config)
        headline = render_headline(group, -5)

        assert len(headline) == 40
        assert len(feedbacks) == 3
        assert [f.credits for f in feedbacks] == [-5, 0.0, 0.0]
        for n, f in enumerate(feedbacks, 1):
            assert f.detail_text.startswith(f"{headline} (annotation {n})")
            assert len(f.detail_text) <= config.detail_text_limit
        assert sum(f.detail_text.count(" at line 1") for f in feedbacks) == 120

    def test_build_when_chunked_then_credits_sum_to_group_points(self, style_group, jdoc_category):
        annotations = [Annotation("src/" + "d" * 60, i, jdoc_category) for i in range(300)]
        config = MapperConfig(max_detail_chars=1000)

        feedbacks = build_group_feedback(style_group, annotations, config)
        result = compute_rating_group_score(style_group, annotations)

        assert len(feedbacks) > 1
        assert sum(f.credits for f in feedbacks) == result.points
        assert sum(1 for f in feedbacks if f.credits != 0) == 1

    def test_build_when_group_name_huge_then_single_record_with_points(self, jdoc_category):
        group = RatingGroup("g", "N" * 2500, categories=(jdoc_category,))
        config = MapperConfig()

        feedbacks = build_group_feedback(group, [Annotation("src/Main", 3, jdoc_category)], config)

        assert len(feedbacks) == 1
        assert feedbacks[0].credits == -0.5
        assert len(feedbacks[0].detail_text) <= config.detail_text_limit
        assert "... [-0.5 points] (annotation 1)" in feedbacks[0].detail_text
        assert feedbacks[0].detail_text.endswith("\n        * src/Main at line 4")
