import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import review_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from review_toolkit.core.models import (
    Annotation,
    MistakeCategory,
    RatingGroup,
    ScoreRange,
)
from review_toolkit.mapper.penalties import custom_penalty, stacking_penalty


# Common test fixtures
@pytest.fixture
def category_factory():
    """Factory for mistake categories scoring a fixed amount per annotation."""
    def _create(
        cid: str,
        label: str | None = None,
        points: float = -1.0,
        custom: bool = False,
        message: str = "Canned message",
    ) -> MistakeCategory:
        return MistakeCategory(
            id=cid,
            label=label or cid.capitalize(),
            message=message,
            scoring=custom_penalty() if custom else stacking_penalty(points),
            custom_penalty=custom,
        )
    return _create


@pytest.fixture
def jdoc_category(category_factory) -> MistakeCategory:
    return category_factory("jdEmpty", "JavaDoc Empty", points=-0.5, message="JavaDoc is empty")


@pytest.fixture
def custom_category(category_factory) -> MistakeCategory:
    return category_factory("custom", "Custom Penalty", custom=True)


@pytest.fixture
def style_group(jdoc_category, custom_category) -> RatingGroup:
    """Rating group with a fixed and a custom-penalty category, range [-10, 0]."""
    return RatingGroup(
        id="style",
        name="Style",
        categories=(jdoc_category, custom_category),
        range=ScoreRange(-10, 0),
    )


@pytest.fixture
def sample_annotations(jdoc_category, custom_category) -> list[Annotation]:
    return [
        Annotation("src/Main", 3, jdoc_category, uuid="a1"),
        Annotation("src/Main", 3, custom_category, "Magic number", -1.25, uuid="a2"),
        Annotation("src/Util", 10, jdoc_category, "Missing @return", uuid="a3"),
    ]
