"""
Unit Tests for Serialization Utilities

Tests for the canonical annotation encoding and its decoding.
"""

import json

import pytest

from review_toolkit.core.models import Annotation
from review_toolkit.core.schemas.validator import ValidationError
from review_toolkit.core.utils.serialization import (
    AnnotationEncodingError,
    annotation_to_dict,
    decode_annotations,
    encode_annotations,
)


@pytest.fixture
def categories(jdoc_category, custom_category) -> dict:
    return {c.id: c for c in (jdoc_category, custom_category)}


class TestEncodeAnnotations:
    """Tests for encode_annotations()."""

    def test_encode_when_annotation_given_then_references_category_by_id(self, sample_annotations):
        d = annotation_to_dict(sample_annotations[1])
        assert d == {
            "uuid": "a2",
            "mistakeTypeId": "custom",
            "classFilePath": "src/Main",
            "startLine": 3,
            "endLine": 3,
            "customMessage": "Magic number",
            "customPenalty": -1.25,
        }

    def test_encode_when_called_then_compact_json(self, sample_annotations):
        text = encode_annotations(sample_annotations)
        assert ", " not in text and '": ' not in text
        assert len(json.loads(text)) == 3

    def test_encode_when_empty_then_empty_array(self):
        assert encode_annotations([]) == "[]"

    def test_encode_when_nan_penalty_then_raises_encoding_error(self, custom_category):
        bad = Annotation("src/Main", 1, custom_category, "msg", float("nan"))
        with pytest.raises(AnnotationEncodingError):
            encode_annotations([bad])

    def test_encode_when_non_ascii_then_kept_verbatim(self, jdoc_category):
        a = Annotation("src/Main", 1, jdoc_category, "Überflüssig", uuid="u")
        assert "Überflüssig" in encode_annotations([a])


class TestDecodeAnnotations:
    """Tests for decode_annotations()."""

    def test_decode_when_encoded_then_restores_annotations(self, sample_annotations, categories):
        text = encode_annotations(sample_annotations)
        assert decode_annotations(text, categories) == sample_annotations

    def test_decode_when_invalid_json_then_raises_validation_error(self, categories):
        with pytest.raises(ValidationError, match="not valid JSON"):
            decode_annotations("[{", categories)

    def test_decode_when_unknown_category_then_raises_validation_error(self, sample_annotations):
        text = encode_annotations(sample_annotations)
        with pytest.raises(ValidationError, match="Unknown mistake category") as exc_info:
            decode_annotations(text, {}, path="feedbacks[3]")
        assert exc_info.value.path == "feedbacks[3][0].mistakeTypeId"

    def test_decode_when_schema_violated_then_raises_validation_error(self, categories):
        text = json.dumps([{"uuid": "x", "mistakeTypeId": "jdEmpty", "classFilePath": "A"}])
        with pytest.raises(ValidationError, match="Schema validation failed"):
            decode_annotations(text, categories)

    def test_decode_when_invariant_broken_then_raises_validation_error(self, categories):
        text = json.dumps([{
            "uuid": "x",
            "mistakeTypeId": "jdEmpty",
            "classFilePath": "A",
            "startLine": 5,
            "endLine": 1,
        }])
        with pytest.raises(ValidationError, match="before start_line"):
            decode_annotations(text, categories)
