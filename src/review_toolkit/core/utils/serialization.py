"""
Serialization Utilities

Canonical JSON text form of annotation lists, used for the archival
records that let a later review session restore the reviewer's work.

- `encode_annotations()` produces compact, key-ordered JSON. Its length is
  what the archival packer measures against the detail-text budget.
- `decode_annotations()` validates a chunk with jsonschema and resolves
  category ids against the categories of the current grading scheme.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from ..models.annotations import Annotation
from ..models.ratings import MistakeCategory
from ..schemas.validator import ValidationError, validate_annotation_list


class AnnotationEncodingError(Exception):
    """Raised when annotations cannot be encoded to JSON."""
    pass


# ─────────────────────────────────────────────────────────────────────────────
# Encoding
# ─────────────────────────────────────────────────────────────────────────────

def annotation_to_dict(annotation: Annotation) -> dict[str, Any]:
    """
    Serialize an Annotation to its archival dictionary.

    Args:
        annotation: Annotation to serialize

    Returns:
        Dict with camelCase keys; the category is referenced by id
    """
    return {
        "uuid": annotation.uuid,
        "mistakeTypeId": annotation.category.id,
        "classFilePath": annotation.file_path,
        "startLine": annotation.start_line,
        "endLine": annotation.end_line,
        "customMessage": annotation.custom_message,
        "customPenalty": annotation.custom_penalty,
    }


def encode_annotations(annotations: Sequence[Annotation]) -> str:
    """
    Encode annotations to canonical JSON text.

    Args:
        annotations: Annotations in the order they should be restored

    Returns:
        Compact JSON array

    Raises:
        AnnotationEncodingError: If a value is not JSON-encodable
            (e.g. a NaN or infinite custom penalty)
    """
    try:
        return json.dumps(
            [annotation_to_dict(a) for a in annotations],
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as e:
        raise AnnotationEncodingError(f"Cannot encode annotations: {e}") from e


# ─────────────────────────────────────────────────────────────────────────────
# Decoding
# ─────────────────────────────────────────────────────────────────────────────

def decode_annotations(
    text: str,
    categories: Mapping[str, MistakeCategory],
    *,
    path: str = "",
) -> list[Annotation]:
    """
    Decode one archival chunk back into Annotations.

    Args:
        text: JSON text produced by encode_annotations()
        categories: Known categories keyed by id
        path: Location of the chunk, used in error messages

    Returns:
        Annotations in encoded order

    Raises:
        ValidationError: If the text is not valid JSON, violates the
            schema, references an unknown category, or breaks an
            Annotation invariant
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Archived annotations are not valid JSON: {e}", path=path) from e

    validate_annotation_list(data, path=path)

    annotations = []
    for i, item in enumerate(data):
        item_path = f"{path}[{i}]"
        category = categories.get(item["mistakeTypeId"])
        if category is None:
            raise ValidationError(
                f"Unknown mistake category: {item['mistakeTypeId']!r}",
                path=f"{item_path}.mistakeTypeId",
            )
        try:
            annotations.append(Annotation(
                file_path=item["classFilePath"],
                start_line=item["startLine"],
                category=category,
                custom_message=item.get("customMessage"),
                custom_penalty=item.get("customPenalty"),
                end_line=item["endLine"],
                uuid=item["uuid"],
            ))
        except ValueError as e:
            raise ValidationError(str(e), path=item_path, errors=[str(e)]) from e
    return annotations
