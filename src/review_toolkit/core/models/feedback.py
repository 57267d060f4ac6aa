"""
Module: feedback

Purpose:
    Provides the Feedback record exchanged with the grading platform, both
    for pre-existing automatic results (tests, static analysis) and for
    the manual feedback generated from annotations.

Key Classes:
    - FeedbackType: AUTOMATIC / MANUAL / MANUAL_UNREFERENCED
    - Feedback: Immutable feedback record with wire (de)serialization

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.assessment
    - mapper.feedback / mapper.packing.archive / mapper.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FeedbackType(str, Enum):
    """Origin of a feedback record."""
    AUTOMATIC = "AUTOMATIC"                      # Tests and static analysis
    MANUAL = "MANUAL"                            # Attached to a source line
    MANUAL_UNREFERENCED = "MANUAL_UNREFERENCED"  # General / summary

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Feedback:
    """
    One feedback record (immutable).

    Attributes:
        type: Feedback origin
        credits: Points added to (or, negative, removed from) the score
        detail_text: Body text, bounded in length by the producer
        text: Optional short label
        reference: Optional source reference "file:<path>.java_line:<line>"
        visibility: Optional visibility marker ("NEVER" hides the record)
        positive: Test outcome for automatic test feedback
        static_code_analysis: True for static analysis findings
        id: Platform id for pre-existing records
    """

    type: FeedbackType
    credits: float = 0.0
    detail_text: Optional[str] = None
    text: Optional[str] = None
    reference: Optional[str] = None
    visibility: Optional[str] = None
    positive: Optional[bool] = None
    static_code_analysis: bool = False
    id: Optional[int] = None

    @property
    def is_test(self) -> bool:
        """Automatic feedback without a source reference is a test result."""
        return self.reference is None

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the platform's wire format.

        Returns:
            Dict with camelCase keys; unset optional fields are omitted
        """
        d: dict[str, Any] = {
            "feedbackType": self.type.value,
            "credits": self.credits,
        }
        if self.id is not None:
            d["id"] = self.id
        if self.positive is not None:
            d["positive"] = self.positive
        if self.visibility is not None:
            d["visibility"] = self.visibility
        if self.text is not None:
            d["text"] = self.text
        if self.reference is not None:
            d["reference"] = self.reference
        if self.detail_text is not None:
            d["detailText"] = self.detail_text
        if self.static_code_analysis:
            d["staticCodeAnalysis"] = True
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Feedback:
        """
        Deserialize from the platform's wire format.

        Args:
            data: Dict with camelCase keys

        Returns:
            Feedback instance

        Raises:
            ValueError: If feedbackType is not a known type
        """
        return cls(
            type=FeedbackType(data["feedbackType"]),
            credits=float(data.get("credits") or 0.0),
            detail_text=data.get("detailText"),
            text=data.get("text"),
            reference=data.get("reference"),
            visibility=data.get("visibility"),
            positive=data.get("positive"),
            static_code_analysis=bool(data.get("staticCodeAnalysis", False)),
            id=data.get("id"),
        )
