"""
Module: mapper.config

Purpose:
    Configuration dataclass for turning annotations into an assessment.
    Immutable configuration with validation on construction. Defaults
    reproduce the grading platform's limits.

Key Classes:
    - MapperConfig: Size limits and fixed markers for the mapper

Dependencies:
    - dataclasses (std)

Used By:
    - mapper.controller: Assessment assembly
    - mapper.feedback: Inline and summary feedback
    - mapper.packing.archive: Archival packing
"""

from __future__ import annotations

from dataclasses import dataclass


# Platform limit on a feedback's detailText
DEFAULT_MAX_DETAIL_CHARS = 5000
# Space left free for headline repetition
DEFAULT_SAFETY_MARGIN = 50


@dataclass(frozen=True)
class MapperConfig:
    """
    Configuration for assessment assembly (immutable).

    Attributes:
        max_detail_chars: Platform maximum for a feedback's detail text
        safety_margin: Characters kept free below max_detail_chars
        assessment_type: Type tag of the produced assessment
        client_data_marker: Reserved `text` of archival records
        client_data_visibility: Visibility of archival records

    Example:
        >>> config = MapperConfig()
        >>> config.detail_text_limit
        4950
    """

    max_detail_chars: int = DEFAULT_MAX_DETAIL_CHARS
    safety_margin: int = DEFAULT_SAFETY_MARGIN
    assessment_type: str = "SEMI_AUTOMATIC"
    client_data_marker: str = "CLIENT_DATA"
    client_data_visibility: str = "NEVER"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_detail_chars <= 0:
            raise ValueError(f"max_detail_chars must be positive: {self.max_detail_chars}")
        if self.safety_margin < 0:
            raise ValueError(f"safety_margin must be non-negative: {self.safety_margin}")
        if self.detail_text_limit <= 0:
            raise ValueError("safety_margin exceeds max_detail_chars")
        if not self.client_data_marker:
            raise ValueError("client_data_marker must not be empty")

    @property
    def detail_text_limit(self) -> int:
        """Largest detail text any produced feedback may carry."""
        return self.max_detail_chars - self.safety_margin
