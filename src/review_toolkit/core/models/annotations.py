"""
Module: annotations

Purpose:
    Provides the Annotation dataclass - one reviewer remark attached to a
    source line and a mistake category. Annotations are produced by the
    external review tool and are read-only here.

Key Classes:
    - Annotation: Immutable review annotation

Dependencies:
    - dataclasses (std)
    - uuid (std)
    - .ratings.MistakeCategory

Used By:
    - mapper.scoring.aggregator
    - mapper.packing.archive
    - mapper.feedback
    - core.utils.serialization
"""

from __future__ import annotations

import uuid as uuid_lib
from dataclasses import dataclass, field
from typing import Optional

from .ratings import MistakeCategory


def _new_uuid() -> str:
    return str(uuid_lib.uuid4())


@dataclass(frozen=True)
class Annotation:
    """
    A single review annotation (immutable).

    Attributes:
        file_path: Source file path without the ".java" suffix
        start_line: Zero-indexed first line
        category: Mistake category this annotation belongs to
        custom_message: Reviewer text (required for custom-penalty categories)
        custom_penalty: Per-annotation penalty (custom-penalty categories only)
        end_line: Zero-indexed last line (defaults to start_line)
        uuid: Stable identifier, generated if omitted

    Invariants:
        - 0 <= start_line <= end_line
        - custom_penalty is set iff category.custom_penalty
        - custom-penalty annotations carry a custom_message

    Example:
        >>> a = Annotation("src/Main", 3, category)
        >>> a.display_line
        4
    """

    file_path: str
    start_line: int
    category: MistakeCategory
    custom_message: Optional[str] = None
    custom_penalty: Optional[float] = None
    end_line: Optional[int] = None
    uuid: str = field(default_factory=_new_uuid)

    def __post_init__(self) -> None:
        """Validate annotation on construction."""
        if self.start_line < 0:
            raise ValueError(f"start_line cannot be negative: {self.start_line}")
        if self.end_line is None:
            object.__setattr__(self, "end_line", self.start_line)
        elif self.end_line < self.start_line:
            raise ValueError(
                f"end_line ({self.end_line}) before start_line ({self.start_line})"
            )

        if self.category.custom_penalty:
            if self.custom_penalty is None or self.custom_message is None:
                raise ValueError(
                    f"Category {self.category.id!r} requires a custom message and penalty"
                )
        elif self.custom_penalty is not None:
            raise ValueError(
                f"Category {self.category.id!r} does not allow custom penalties"
            )

    @property
    def display_line(self) -> int:
        """One-indexed line number for human display."""
        return self.start_line + 1
