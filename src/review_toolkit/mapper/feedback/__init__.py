"""
Module: mapper.feedback

Purpose:
    Render human-readable feedback records from annotations.

Key Functions:
    - group_by_line(): Group annotations by annotated source line
    - build_inline_feedback(): One zero-credit record per annotated line
    - build_group_feedback(): Summary chunks for one rating group
"""

from .inline import build_inline_feedback, group_by_line
from .summary import build_group_feedback

__all__ = [
    "group_by_line",
    "build_inline_feedback",
    "build_group_feedback",
]
