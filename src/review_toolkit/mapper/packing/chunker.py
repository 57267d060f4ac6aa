"""
Module: mapper.packing.chunker

Purpose:
    Greedily pack text lines into chunks that each start with a header
    and never exceed a character capacity.

Key Functions:
    - pack_lines(): Main packing function

Algorithm:
    1. Open a chunk with header(1)
    2. Before appending a line, close the chunk if the line would push it
       past capacity and the chunk already holds a line
    3. A line too long for an empty chunk is hard-wrapped
    4. Close the last chunk

Used By:
    - mapper.feedback.summary: Group summary chunks
    - mapper.feedback.inline: Oversized inline feedback
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

logger = logging.getLogger(__name__)


def _no_header(chunk_number: int) -> str:
    return ""


@dataclass(frozen=True)
class ChunkedText:
    """
    Result of packing lines into chunks.

    Attributes:
        chunks: Chunk texts in generation order (never empty)
        credit_chunk_index: The one chunk that carries the group's credit;
            every other chunk carries zero
    """

    chunks: Tuple[str, ...]
    credit_chunk_index: int = 0

    def __post_init__(self) -> None:
        if not self.chunks:
            raise ValueError("ChunkedText needs at least one chunk")
        if not 0 <= self.credit_chunk_index < len(self.chunks):
            raise ValueError(f"credit_chunk_index out of range: {self.credit_chunk_index}")

    def __len__(self) -> int:
        return len(self.chunks)

    def credit_for(self, index: int, credit: float) -> float:
        """Credit of chunk `index` when the whole text is worth `credit`."""
        return credit if index == self.credit_chunk_index else 0.0


def pack_lines(
    lines: Sequence[str],
    capacity: int,
    header: Callable[[int], str] = _no_header,
) -> ChunkedText:
    """
    Pack lines into chunks of at most `capacity` characters.

    Args:
        lines: Text lines, appended verbatim (include separators yourself)
        capacity: Maximum chunk length, header included
        header: Maps the 1-based chunk number to the chunk's opening text

    Returns:
        ChunkedText crediting the first chunk

    Raises:
        ValueError: If a header alone leaves no room for content

    Example:
        >>> pack_lines(["ab", "cd", "ef"], capacity=4).chunks
        ('abcd', 'ef')
    """
    chunks: List[str] = []
    text = header(1)
    has_lines = False

    for line in lines:
        remaining = line
        while True:
            if has_lines and len(text) + len(remaining) > capacity:
                chunks.append(text)
                text = header(len(chunks) + 1)
                has_lines = False

            room = capacity - len(text)
            if len(remaining) <= room:
                text += remaining
                has_lines = True
                break

            if room <= 0:
                raise ValueError(
                    f"Chunk header of {len(text)} chars leaves no room within {capacity}"
                )
            logger.warning(
                f"Line of {len(remaining)} chars exceeds free chunk space ({room}), wrapping"
            )
            text += remaining[:room]
            remaining = remaining[room:]
            has_lines = True

    chunks.append(text)
    logger.debug(f"Packed {len(lines)} lines into {len(chunks)} chunks")
    return ChunkedText(chunks=tuple(chunks))
