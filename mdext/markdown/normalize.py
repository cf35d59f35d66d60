from __future__ import annotations

from typing import List, Optional, Sequence

from .model import Block, Header, Paragraph, Strong

MIN_LEVEL = 1
MAX_LEVEL = 6


def shift_headers(blocks: Sequence[Block], shift: Optional[int]) -> Sequence[Block]:
    """
    Shift every top-level header by ``shift`` levels (positive demotes,
    negative promotes). Headers nested in containers are left alone.

      • level + shift > 6  → level 6, everything else kept
      • level + shift < 1  → Paragraph with the header text in Strong;
                             identifier/classes/attributes are dropped

    shift of 0 or None is a no-op and returns the input as is.
    Lossy at the edges: clamped or demoted headers do not shift back.
    """
    if not shift:
        return blocks

    shifted: List[Block] = []
    for block in blocks:
        if not isinstance(block, Header):
            shifted.append(block)
            continue
        new_level = block.level + shift
        if new_level < MIN_LEVEL:
            shifted.append(Paragraph((Strong(block.content),)))
            continue
        shifted.append(Header(
            level=min(new_level, MAX_LEVEL),
            content=block.content,
            attr=block.attr,
        ))
    return shifted


__all__ = ["shift_headers", "MIN_LEVEL", "MAX_LEVEL"]
