from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Sequence

from .model import Block, Container, Header


def find_section(blocks: Sequence[Block], section_id: str, include_heading: bool = True) -> Optional[List[Block]]:
    """
    Section rooted at the top-level header whose identifier is ``section_id``.

    Collects the blocks after that header up to (not including) the next
    header of the same or a higher level, or the end of input.

    Returns:
        None when no top-level header carries the identifier; otherwise a new
        list, possibly empty (header found, no body, include_heading=False).
    """
    if not section_id:
        return None

    found = False
    section_level = 0
    collected: List[Block] = []

    for block in blocks:
        if not found:
            if isinstance(block, Header) and block.identifier == section_id:
                found = True
                section_level = block.level
                if include_heading:
                    collected.append(block)
            continue
        if isinstance(block, Header) and block.level <= section_level:
            break
        collected.append(block)

    return collected if found else None


def iter_containers(blocks: Sequence[Block]) -> Iterator[Container]:
    """Depth-first pre-order walk over every Container in the block tree."""
    for block in blocks:
        if isinstance(block, Container):
            yield block
            yield from iter_containers(block.children)


def find_container(blocks: Sequence[Block], div_id: str, include_wrapper: bool = False) -> Optional[List[Block]]:
    """
    Children of the first Container (document order, parents before
    children) whose identifier is ``div_id``; with include_wrapper the
    container itself is returned as the only element.
    """
    if not div_id:
        return None
    for container in iter_containers(blocks):
        if container.identifier == div_id:
            return [container] if include_wrapper else list(container.children)
    return None


def find_block(blocks: Sequence[Block], predicate: Callable[[Block], bool]) -> Optional[int]:
    """Index of the first block satisfying the predicate, or None."""
    for i, block in enumerate(blocks):
        if predicate(block):
            return i
    return None


__all__ = ["find_section", "find_container", "find_block", "iter_containers"]
