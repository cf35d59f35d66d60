"""
Front matter handling.

Two rules are in play:
  • strip_frontmatter: the textual strip applied before a fragment lookup
    (``---`` at the very start, up to the next ``---``-only line);
  • metadata_block: what the block reader treats as a YAML metadata block
    (``---`` on the first line followed by a non-blank line, closed by a
    ``---`` or ``...`` line, body parses as a YAML mapping).
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

_yaml = YAML(typ="safe")

_OPEN = re.compile(r"^\s*---[ \t]*\n")
_CLOSE = re.compile(r"\n---[ \t]*(?:\n|$)")

_META_OPEN = re.compile(r"^---[ \t]*$")
_META_CLOSE = re.compile(r"^(?:---|\.\.\.)[ \t]*$")


def split_frontmatter(text: str) -> Tuple[Optional[str], str]:
    """
    Split a leading YAML front matter block off the text.

    The block opens with a ``---`` line at the very start (leading blank
    space allowed) and closes with the next ``---``-only line. Without a
    closing line nothing is stripped: (None, text).
    Returns (front matter body without the fences, remaining text).
    """
    m = _OPEN.match(text)
    if not m:
        return None, text
    close = _CLOSE.search(text, m.end() - 1)
    if not close:
        return None, text
    return text[m.end():close.start() + 1], text[close.end():]


def strip_frontmatter(text: str) -> str:
    """Best-effort removal of YAML front matter; never fails."""
    _, body = split_frontmatter(text)
    return body


def _load_mapping(body: str) -> Optional[Dict[str, Any]]:
    if not body.strip():
        return {}
    try:
        data = _yaml.load(body)
    except YAMLError:
        return None
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def metadata_block(lines: List[str]) -> Tuple[Optional[Dict[str, Any]], int]:
    """
    YAML metadata block at the top of a document.

    Returns (metadata, index of the first line after the block), or
    (None, 0) when the document does not start with one. A ``---`` followed
    by a blank line is a thematic break, not metadata.
    """
    if len(lines) < 2 or not _META_OPEN.match(lines[0]) or not lines[1].strip():
        return None, 0
    for j in range(1, len(lines)):
        if _META_CLOSE.match(lines[j]):
            meta = _load_mapping("\n".join(lines[1:j]))
            if meta is None:
                return None, 0
            return meta, j + 1
    return None, 0


__all__ = ["split_frontmatter", "strip_frontmatter", "metadata_block"]
