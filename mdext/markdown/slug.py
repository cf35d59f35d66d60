from __future__ import annotations

import re
from typing import Set

import unicodedata

_strip_markup = re.compile(r"\]\([^)]*\)|[*`~\[\]]")
_slug_drop = re.compile(r"[^\w\s\-.]+")
_slug_ws = re.compile(r"\s+")
_leading_junk = re.compile(r"^[\d_\-.]+")


def slugify_pandoc(title: str) -> str:
    """
    Pandoc-style automatic identifier:
      • strip inline markup, lower-case
      • drop everything except letters, digits, '_', '-', '.'
      • whitespace → '-'
      • drop everything up to the first letter
      • nothing left → "section"
    """
    t = unicodedata.normalize("NFKC", title)
    t = _strip_markup.sub("", t).strip().lower()
    t = _slug_drop.sub("", t)
    t = _slug_ws.sub("-", t)
    t = _leading_junk.sub("", t)
    return t or "section"


class IdentifierRegistry:
    """
    Hands out unique header identifiers within one document
    (``intro``, ``intro-1``, ``intro-2`` …), the way Pandoc does.
    """

    def __init__(self) -> None:
        self._used: Set[str] = set()

    def reserve(self, identifier: str) -> None:
        self._used.add(identifier)

    def auto(self, title: str) -> str:
        base = slugify_pandoc(title)
        candidate = base
        n = 0
        while candidate in self._used:
            n += 1
            candidate = f"{base}-{n}"
        self._used.add(candidate)
        return candidate
