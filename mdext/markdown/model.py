from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union


# --- attributes ------------------------------------------------------------

@dataclass(frozen=True)
class Attr:
    """
    Pandoc-style attribute triple: identifier, classes, key/value pairs.
    Classes keep source order without duplicates; attributes keep insertion order.
    """
    identifier: str = ""
    classes: Tuple[str, ...] = ()
    attributes: Tuple[Tuple[str, str], ...] = ()

    @staticmethod
    def of(
        identifier: str = "",
        classes: Iterable[str] = (),
        attributes: Optional[Iterable[Tuple[str, str]] | dict] = None,
    ) -> Attr:
        seen: List[str] = []
        for c in classes:
            if c and c not in seen:
                seen.append(c)
        if attributes is None:
            pairs: Tuple[Tuple[str, str], ...] = ()
        elif isinstance(attributes, dict):
            pairs = tuple((str(k), str(v)) for k, v in attributes.items())
        else:
            pairs = tuple((str(k), str(v)) for k, v in attributes)
        return Attr(identifier=identifier or "", classes=tuple(seen), attributes=pairs)

    def is_empty(self) -> bool:
        return not self.identifier and not self.classes and not self.attributes

    def attribute_map(self) -> dict:
        return dict(self.attributes)


EMPTY_ATTR = Attr()


# --- inline nodes ----------------------------------------------------------

@dataclass(frozen=True)
class Str:
    """Inline Markdown text, kept verbatim."""
    text: str


@dataclass(frozen=True)
class Code:
    text: str


@dataclass(frozen=True)
class Strong:
    content: Tuple[Inline, ...] = ()


@dataclass(frozen=True)
class Emph:
    content: Tuple[Inline, ...] = ()


Inline = Union[Str, Code, Strong, Emph]


# --- block nodes -----------------------------------------------------------

@dataclass(frozen=True)
class Header:
    level: int                       # 1..6
    content: Tuple[Inline, ...] = ()
    attr: Attr = EMPTY_ATTR

    @property
    def identifier(self) -> str:
        return self.attr.identifier

    @property
    def classes(self) -> Tuple[str, ...]:
        return self.attr.classes

    @property
    def attributes(self) -> Tuple[Tuple[str, str], ...]:
        return self.attr.attributes


@dataclass(frozen=True)
class Container:
    """Fenced div (``::: {#id .class}``). Children are owned, never shared."""
    children: Tuple[Block, ...] = ()
    attr: Attr = EMPTY_ATTR

    @property
    def identifier(self) -> str:
        return self.attr.identifier

    @property
    def classes(self) -> Tuple[str, ...]:
        return self.attr.classes

    @property
    def attributes(self) -> Tuple[Tuple[str, str], ...]:
        return self.attr.attributes


@dataclass(frozen=True)
class Paragraph:
    content: Tuple[Inline, ...] = ()


@dataclass(frozen=True)
class Rule:
    """Horizontal rule."""
    pass


@dataclass(frozen=True)
class Other:
    """
    Any block the engine does not need to understand (code, lists, quotes,
    tables, raw HTML, shortcode lines). ``text`` is the original source.
    """
    kind: str
    text: str


@dataclass(frozen=True)
class RawBlock:
    """Format-specific raw output (e.g. an HTML heading)."""
    format: str
    text: str


Block = Union[Header, Container, Paragraph, Rule, Other, RawBlock]

# A parsed document is an ordered list of top-level blocks.
Document = List[Block]


@dataclass
class ParsedSections:
    """Title / body / footer split of a block list (see content.parse_sections)."""
    header_text: Optional[str] = None
    header_level: int = 2
    body_blocks: List[Block] = field(default_factory=list)
    footer_blocks: List[Block] = field(default_factory=list)


def inlines(*items: Union[str, Inline]) -> Tuple[Inline, ...]:
    """Convenience constructor: plain strings become Str nodes."""
    return tuple(Str(x) if isinstance(x, str) else x for x in items)


__all__ = [
    "Attr",
    "EMPTY_ATTR",
    "Str",
    "Code",
    "Strong",
    "Emph",
    "Inline",
    "Header",
    "Container",
    "Paragraph",
    "Rule",
    "Other",
    "RawBlock",
    "Block",
    "Document",
    "ParsedSections",
    "inlines",
]
