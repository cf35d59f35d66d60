"""
Content helpers shared by the inclusion pipeline and callers embedding
fragments into other containers (modals, cards, …).
"""

from __future__ import annotations

import html
import re
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .model import (
    Block, Code, Container, Emph, Header, Inline, Other, Paragraph, ParsedSections,
    RawBlock, Rule, Str, Strong,
)

_CODE_METADATA = re.compile(r"^\s*.*?\|\s*filename:\s*([\w.\-]+)")


def stringify(node: Union[Block, Inline, Iterable[Inline]]) -> str:
    """Plain text of a node or of an inline sequence."""
    if isinstance(node, str):
        return node
    if isinstance(node, (Str, Code)):
        return node.text
    if isinstance(node, (Strong, Emph, Header, Paragraph)):
        return stringify(node.content)
    if isinstance(node, (Other, RawBlock)):
        return node.text
    if isinstance(node, Container):
        return "\n".join(stringify(c) for c in node.children)
    if isinstance(node, Rule):
        return ""
    return "".join(stringify(x) for x in node)


def raw_header(
    level: int,
    text: str,
    identifier: str = "",
    classes: Sequence[str] = (),
    attributes: Sequence[Tuple[str, str]] = (),
) -> str:
    """HTML heading ``<hN id=… class=…>text</hN>``."""
    attrs: List[str] = []
    if identifier:
        attrs.append(f'id="{html.escape(identifier)}"')
    if classes:
        attrs.append(f'class="{html.escape(" ".join(classes))}"')
    for k, v in attributes:
        attrs.append(f'{k}="{html.escape(v)}"')
    open_tag = f"h{level}" + ("" if not attrs else " " + " ".join(attrs))
    return f"<{open_tag}>{html.escape(text, quote=False)}</h{level}>"


def protect_headers(blocks: Sequence[Block], id_prefix: Optional[str] = None, fmt: str = "html") -> List[Block]:
    """
    Replace top-level headers with raw headings so they stay out of the host
    document's outline (and its identifier namespace when prefixed).
    """
    protected: List[Block] = []
    for block in blocks:
        if not isinstance(block, Header):
            protected.append(block)
            continue
        identifier = block.identifier
        if identifier and id_prefix:
            identifier = id_prefix + identifier
        protected.append(RawBlock(
            fmt,
            raw_header(block.level, stringify(block.content), identifier, block.classes, block.attributes),
        ))
    return protected


def parse_sections(blocks: Optional[Sequence[Block]]) -> ParsedSections:
    """
    Split content into title / body / footer:
      • the first header becomes the title (its level defaults to 2 when absent)
      • blocks before the first horizontal rule → body
      • blocks after it → footer
    """
    result = ParsedSections()
    if not blocks:
        return result

    found_header = False
    found_rule = False
    for block in blocks:
        if not found_header and isinstance(block, Header):
            result.header_text = stringify(block.content)
            result.header_level = block.level
            found_header = True
        elif isinstance(block, Rule):
            found_rule = True
        elif not found_rule:
            result.body_blocks.append(block)
        else:
            result.footer_blocks.append(block)
    return result


def extract_code_metadata(code_text: Optional[str], pattern: Optional[str] = None) -> Tuple[Optional[str], Optional[str]]:
    """
    ``"python | filename: app.py\\nprint(1)"`` → ("app.py", "\\nprint(1)").
    Without metadata the text is returned untouched with filename None.
    """
    if not code_text:
        return None, code_text
    rx = re.compile(pattern) if pattern else _CODE_METADATA
    m = rx.search(code_text)
    if not m:
        return None, code_text
    return m.group(1), code_text[:m.start()] + code_text[m.end():]


__all__ = ["stringify", "raw_header", "protect_headers", "parse_sections", "extract_code_metadata"]
