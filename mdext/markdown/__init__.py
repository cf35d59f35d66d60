from __future__ import annotations

from .model import (
    Attr,
    Block,
    Code,
    Container,
    Document,
    Emph,
    Header,
    Other,
    Paragraph,
    ParsedSections,
    RawBlock,
    Rule,
    Str,
    Strong,
)
from .normalize import shift_headers
from .parser import parse_markdown, parse_qmd
from .render import render_markdown
from .selectors import find_block, find_container, find_section

__all__ = [
    # Model
    "Attr",
    "Block",
    "Code",
    "Container",
    "Document",
    "Emph",
    "Header",
    "Other",
    "Paragraph",
    "ParsedSections",
    "RawBlock",
    "Rule",
    "Str",
    "Strong",
    # Engine
    "find_section",
    "find_container",
    "find_block",
    "shift_headers",
    # Collaborators
    "parse_markdown",
    "parse_qmd",
    "render_markdown",
]
