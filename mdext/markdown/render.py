from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from .attrs import render_attr
from .content import stringify
from .model import Block, Code, Container, Emph, Header, Inline, Other, Paragraph, RawBlock, Rule, Str, Strong
from .slug import slugify_pandoc

_BACKTICKS = re.compile(r"`+")
_VERBATIM_RAW = ("html", "markdown")


def render_inlines(content: Iterable[Inline]) -> str:
    parts: List[str] = []
    for node in content:
        if isinstance(node, Str):
            parts.append(node.text)
        elif isinstance(node, Code):
            longest = max((len(m) for m in _BACKTICKS.findall(node.text)), default=0)
            ticks = "`" * (longest + 1)
            pad = " " if node.text.startswith("`") or node.text.endswith("`") else ""
            parts.append(f"{ticks}{pad}{node.text}{pad}{ticks}")
        elif isinstance(node, Strong):
            parts.append(f"**{render_inlines(node.content)}**")
        elif isinstance(node, Emph):
            parts.append(f"*{render_inlines(node.content)}*")
        else:
            raise TypeError(f"Unsupported inline node: {type(node).__name__}")
    return "".join(parts)


def _div_depth(container: Container) -> int:
    inner = [_div_depth(c) for c in container.children if isinstance(c, Container)]
    return 1 + max(inner, default=0)


def _render_header(h: Header) -> str:
    text = render_inlines(h.content)
    # the identifier is implied when it equals the automatic one
    needs_id = bool(h.identifier) and h.identifier != slugify_pandoc(stringify(h.content))
    attr = render_attr(h.attr, with_identifier=needs_id)
    line = "#" * h.level
    if text:
        line += " " + text
    if attr:
        line += " " + attr
    return line


def _render_container(c: Container) -> str:
    fence = ":" * (2 + _div_depth(c))
    opening = f"{fence} {render_attr(c.attr) or '{}'}"
    body = render_blocks(c.children)
    if body:
        return f"{opening}\n{body}\n{fence}"
    return f"{opening}\n{fence}"


def render_block(block: Block) -> str:
    if isinstance(block, Header):
        return _render_header(block)
    if isinstance(block, Paragraph):
        return render_inlines(block.content)
    if isinstance(block, Container):
        return _render_container(block)
    if isinstance(block, Rule):
        return "* * *"
    if isinstance(block, Other):
        return block.text
    if isinstance(block, RawBlock):
        if block.format in _VERBATIM_RAW:
            return block.text
        return f"```{{={block.format}}}\n{block.text}\n```"
    raise TypeError(f"Unsupported block node: {type(block).__name__}")


def render_blocks(blocks: Sequence[Block]) -> str:
    """Blocks separated by one blank line, no trailing newline."""
    return "\n\n".join(render_block(b) for b in blocks)


def render_markdown(blocks: Sequence[Block]) -> str:
    """Whole document as Markdown text ending with a newline (empty input → "")."""
    body = render_blocks(blocks)
    return body + "\n" if body else ""


__all__ = ["render_inlines", "render_block", "render_blocks", "render_markdown"]
