from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .model import Attr

# trailing "{...}" of a header line
_TRAILING_ATTR = re.compile(r"\s*(?P<attr>\{[^{}]*\})\s*$")

_TOKEN = re.compile(
    r"""
    \#(?P<id>[^\s{}]+)
  | \.(?P<cls>[^\s{}]+)
  | (?P<key>[A-Za-z_][\w.\-:]*)=(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s{}]+))
  | (?P<word>[^\s{}=]+)
    """,
    re.VERBOSE,
)


def parse_attr(text: str) -> Optional[Attr]:
    """
    Parse a Pandoc attribute block ``{#id .class key="value"}``.
    Returns None when the text is not a well-formed attribute block.
    A bare word (allowed in div fences) is treated as a class.
    """
    s = text.strip()
    if not (s.startswith("{") and s.endswith("}")):
        return None
    body = s[1:-1].strip()
    identifier = ""
    classes: List[str] = []
    pairs: List[Tuple[str, str]] = []
    pos = 0
    while pos < len(body):
        if body[pos].isspace():
            pos += 1
            continue
        m = _TOKEN.match(body, pos)
        if not m:
            return None
        if m.group("id") is not None:
            identifier = m.group("id")
        elif m.group("cls") is not None:
            classes.append(m.group("cls"))
        elif m.group("key") is not None:
            value = next(v for v in (m.group("dq"), m.group("sq"), m.group("bare")) if v is not None)
            if m.group("key") == "id":
                identifier = value
            elif m.group("key") == "class":
                classes.extend(value.split())
            else:
                pairs.append((m.group("key"), value))
        else:
            classes.append(m.group("word"))
        pos = m.end()
    return Attr.of(identifier, classes, pairs)


def split_trailing_attr(text: str) -> Tuple[str, Optional[Attr]]:
    """``Title {#id}`` → (``Title``, Attr). Text without a valid block is returned unchanged."""
    m = _TRAILING_ATTR.search(text)
    if not m:
        return text, None
    attr = parse_attr(m.group("attr"))
    if attr is None:
        return text, None
    return text[:m.start()].rstrip(), attr


def _quote(value: str) -> str:
    return '"' + value.replace('"', "&quot;") + '"'


def render_attr(attr: Attr, *, with_identifier: bool = True) -> str:
    parts: List[str] = []
    if with_identifier and attr.identifier:
        parts.append(f"#{attr.identifier}")
    parts.extend(f".{c}" for c in attr.classes)
    parts.extend(f"{k}={_quote(v)}" for k, v in attr.attributes)
    if not parts:
        return ""
    return "{" + " ".join(parts) + "}"


__all__ = ["parse_attr", "split_trailing_attr", "render_attr"]
