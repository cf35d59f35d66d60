from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .attrs import parse_attr, split_trailing_attr
from .frontmatter import metadata_block
from .model import Attr, Block, Container, Document, Header, Other, Paragraph, Rule, Str
from .shortcodes import match_shortcode_line
from .slug import IdentifierRegistry

_ATX = re.compile(r"^ {0,3}(?P<marks>#{1,6})(?:[ \t]+(?P<title>.*?))?[ \t]*$")
_ATX_CLOSING = re.compile(r"(?:^|[ \t]+)#+$")
_SETEXT_1 = re.compile(r"^ {0,3}=+[ \t]*$")
_SETEXT_2 = re.compile(r"^ {0,3}-+[ \t]*$")
_FENCE = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_DIV_OPEN = re.compile(r"^ {0,3}:{3,}[ \t]*(?P<attr>\{[^{}]*\}|[^\s{}:]+)[ \t]*:*[ \t]*$")
_DIV_CLOSE = re.compile(r"^ {0,3}:{3,}[ \t]*$")
_RULE = re.compile(r"^ {0,3}(?:(?:\*[ \t]*){3,}|(?:-[ \t]*){3,}|(?:_[ \t]*){3,})$")

_BLOCKQUOTE = re.compile(r"^ {0,3}>")
_LIST_ITEM = re.compile(r"^ {0,3}(?:[-*+]|\d+[.)]|#\.)(?:[ \t]+|$)")
_TABLE = re.compile(r"^ {0,3}(?:\||\+[-=+:]+\+[ \t]*$)")
_RAW_HTML = re.compile(r"^ {0,3}<(?:[A-Za-z][\w\-]*|!--|/|\?)")
_INDENTED = re.compile(r"^(?: {4}|\t)")
_CONTINUATION = re.compile(r"^(?: {2,}|\t)")


def _is_blank(line: str) -> bool:
    return not line.strip()


def _fence_end(lines: List[str], i: int, m: re.Match) -> int:
    """
    lines[i] opens a code fence (``m`` is its _FENCE match); returns the index
    right after its closing fence. An unclosed fence runs to the end of input.
    """
    marks = m.group("fence")
    closing = re.compile(rf"^ {{0,3}}{re.escape(marks[0])}{{{len(marks)},}}[ \t]*$")
    j = i + 1
    while j < len(lines):
        if closing.match(lines[j]):
            return j + 1
        j += 1
    return len(lines)


def scan_fenced(lines: List[str]) -> List[Tuple[int, int]]:
    """Code fence intervals [start, end_excl] in document order."""
    out: List[Tuple[int, int]] = []
    i = 0
    n = len(lines)
    while i < n:
        m = _FENCE.match(lines[i])
        if m:
            end = _fence_end(lines, i, m)
            out.append((i, end))
            i = end
        else:
            i += 1
    return out


def _div_end(lines: List[str], i: int) -> Tuple[int, int]:
    """
    lines[i] opens a fenced div; returns (index of the matching close fence,
    index right after it). Nested divs and code fences are skipped.
    Unclosed div: (len, len).
    """
    depth = 1
    j = i + 1
    n = len(lines)
    while j < n:
        ln = lines[j]
        fm = _FENCE.match(ln)
        if fm:
            j = _fence_end(lines, j, fm)
            continue
        if _DIV_OPEN.match(ln):
            depth += 1
        elif _DIV_CLOSE.match(ln):
            depth -= 1
            if depth == 0:
                return j, j + 1
        j += 1
    return n, n


def _other_kind(line: str) -> Optional[str]:
    if _BLOCKQUOTE.match(line):
        return "BlockQuote"
    if _LIST_ITEM.match(line):
        return "List"
    if _TABLE.match(line):
        return "Table"
    if _RAW_HTML.match(line):
        return "RawHtml"
    if _INDENTED.match(line):
        return "IndentedCode"
    return None


class _BlockParser:
    """
    Line-oriented reader for the subset of Pandoc Markdown the engine needs:
    headers (ATX/Setext, attribute blocks), fenced divs, fenced code,
    thematic breaks and paragraphs. Everything else becomes Other.
    """

    def __init__(self, *, qmd: bool):
        self.qmd = qmd
        self.ids = IdentifierRegistry()

    # --- headers --------------------------------------------------------
    def _header(self, level: int, title: str, attr: Optional[Attr]) -> Header:
        attr = attr or Attr()
        if attr.identifier:
            self.ids.reserve(attr.identifier)
        else:
            attr = Attr(self.ids.auto(title), attr.classes, attr.attributes)
        content = (Str(title),) if title else ()
        return Header(level=level, content=content, attr=attr)

    def _atx(self, line: str) -> Optional[Header]:
        m = _ATX.match(line)
        if not m:
            return None
        title, attr = split_trailing_attr(m.group("title") or "")
        title = _ATX_CLOSING.sub("", title).strip()
        return self._header(len(m.group("marks")), title, attr)

    def _setext(self, level: int, line: str) -> Header:
        title, attr = split_trailing_attr(line.strip())
        return self._header(level, title, attr)

    # --- main loop ------------------------------------------------------
    def parse(self, lines: List[str]) -> List[Block]:
        out: List[Block] = []
        i = 0
        n = len(lines)
        while i < n:
            line = lines[i]
            if _is_blank(line):
                i += 1
                continue

            fm = _FENCE.match(line)
            if fm:
                end = _fence_end(lines, i, fm)
                out.append(Other("CodeBlock", "\n".join(lines[i:end])))
                i = end
                continue

            m = _DIV_OPEN.match(line)
            if m:
                raw = m.group("attr")
                attr = (parse_attr(raw) or Attr()) if raw.startswith("{") else Attr.of(classes=[raw])
                close, end = _div_end(lines, i)
                children = self.parse(lines[i + 1:close])
                out.append(Container(children=tuple(children), attr=attr))
                i = end
                continue

            if _DIV_CLOSE.match(line):
                # stray closing fence without an opener
                out.append(Other("Raw", line))
                i += 1
                continue

            header = self._atx(line)
            if header is not None:
                out.append(header)
                i += 1
                continue

            if _RULE.match(line):
                out.append(Rule())
                i += 1
                continue

            if self.qmd and match_shortcode_line(line) is not None:
                out.append(Other("Shortcode", line.strip()))
                i += 1
                continue

            kind = _other_kind(line)
            if kind is not None:
                i = self._consume_other(lines, i, kind, out)
                continue

            i = self._consume_paragraph(lines, i, out)
        return out

    def _consume_other(self, lines: List[str], i: int, kind: str, out: List[Block]) -> int:
        n = len(lines)
        j = i + 1
        while j < n:
            if not _is_blank(lines[j]):
                j += 1
                continue
            if kind != "List":
                break
            # loose lists: keep going while the next live line continues the list
            k = j
            while k < n and _is_blank(lines[k]):
                k += 1
            if k < n and (_LIST_ITEM.match(lines[k]) or _CONTINUATION.match(lines[k])):
                j = k
                continue
            break
        out.append(Other(kind, "\n".join(lines[i:j])))
        return j

    def _consume_paragraph(self, lines: List[str], i: int, out: List[Block]) -> int:
        n = len(lines)
        buf: List[str] = []
        j = i
        while j < n:
            ln = lines[j]
            if _is_blank(ln):
                break
            if buf and (_FENCE.match(ln) or _DIV_OPEN.match(ln) or _DIV_CLOSE.match(ln) or _ATX.match(ln)):
                break
            if buf and (_SETEXT_1.match(ln) or _SETEXT_2.match(ln)):
                level = 1 if _SETEXT_1.match(ln) else 2
                title = buf.pop()
                if buf:
                    out.append(Paragraph((Str("\n".join(buf)),)))
                out.append(self._setext(level, title))
                return j + 1
            buf.append(ln.strip())
            j += 1
        if buf:
            out.append(Paragraph((Str("\n".join(buf)),)))
        return j


def _parse(text: str, *, qmd: bool) -> Document:
    lines = text.splitlines()
    _, start = metadata_block(lines)
    return _BlockParser(qmd=qmd).parse(lines[start:])


def parse_markdown(text: str) -> Document:
    """
    Generic Markdown reader.
    Shortcodes are expected to be escaped by the caller and stay literal text.
    """
    return _parse(text, qmd=False)


def parse_qmd(text: str) -> Document:
    """
    Quarto-flavoured reader: like parse_markdown, but a line holding exactly one
    ``{{< … >}}`` shortcode becomes its own Other("Shortcode") block.
    """
    return _parse(text, qmd=True)


__all__ = ["parse_markdown", "parse_qmd", "scan_fenced"]
