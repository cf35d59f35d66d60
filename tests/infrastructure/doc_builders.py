"""
Short constructors for block trees used across tests.
"""

from __future__ import annotations

from mdext.markdown.model import Attr, Block, Container, Header, Other, Paragraph, Rule, Str


def h(level: int, text: str, identifier: str = "", classes=(), attributes=None) -> Header:
    return Header(level=level, content=(Str(text),), attr=Attr.of(identifier, classes, attributes))


def p(text: str) -> Paragraph:
    return Paragraph((Str(text),))


def div(identifier: str, *children: Block, classes=()) -> Container:
    return Container(children=tuple(children), attr=Attr.of(identifier, classes))


def hr() -> Rule:
    return Rule()


def other(text: str, kind: str = "CodeBlock") -> Other:
    return Other(kind, text)
