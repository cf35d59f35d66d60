import pytest

from mdext.markdown.attrs import parse_attr, render_attr, split_trailing_attr
from mdext.markdown.model import Attr
from mdext.markdown.slug import IdentifierRegistry, slugify_pandoc


@pytest.mark.parametrize("text, expected", [
    ("{#intro}", Attr("intro")),
    ("{#a .b .c}", Attr("a", ("b", "c"))),
    ('{.x key="two words" k2=v}', Attr("", ("x",), (("key", "two words"), ("k2", "v")))),
    ("{id=foo class='p q'}", Attr("foo", ("p", "q"))),
    ("{.dup .dup}", Attr("", ("dup",))),
    ("{}", Attr()),
])
def test_parse_attr(text, expected):
    assert parse_attr(text) == expected


def test_parse_attr_rejects_non_blocks():
    assert parse_attr("intro") is None
    assert parse_attr("{#a =}") is None


def test_split_trailing_attr():
    assert split_trailing_attr("Title {#t .c}") == ("Title", Attr("t", ("c",)))
    assert split_trailing_attr("Plain title") == ("Plain title", None)
    assert split_trailing_attr("Set {x} in code") == ("Set {x} in code", None)


def test_render_attr():
    attr = Attr("a", ("b",), (("k", 'say "hi"'),))
    assert render_attr(attr) == '{#a .b k="say &quot;hi&quot;"}'
    assert render_attr(attr, with_identifier=False) == '{.b k="say &quot;hi&quot;"}'
    assert render_attr(Attr()) == ""


@pytest.mark.parametrize("title, slug", [
    ("Getting Started", "getting-started"),
    ("1. Introduction", "introduction"),
    ("Café au lait", "café-au-lait"),
    ("**Bold** `code`", "bold-code"),
    ("snake_case and v1.2", "snake_case-and-v1.2"),
    ("!!!", "section"),
])
def test_slugify_pandoc(title, slug):
    assert slugify_pandoc(title) == slug


def test_identifier_registry_deduplicates():
    reg = IdentifierRegistry()
    reg.reserve("intro")
    assert reg.auto("Intro") == "intro-1"
    assert reg.auto("Intro") == "intro-2"
    assert reg.auto("Other") == "other"
