from mdext.markdown.content import (
    extract_code_metadata, parse_sections, protect_headers, raw_header, stringify,
)
from mdext.markdown.model import Paragraph, RawBlock, Str, Strong
from tests.infrastructure import div, h, hr, p


def test_stringify():
    assert stringify([Str("a "), Strong((Str("b"),))]) == "a b"
    assert stringify(h(2, "Title", "t")) == "Title"
    assert stringify(div("d", p("x"), p("y"))) == "x\ny"
    assert stringify("plain") == "plain"


def test_raw_header_escapes():
    out = raw_header(2, "A & B", "id-1", ["c1", "c2"], [("data-x", '"q"')])
    assert out == '<h2 id="id-1" class="c1 c2" data-x="&quot;q&quot;">A &amp; B</h2>'
    assert raw_header(3, "Plain") == "<h3>Plain</h3>"


def test_protect_headers_with_prefix():
    blocks = [h(2, "Title", "title"), p("body"), h(3, "No id")]
    out = protect_headers(blocks, "modal-1-")
    assert out[0] == RawBlock("html", '<h2 id="modal-1-title">Title</h2>')
    assert out[1] == p("body")
    assert out[2] == RawBlock("html", "<h3>No id</h3>")


def test_parse_sections_split_on_rule():
    blocks = [h(3, "Dialog", "dialog"), p("body 1"), p("body 2"), hr(), p("footer")]
    parsed = parse_sections(blocks)
    assert parsed.header_text == "Dialog"
    assert parsed.header_level == 3
    assert parsed.body_blocks == [p("body 1"), p("body 2")]
    assert parsed.footer_blocks == [p("footer")]


def test_parse_sections_defaults():
    parsed = parse_sections(None)
    assert (parsed.header_text, parsed.header_level) == (None, 2)
    assert parsed.body_blocks == [] and parsed.footer_blocks == []
    only_body = parse_sections([p("x"), h(2, "Later", "later")])
    assert only_body.header_text == "Later"
    assert only_body.body_blocks == [p("x")]


def test_extract_code_metadata():
    name, text = extract_code_metadata("python | filename: app.py\nprint(1)")
    assert name == "app.py"
    assert text == "\nprint(1)"
    assert extract_code_metadata("print(1)") == (None, "print(1)")
    assert extract_code_metadata("") == (None, "")
    assert extract_code_metadata(None) == (None, None)
