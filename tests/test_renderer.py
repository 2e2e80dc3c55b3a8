"""Tests for HTML output of complete documents."""

import pytest

from linemark import parse, process
from linemark.blocks import Block, BlockType, Document
from linemark.errors import RenderError
from linemark.references import LinkRefTable
from linemark.renderers import ASTRenderer, HtmlRenderer
from linemark.renderers.html import HeadingInfo, block_text
from linemark.lines import Line


class TestBlockOutput:
    """Markup emitted for each block kind."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("", ""),
            ("Hello", "<p>Hello</p>\n"),
            ("# Title", "<h1>Title</h1>\n"),
            ("#", "<h1></h1>\n"),
            ("Title\n=====\n", "<h1>Title</h1>\n"),
            ("Sub\n---\n", "<h2>Sub</h2>\n"),
            ("***", "<hr />\n"),
            ("    x < y\n", "<pre><code>x &lt; y\n</code></pre>\n"),
            ("    a\n\n    b", "<pre><code>a\n\nb\n</code></pre>\n"),
            ("      indented", "<pre><code>  indented\n</code></pre>\n"),
            ("> a\nb", "<blockquote><p>a\nb</p>\n</blockquote>\n"),
            ("- a\n- b", "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n"),
            ("1. x\n2. y", "<ol>\n<li>x</li>\n<li>y</li>\n</ol>\n"),
        ],
    )
    def test_block(self, source: str, expected: str) -> None:
        assert process(source) == expected

    def test_heading_and_list(self) -> None:
        html = process("Title\n=====\n\n* one\n* two\n")
        assert html == "<h1>Title</h1>\n<ul>\n<li>one</li>\n<li>two</li>\n</ul>\n"

    def test_loose_list_wraps_paragraphs(self) -> None:
        html = process("- a\n\n- b")
        assert html == "<ul>\n<li><p>a</p>\n</li>\n<li><p>b</p>\n</li>\n</ul>\n"

    def test_nested_list(self) -> None:
        html = process("- a\n    - b")
        assert html == "<ul>\n<li>a<ul>\n<li>b</li>\n</ul>\n</li>\n</ul>\n"

    def test_list_inside_quote(self) -> None:
        html = process("> - a\n> - b")
        assert html == "<blockquote><ul>\n<li>a</li>\n<li>b</li>\n</ul>\n</blockquote>\n"

    def test_empty_item(self) -> None:
        assert process("- \n- b") == "<ul>\n<li></li>\n<li>b</li>\n</ul>\n"


class TestTextOutput:
    """Escaping, hard breaks and spans inside blocks."""

    def test_escaping_preserves_entities(self) -> None:
        assert process("AT&T <tag> &copy;") == "<p>AT&amp;T &lt;tag&gt; &copy;</p>\n"

    def test_hard_break(self) -> None:
        assert process("one  \ntwo") == "<p>one<br />\ntwo</p>\n"

    def test_no_break_on_last_line(self) -> None:
        assert process("one  ") == "<p>one</p>\n"

    def test_single_trailing_space_is_soft(self) -> None:
        assert process("one \ntwo") == "<p>one\ntwo</p>\n"

    def test_emphasis_and_code(self) -> None:
        assert process("*a* **b** `c<d`") == "<p><em>a</em> <strong>b</strong> <code>c&lt;d</code></p>\n"

    def test_inline_link(self) -> None:
        html = process('[a](http://x.com "T")')
        assert html == '<p><a href="http://x.com" title="T">a</a></p>\n'

    def test_link_url_is_attribute_escaped(self) -> None:
        assert process("[a](/q?x=1&y=2)") == '<p><a href="/q?x=1&amp;y=2">a</a></p>\n'

    def test_image(self) -> None:
        assert process("![alt](/i.png)") == '<p><img src="/i.png" alt="alt" /></p>\n'

    def test_autolinks(self) -> None:
        assert process("<http://x.com>") == '<p><a href="http://x.com">http://x.com</a></p>\n'
        assert process("<me@x.com>") == '<p><a href="mailto:me@x.com">me@x.com</a></p>\n'


class TestReferenceLinks:
    """Links resolved through definitions."""

    def test_definition_then_use(self) -> None:
        html = process('[foo]: /url "title"\n\n[foo]\n')
        assert html == '<p><a href="/url" title="title">foo</a></p>\n'

    def test_title_on_following_line(self) -> None:
        html = process('[foo]: /url\n"title"\n\n[foo]')
        assert html == '<p><a href="/url" title="title">foo</a></p>\n'

    def test_explicit_identifier(self) -> None:
        assert process("[id]: /u\n\n[text][id]") == '<p><a href="/u">text</a></p>\n'

    def test_empty_identifier_uses_text(self) -> None:
        assert process("[Text]: /u\n\n[text][]") == '<p><a href="/u">text</a></p>\n'

    def test_use_before_definition(self) -> None:
        assert process("[x]\n\n[x]: /later") == '<p><a href="/later">x</a></p>\n'

    def test_unresolved_reference_is_literal(self) -> None:
        assert process("[nope]") == "<p>[nope]</p>\n"


class TestHtmlRenderer:
    """Renderer object behaviour."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(HtmlRenderer(), ASTRenderer)

    def test_collects_headings(self) -> None:
        renderer = HtmlRenderer()
        renderer.render(parse("# A *b*\n\ntext\n\nC\n---"))
        assert renderer.get_headings() == [HeadingInfo(1, "A b"), HeadingInfo(2, "C")]

    def test_headings_empty_before_render(self) -> None:
        assert HtmlRenderer().get_headings() == []

    def test_renderer_is_reusable(self) -> None:
        renderer = HtmlRenderer()
        doc = parse("- a\n- b")
        assert renderer.render(doc) == renderer.render(doc)

    def test_nested_root_raises(self) -> None:
        root = Block(BlockType.ROOT, children=[Block(BlockType.ROOT)])
        doc = Document(root=root, link_refs=LinkRefTable())
        with pytest.raises(RenderError, match="ROOT"):
            HtmlRenderer().render(doc)


class TestBlockText:
    """Joining leaf lines for inline parsing."""

    def test_hard_break_marker_between_lines(self) -> None:
        block = Block(lines=[Line("one   "), Line("two  ")])
        assert block_text(block) == "one  \ntwo"

    def test_blank_lines_skipped(self) -> None:
        assert block_text(Block(lines=[Line("a"), Line(""), Line("b")])) == "a\nb"
