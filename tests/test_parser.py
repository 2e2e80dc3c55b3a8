"""Tests for block decomposition into the Block tree."""

import pytest

from linemark import parse
from linemark.blocks import Block, BlockType


def kinds(blocks: list[Block]) -> list[BlockType]:
    return [block.type for block in blocks]


def texts(block: Block) -> list[str]:
    return [line.value for line in block.lines]


class TestTopLevel:
    """Sequences of top-level blocks."""

    def test_empty_document(self) -> None:
        doc = parse("")
        assert doc.root.type is BlockType.ROOT
        assert doc.children == []
        assert doc.root.lines == []

    def test_blank_document(self) -> None:
        assert parse("\n\n   \n").children == []

    def test_paragraphs_split_on_blank_lines(self) -> None:
        doc = parse("a\nb\n\nc")
        assert kinds(doc.children) == [BlockType.PARAGRAPH, BlockType.PARAGRAPH]
        assert texts(doc.children[0]) == ["a", "b"]
        assert texts(doc.children[1]) == ["c"]

    def test_ruler_between_paragraphs(self) -> None:
        doc = parse("a\n***\nb")
        assert kinds(doc.children) == [BlockType.PARAGRAPH, BlockType.RULER, BlockType.PARAGRAPH]

    def test_headline_interrupts_paragraph(self) -> None:
        doc = parse("para\n# Head")
        assert kinds(doc.children) == [BlockType.PARAGRAPH, BlockType.HEADLINE]

    def test_quote_interrupts_paragraph(self) -> None:
        doc = parse("para\n> quote")
        assert kinds(doc.children) == [BlockType.PARAGRAPH, BlockType.BLOCKQUOTE]

    def test_list_marker_does_not_interrupt_paragraph(self) -> None:
        doc = parse("para\n- not an item")
        assert kinds(doc.children) == [BlockType.PARAGRAPH]
        assert texts(doc.children[0]) == ["para", "- not an item"]

    def test_star_ruler_is_not_a_list(self) -> None:
        assert kinds(parse("* * *").children) == [BlockType.RULER]

    def test_source_file_is_recorded(self) -> None:
        assert parse("x", source_file="doc.md").source_file == "doc.md"


class TestHeadlines:
    """ATX and setext headlines."""

    @pytest.mark.parametrize(
        ("source", "depth", "text"),
        [
            ("# One", 1, "One"),
            ("## Two ##", 2, "Two"),
            ("###### Six", 6, "Six"),
            ("### Closed###", 3, "Closed"),
            ("#", 1, ""),
        ],
    )
    def test_atx(self, source: str, depth: int, text: str) -> None:
        (block,) = parse(source).children
        assert block.type is BlockType.HEADLINE
        assert block.depth == depth
        assert texts(block) == [text]

    def test_setext_level_one(self) -> None:
        (block,) = parse("Title\n=====\n").children
        assert block.type is BlockType.HEADLINE
        assert block.depth == 1
        assert texts(block) == ["Title"]

    def test_setext_level_two(self) -> None:
        (block,) = parse("Sub\n---").children
        assert block.depth == 2

    def test_setext_underline_is_discarded(self) -> None:
        doc = parse("Title\n=====\nnext")
        assert kinds(doc.children) == [BlockType.HEADLINE, BlockType.PARAGRAPH]
        assert texts(doc.children[1]) == ["next"]


class TestCode:
    """Indented code blocks."""

    def test_code_keeps_inner_blank_lines(self) -> None:
        doc = parse("    code1\n\n    code2\n\npara")
        assert kinds(doc.children) == [BlockType.CODE, BlockType.PARAGRAPH]
        assert texts(doc.children[0]) == ["    code1", "", "    code2"]

    def test_tab_indented_code(self) -> None:
        (block,) = parse("\tx = 1").children
        assert block.type is BlockType.CODE
        assert texts(block) == ["    x = 1"]


class TestBlockQuotes:
    """Quotes, lazy continuation and nesting."""

    def test_lazy_continuation(self) -> None:
        (quote,) = parse("> line one\nline two\n").children
        assert quote.type is BlockType.BLOCKQUOTE
        assert kinds(quote.children) == [BlockType.PARAGRAPH]
        assert texts(quote.children[0]) == ["line one", "line two"]

    def test_blank_line_ends_quote(self) -> None:
        doc = parse("> line one\n\nline two\n")
        assert kinds(doc.children) == [BlockType.BLOCKQUOTE, BlockType.PARAGRAPH]

    def test_blank_line_inside_quote(self) -> None:
        (quote,) = parse("> a\n>\n> b").children
        assert kinds(quote.children) == [BlockType.PARAGRAPH, BlockType.PARAGRAPH]

    def test_nested_quote(self) -> None:
        (outer,) = parse("> > inner\n> outer").children
        (inner,) = outer.children
        assert inner.type is BlockType.BLOCKQUOTE
        assert texts(inner.children[0]) == ["inner", "outer"]

    def test_quote_contains_blocks(self) -> None:
        (quote,) = parse("> # H\n> - a\n> - b").children
        assert kinds(quote.children) == [BlockType.HEADLINE, BlockType.UNORDERED_LIST]


class TestLists:
    """List runs, items, tight and loose content."""

    def test_tight_list(self) -> None:
        (lst,) = parse("- a\n- b").children
        assert lst.type is BlockType.UNORDERED_LIST
        assert kinds(lst.children) == [BlockType.LIST_ITEM, BlockType.LIST_ITEM]
        for item, text in zip(lst.children, ["a", "b"]):
            (bare,) = item.children
            assert bare.type is BlockType.NONE
            assert texts(bare) == [text]

    def test_ordered_list(self) -> None:
        (lst,) = parse("1. one\n2. two").children
        assert lst.type is BlockType.ORDERED_LIST
        assert len(lst.children) == 2

    def test_loose_list(self) -> None:
        (lst,) = parse("- a\n\n- b").children
        for item in lst.children:
            assert kinds(item.children) == [BlockType.PARAGRAPH]

    def test_nested_list_keeps_item_tight(self) -> None:
        (lst,) = parse("- a\n    - b").children
        (item,) = lst.children
        assert kinds(item.children) == [BlockType.NONE, BlockType.UNORDERED_LIST]
        (inner_item,) = item.children[1].children
        assert texts(inner_item.children[0]) == ["b"]

    def test_quote_in_item_makes_it_loose(self) -> None:
        (lst,) = parse("- a\n  > q").children
        (item,) = lst.children
        assert kinds(item.children) == [BlockType.PARAGRAPH, BlockType.BLOCKQUOTE]

    def test_lazy_item_continuation(self) -> None:
        (lst,) = parse("- a\nb").children
        (item,) = lst.children
        assert texts(item.children[0]) == ["a", "b"]

    def test_unindented_text_after_blank_ends_list(self) -> None:
        doc = parse("- a\n\npara")
        assert kinds(doc.children) == [BlockType.UNORDERED_LIST, BlockType.PARAGRAPH]

    def test_indented_paragraph_continues_item(self) -> None:
        (lst,) = parse("- a\n\n  b").children
        (item,) = lst.children
        assert kinds(item.children) == [BlockType.PARAGRAPH, BlockType.PARAGRAPH]

    def test_code_inside_item(self) -> None:
        (lst,) = parse("- a\n\n        code").children
        (item,) = lst.children
        assert kinds(item.children) == [BlockType.PARAGRAPH, BlockType.CODE]
        assert texts(item.children[1]) == ["    code"]

    def test_empty_item(self) -> None:
        (lst,) = parse("- \n- b").children
        empty, full = lst.children
        assert empty.children == []
        assert empty.lines == []
        assert full.children[0].type is BlockType.NONE

    def test_marker_and_indent_removed(self) -> None:
        (lst,) = parse("10. text").children
        assert texts(lst.children[0].children[0]) == ["text"]


class TestLinkDefinitions:
    """Definitions never appear as blocks."""

    def test_definition_is_invisible(self) -> None:
        doc = parse('[foo]: /url "t"\n\n[foo]')
        (block,) = doc.children
        assert texts(block) == ["[foo]"]
        assert doc.link_refs.get("foo").link == "/url"


class TestTreeShape:
    """Leaves own lines, internal blocks own children."""

    @pytest.mark.parametrize(
        "source",
        [
            "# H\n\npara\n\n> q\n> - a\n>   - b\n\n    code\n***\n1. x\n\n2. y",
            "- a\n  > b\n  > c\n\n      code\n- d",
        ],
    )
    def test_no_block_has_lines_and_children(self, source: str) -> None:
        for block in parse(source).root.walk():
            assert not (block.lines and block.children), block

    def test_only_root_is_root(self) -> None:
        doc = parse("- a\n> b")
        roots = [block for block in doc.root.walk() if block.type is BlockType.ROOT]
        assert roots == [doc.root]
