"""HTML renderer using StringBuilder pattern.

Walks the Block tree and emits XHTML-style markup. Leaf text is handed to
the InlineParser, which resolves reference links against the document's
LinkRefTable.

Output shape:
- Every closing block tag is followed by a newline
- ``<ul>``/``<ol>`` are followed by a newline, ``<li>``/``<p>`` are not
- Bare (NONE) list item text is emitted without a wrapper

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can share a single HtmlRenderer instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from linemark.blocks import Block, BlockType, Document
from linemark.errors import RenderError
from linemark.nodes import CodeSpan, Emphasis, Image, Inline, LineBreak, Link, Strong, Text
from linemark.parsing.inline import HARD_BREAK, InlineParser
from linemark.stringbuilder import StringBuilder
from linemark.utils.logger import get_logger
from linemark.utils.text import escape_code, escape_html, escape_text

logger = get_logger(__name__)

# Columns of indentation removed from each code line
_CODE_INDENT = 4

_BLOCK_TAGS: dict[BlockType, tuple[str, str]] = {
    BlockType.NONE: ("", ""),
    BlockType.PARAGRAPH: ("<p>", "</p>\n"),
    BlockType.CODE: ("<pre><code>", "</code></pre>\n"),
    BlockType.BLOCKQUOTE: ("<blockquote>", "</blockquote>\n"),
    BlockType.UNORDERED_LIST: ("<ul>\n", "</ul>\n"),
    BlockType.ORDERED_LIST: ("<ol>\n", "</ol>\n"),
    BlockType.LIST_ITEM: ("<li>", "</li>\n"),
}


@dataclass(frozen=True, slots=True)
class HeadingInfo:
    """Headline metadata collected during rendering (for tables of contents)."""

    level: int
    text: str


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call.
    """

    inline: InlineParser
    headings: list[HeadingInfo] = field(default_factory=list)


def block_text(block: Block) -> str:
    """Join a leaf block's lines for inline parsing.

    Lines are joined with newlines; a line ending in two or more spaces is
    joined with a hard break marker instead.

    Example:
        >>> from linemark.lines import Line
        >>> block_text(Block(lines=[Line("one  "), Line("two")]))
        'one  \\ntwo'
    """
    contents = [line for line in block.lines if not line.is_empty]
    parts: list[str] = []
    for index, line in enumerate(contents):
        parts.append(line.content)
        if index + 1 < len(contents):
            parts.append(HARD_BREAK if line.trailing >= 2 else "\n")
    return "".join(parts)


def plain_text(nodes: tuple[Inline, ...]) -> str:
    """Concatenate the visible text of inline nodes."""
    parts: list[str] = []
    for node in nodes:
        match node:
            case Text():
                parts.append(node.content)
            case CodeSpan():
                parts.append(node.code)
            case Emphasis() | Strong() | Link():
                parts.append(plain_text(node.children))
            case Image():
                parts.append(node.alt)
    return "".join(parts)


class HtmlRenderer:
    """Render a Document to HTML.

    Usage:
        >>> from linemark.parser import Parser
        >>> doc = Parser("Hello *World*").parse()
        >>> HtmlRenderer().render(doc)
        '<p>Hello <em>World</em></p>\\n'

    Thread Safety:
        Each render() call creates an independent RenderContext.
    """

    __slots__ = ("_last_context",)

    def __init__(self) -> None:
        self._last_context: RenderContext | None = None

    def render(self, doc: Document) -> str:
        """Render the document's top-level blocks in order.

        Raises:
            RenderError: if the tree holds a block kind with no HTML form
        """
        ctx = RenderContext(inline=InlineParser(doc.link_refs))
        sb = StringBuilder()
        # Blocks still to open, and closing tags still to emit
        stack: list[Block | str] = list(reversed(doc.children))
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                sb.append(item)
            else:
                self._render_block(item, sb, ctx, stack)
        self._last_context = ctx
        return sb.build()

    def get_headings(self) -> list[HeadingInfo]:
        """Headlines collected during the last render() call."""
        if self._last_context is None:
            return []
        return self._last_context.headings.copy()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(
        self, block: Block, sb: StringBuilder, ctx: RenderContext, stack: list[Block | str]
    ) -> None:
        match block.type:
            case BlockType.RULER:
                sb.append("<hr />\n")
            case BlockType.HEADLINE:
                self._render_headline(block, sb, ctx)
            case BlockType.CODE:
                self._render_code(block, sb)
            case BlockType.ROOT:
                raise RenderError("Unexpected nested root block", block.type.name)
            case _:
                self._render_container(block, sb, ctx, stack)

    def _render_container(
        self, block: Block, sb: StringBuilder, ctx: RenderContext, stack: list[Block | str]
    ) -> None:
        """Open ``block`` and schedule its children and closing tag.

        Children are pushed onto the render stack instead of rendered here,
        so nesting depth never grows the call stack.
        """
        tags = _BLOCK_TAGS.get(block.type)
        if tags is None:
            raise RenderError("No HTML form for block", block.type.name)
        open_tag, close_tag = tags
        sb.append(open_tag)
        if block.children:
            stack.append(close_tag)
            stack.extend(reversed(block.children))
        else:
            self._render_inlines(ctx.inline.parse(block_text(block)), sb)
            sb.append(close_tag)

    def _render_headline(self, block: Block, sb: StringBuilder, ctx: RenderContext) -> None:
        nodes = ctx.inline.parse(block_text(block))
        ctx.headings.append(HeadingInfo(level=block.depth, text=plain_text(nodes)))
        sb.append(f"<h{block.depth}>")
        self._render_inlines(nodes, sb)
        sb.append(f"</h{block.depth}>\n")

    def _render_code(self, block: Block, sb: StringBuilder) -> None:
        sb.append("<pre><code>")
        for line in block.lines:
            sb.append_line(escape_code(line.value[_CODE_INDENT:]))
        sb.append("</code></pre>\n")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, nodes: tuple[Inline, ...], sb: StringBuilder) -> None:
        for node in nodes:
            self._render_inline(node, sb)

    def _render_inline(self, node: Inline, sb: StringBuilder) -> None:
        match node:
            case Text():
                sb.append(escape_text(node.content))
            case Emphasis():
                sb.append("<em>")
                self._render_inlines(node.children, sb)
                sb.append("</em>")
            case Strong():
                sb.append("<strong>")
                self._render_inlines(node.children, sb)
                sb.append("</strong>")
            case CodeSpan():
                sb.append("<code>").append(escape_code(node.code)).append("</code>")
            case Link():
                sb.append(f'<a href="{escape_html(node.url)}"')
                if node.title:
                    sb.append(f' title="{escape_html(node.title)}"')
                sb.append(">")
                self._render_inlines(node.children, sb)
                sb.append("</a>")
            case Image():
                sb.append(f'<img src="{escape_html(node.url)}" alt="{escape_html(node.alt)}"')
                if node.title:
                    sb.append(f' title="{escape_html(node.title)}"')
                sb.append(" />")
            case LineBreak():
                sb.append("<br />")
            case _:
                logger.debug("Skipping unknown inline node %r", node)
