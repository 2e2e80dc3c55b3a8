"""Block tree parser.

Runs the lexer over a source and decomposes the resulting lines into a
Block tree.

Architecture:
The parser uses mixins for separation of concerns:
- `BlockParsingCoreMixin`: dispatch loop, paragraphs, code, rulers
- `BlockQuoteParsingMixin`: block quotes
- `HeadlineParsingMixin`: ATX and setext headlines
- `ListParsingMixin`: ordered and unordered lists

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per parse.
Nothing is shared between instances, so separate parsers may run on
separate threads.

"""

from __future__ import annotations

from typing import TextIO

from linemark.blocks import Block, BlockType, Document
from linemark.lexer import Lexer
from linemark.parsing.blocks import BlockParsingMixin
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(BlockParsingMixin):
    """Parse a source into a Document.

    Usage:
        >>> doc = Parser("Title\\n=====\\n\\nHello").parse()
        >>> [block.type.name for block in doc.children]
        ['HEADLINE', 'PARAGRAPH']

    """

    __slots__ = ("_source", "_source_file")

    def __init__(self, source: str | TextIO, source_file: str | None = None) -> None:
        """Initialize parser.

        Args:
            source: Decoded text, or a text stream read to its end
            source_file: Optional source file path recorded on the Document
        """
        self._source = source
        self._source_file = source_file

    def parse(self) -> Document:
        """Tokenize the source and build the block tree."""
        lexer = Lexer(self._source, source_file=self._source_file)
        root = Block(BlockType.ROOT, lines=lexer.tokenize())
        root.remove_surrounding_empty_lines()
        self._build_tree(root, False)
        logger.debug("parsed %d top-level blocks", len(root.children))
        return Document(root=root, link_refs=lexer.link_refs, source_file=self._source_file)
