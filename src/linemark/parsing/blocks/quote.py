"""Block quote decomposition."""

from __future__ import annotations

from linemark.blocks import Block, BlockType
from linemark.lexer.classifiers import classify_at, quote_prefix_length
from linemark.lexer.line_types import LineType


class BlockQuoteParsingMixin:
    """Block quote runs with lazy continuation."""

    def _parse_block_quote(self, root: Block) -> Block:
        """Split off a block quote and strip its markers.

        The quote runs until an unindented, non-quote line that follows a
        blank line. Unmarked lines directly after quote content continue the
        quote lazily::

            > line one
            line two        <- still quoted

            line three      <- ends the quote
        """
        lines = root.lines
        end = 0
        while end < len(lines):
            line = lines[end]
            if (
                not line.is_empty
                and line.prev_empty
                and line.leading == 0
                and classify_at(lines, end) is not LineType.BQUOTE
            ):
                break
            end += 1

        block = root.split(end)
        block.type = BlockType.BLOCKQUOTE
        block.remove_surrounding_empty_lines()
        self._remove_block_quote_prefix(block)
        return block

    def _remove_block_quote_prefix(self, block: Block) -> None:
        """Strip ``>`` and one following space from every marked line."""
        for index, line in enumerate(block.lines):
            prefix = quote_prefix_length(line)
            if prefix:
                line.strip_prefix(prefix)
                block.refresh_line(index)
