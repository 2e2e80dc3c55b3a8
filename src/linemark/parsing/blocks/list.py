"""List decomposition: list runs, item splitting and marker removal."""

from __future__ import annotations

from linemark.blocks import Block, BlockType
from linemark.lexer.classifiers import classify_at, marker_length
from linemark.lexer.line_types import LIST_TYPES, LineType
from linemark.utils.logger import get_logger

logger = get_logger(__name__)

# Indentation removed from continuation lines of an item
_ITEM_INDENT = 4


class ListParsingMixin:
    """Ordered and unordered lists."""

    def _parse_list(self, root: Block, line_type: LineType) -> list[Block]:
        """Split off a list run and partition it into items.

        The run continues over list markers, indented lines, blank lines and
        unindented lines that directly follow content (lazy continuation). It
        ends at an unindented, non-marker line that follows a blank line.

        Returns:
            The LIST_ITEM blocks, still holding their marker lines.
        """
        lines = root.lines
        end = 0
        while end < len(lines):
            line = lines[end]
            if (
                not line.is_empty
                and line.prev_empty
                and line.leading == 0
                and classify_at(lines, end) not in LIST_TYPES
            ):
                break
            end += 1

        block = root.split(end)
        block.type = (
            BlockType.ORDERED_LIST if line_type is LineType.OLIST else BlockType.UNORDERED_LIST
        )
        block.lines[0].prev_empty = False
        block.lines[-1].next_empty = False
        block.remove_surrounding_empty_lines()
        block.lines[0].prev_empty = False
        block.lines[-1].next_empty = False

        self._split_list_items(block)
        logger.debug("%s with %d items", block.type.name, len(block.children))
        return block.children

    def _split_list_items(self, block: Block) -> None:
        """Partition a list block's lines into LIST_ITEM children.

        An item starts at every list marker line, and at every unindented
        line that follows a blank line.
        """
        lines = block.lines
        starts = [0]
        for index in range(1, len(lines)):
            line = lines[index]
            if classify_at(lines, index) in LIST_TYPES or (
                not line.is_empty and line.prev_empty and line.leading == 0
            ):
                starts.append(index)
        starts.append(len(lines))

        for start, stop in zip(starts, starts[1:]):
            block.split(stop - start).type = BlockType.LIST_ITEM

    def _remove_list_indent(self, item: Block) -> None:
        """Strip list markers and item indentation from an item's lines.

        Marker lines lose their marker and one following space; other lines
        lose up to four columns of indentation.
        """
        lines = item.lines
        for index, line in enumerate(lines):
            if line.is_empty:
                continue
            line_type = classify_at(lines, index)
            if line_type in LIST_TYPES:
                line.strip_prefix(marker_length(line, line_type))
            else:
                line.strip_prefix(min(line.leading, _ITEM_INDENT))
            item.refresh_line(index)
