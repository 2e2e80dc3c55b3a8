"""Core block decomposition for the linemark parser.

Provides the dispatch loop and the simple runs (paragraphs, code, rulers).
Quotes, headlines and lists live in sibling mixins.

Nesting depth is bounded only by the input: containers found while
splitting a block are queued on an explicit worklist and decomposed in
turn, never by nested calls.
"""

from __future__ import annotations

from linemark.blocks import LIST_BLOCK_TYPES, Block, BlockType
from linemark.lexer.classifiers import classify_at
from linemark.lexer.line_types import BLOCK_START_TYPES, HEADLINE_TYPES, LIST_TYPES, LineType

# A container still to decompose, with its list mode
PendingBlock = tuple[Block, bool]


class BlockParsingCoreMixin:
    """Block decomposition driver.

    Required Host Methods (from other mixins):
        - _parse_block_quote(root) -> Block
        - _parse_headline(root, line_type) -> None
        - _parse_list(root, line_type) -> list[Block]
        - _remove_list_indent(block) -> None

    """

    def _build_tree(self, root: Block, list_mode: bool) -> None:
        """Decompose ``root`` and every container found below it.

        Args:
            root: Block owning the lines to partition
            list_mode: True when ``root`` is a list item
        """
        pending: list[PendingBlock] = [(root, list_mode)]
        while pending:
            block, block_list_mode = pending.pop()
            pending.extend(self._decompose(block, block_list_mode))

    def _decompose(self, root: Block, list_mode: bool) -> list[PendingBlock]:
        """Partition ``root``'s lines into typed child blocks.

        Every iteration starts on a non-blank line and splits at least that
        line off ``root``, so the loop always terminates with ``root.lines``
        empty.

        Returns:
            Block quotes and list items split off here, whose own content
            is still undecomposed.
        """
        nested: list[PendingBlock] = []
        root.remove_leading_empty_lines()
        if not root.lines:
            return nested

        if list_mode:
            self._remove_list_indent(root)
            root.remove_leading_empty_lines()

        while root.lines:
            line_type = classify_at(root.lines, 0)
            if line_type is LineType.OTHER:
                self._parse_paragraph(root, list_mode)
            elif line_type is LineType.CODE:
                self._parse_code(root)
            elif line_type is LineType.BQUOTE:
                nested.append((self._parse_block_quote(root), False))
            elif line_type is LineType.RULER:
                self._parse_ruler(root)
            elif line_type in HEADLINE_TYPES:
                self._parse_headline(root, line_type)
            else:
                nested.extend((item, True) for item in self._parse_list(root, line_type))
            root.remove_leading_empty_lines()

        # Child kinds are already set at split time
        if list_mode:
            self._promote_bare_lines(root)
        return nested

    def _parse_paragraph(self, root: Block, list_mode: bool) -> None:
        """Split off a run of text lines.

        The run ends at a blank line, a headline, ruler or quote line, and in
        list mode at a list marker. Inside a list item a run that did not
        follow a blank line stays bare (NONE) when it is the item's first
        block and was cut short by another block, or when it reaches the end
        of the item.
        """
        lines = root.lines
        was_empty = lines[0].prev_empty
        end = 0
        while end < len(lines) and not lines[end].is_empty:
            line_type = classify_at(lines, end)
            if list_mode and line_type in LIST_TYPES:
                break
            if line_type in BLOCK_START_TYPES:
                break
            end += 1

        interrupted = end < len(lines) and not lines[end].is_empty
        bare = list_mode and not was_empty
        if interrupted:
            bare = bare and not root.children
        else:
            bare = bare and end == len(lines)

        block = root.split(end)
        block.type = BlockType.NONE if bare else BlockType.PARAGRAPH

    def _parse_code(self, root: Block) -> None:
        """Split off a run of blank or 4-column indented lines."""
        lines = root.lines
        end = 0
        while end < len(lines) and (lines[end].is_empty or lines[end].leading > 3):
            end += 1
        block = root.split(end)
        block.type = BlockType.CODE
        block.remove_surrounding_empty_lines()

    def _parse_ruler(self, root: Block) -> None:
        root.split(1).type = BlockType.RULER

    def _promote_bare_lines(self, item: Block) -> None:
        """Turn bare runs of a list item into paragraphs when the item is loose.

        An item is loose when, besides its bare text, it holds a paragraph or
        any other block except a nested list.
        """
        loose = any(
            child.type is not BlockType.NONE and child.type not in LIST_BLOCK_TYPES
            for child in item.children
        )
        if not loose:
            return
        for child in item.children:
            if child.type is BlockType.NONE:
                child.type = BlockType.PARAGRAPH

